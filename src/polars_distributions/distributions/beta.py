"""
Beta distribution functions.

Implemented by `scipy.stats.beta`.

Parameters:
    alpha: 0 < alpha
    beta: 0 < beta

Usage:
    beta_pdf(x, alpha, beta)
    beta_ln_pdf(x, alpha, beta)
    beta_cdf(x, alpha, beta)
    beta_sf(x, alpha, beta)

with
    x: [0, 1] Float64
    alpha: (0, +inf) Float64
    beta: (0, +inf) Float64
"""

from __future__ import annotations

import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import DistributionFactory, ParameterCheck, not_positive
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature

FACTORY = DistributionFactory(
    distribution="beta",
    checks=(
        ParameterCheck(ErrorKind.SHAPE_A_INVALID, "alpha must be finite and positive",
                       lambda a, b: not_positive(a)),
        ParameterCheck(ErrorKind.SHAPE_B_INVALID, "beta must be finite and positive",
                       lambda a, b: not_positive(b)),
    ),
    build=lambda a, b: stats.beta(a, b),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Beta PDF."""
    return ScalarUDF.create("beta_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Beta log PDF."""
    return ScalarUDF.create("beta_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Beta CDF."""
    return ScalarUDF.create("beta_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Beta SF."""
    return ScalarUDF.create("beta_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Beta distribution."""
    return _register(registry, functions())
