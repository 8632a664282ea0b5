"""
Exponential distribution functions.

Implemented by `scipy.stats.expon` with scale 1 / rate.

Parameters:
    lambda: rate, 0 < lambda

Usage:
    exp_pdf(x, lambda)
    exp_ln_pdf(x, lambda)
    exp_cdf(x, lambda)
    exp_sf(x, lambda)

with
    x: [0, +inf) Float64
    lambda: (0, +inf) Float64

Example:
    df.select(exp.cdf().call(pl.lit(1.0), pl.lit(0.25)))
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
    distribution="exp",
    checks=(
        ParameterCheck(ErrorKind.RATE_INVALID, "rate must be finite and positive",
                       lambda rate: not_positive(rate)),
    ),
    build=lambda rate: stats.expon(scale=1.0 / rate),
)

SIGNATURE = Signature.uniform(2, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Exponential PDF."""
    return ScalarUDF.create("exp_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Exponential log PDF."""
    return ScalarUDF.create("exp_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Exponential CDF."""
    return ScalarUDF.create("exp_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Exponential SF."""
    return ScalarUDF.create("exp_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Exponential distribution."""
    return _register(registry, functions())
