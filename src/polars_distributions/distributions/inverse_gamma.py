"""
Inverse Gamma distribution functions.

Implemented by `scipy.stats.invgamma` with scale beta.

Parameters:
    alpha: shape, 0 < alpha
    beta: rate, 0 < beta

Usage:
    inverse_gamma_pdf(x, alpha, beta)
    inverse_gamma_ln_pdf(x, alpha, beta)
    inverse_gamma_cdf(x, alpha, beta)
    inverse_gamma_sf(x, alpha, beta)

with
    x: (0, +inf) Float64
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
    distribution="inverse_gamma",
    checks=(
        ParameterCheck(ErrorKind.SHAPE_INVALID, "shape must be finite and positive",
                       lambda shape, rate: not_positive(shape)),
        ParameterCheck(ErrorKind.RATE_INVALID, "rate must be finite and positive",
                       lambda shape, rate: not_positive(rate)),
    ),
    build=lambda shape, rate: stats.invgamma(shape, scale=rate),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Inverse Gamma PDF."""
    return ScalarUDF.create("inverse_gamma_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Inverse Gamma log PDF."""
    return ScalarUDF.create("inverse_gamma_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Inverse Gamma CDF."""
    return ScalarUDF.create("inverse_gamma_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Inverse Gamma SF."""
    return ScalarUDF.create("inverse_gamma_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Inverse Gamma distribution."""
    return _register(registry, functions())
