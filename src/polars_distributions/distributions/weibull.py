"""
Weibull distribution functions.

Implemented by `scipy.stats.weibull_min` with shape k and scale lambda.

Parameters:
    k: shape, 0 < k
    lambda: scale, 0 < lambda

Usage:
    weibull_pdf(x, k, lambda)
    weibull_ln_pdf(x, k, lambda)
    weibull_cdf(x, k, lambda)
    weibull_sf(x, k, lambda)

with
    x: [0, +inf) Float64
    k: (0, +inf) Float64
    lambda: (0, +inf) Float64
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
    distribution="weibull",
    checks=(
        ParameterCheck(ErrorKind.SHAPE_INVALID, "shape must be finite and positive",
                       lambda shape, scale: not_positive(shape)),
        ParameterCheck(ErrorKind.SCALE_INVALID, "scale must be finite and positive",
                       lambda shape, scale: not_positive(scale)),
    ),
    build=lambda shape, scale: stats.weibull_min(shape, scale=scale),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Weibull PDF."""
    return ScalarUDF.create("weibull_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Weibull log PDF."""
    return ScalarUDF.create("weibull_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Weibull CDF."""
    return ScalarUDF.create("weibull_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Weibull SF."""
    return ScalarUDF.create("weibull_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Weibull distribution."""
    return _register(registry, functions())
