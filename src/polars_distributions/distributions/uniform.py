"""
Continuous Uniform distribution functions.

Implemented by `scipy.stats.uniform` with loc min and scale max - min.

Parameters:
    min: finite
    max: finite, min < max

Usage:
    uniform_pdf(x, min, max)
    uniform_ln_pdf(x, min, max)
    uniform_cdf(x, min, max)
    uniform_sf(x, min, max)

with
    x: [min, max] Float64
    min: (-inf, max) Float64
    max: (min, +inf) Float64

Example:
    df.select(uniform.pdf().call(pl.lit(2.0), pl.lit(1.0), pl.lit(3.25)))
"""

from __future__ import annotations

import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import DistributionFactory, ParameterCheck, not_finite
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature

FACTORY = DistributionFactory(
    distribution="uniform",
    checks=(
        ParameterCheck(ErrorKind.MIN_INVALID, "min must be finite",
                       lambda low, high: not_finite(low)),
        ParameterCheck(ErrorKind.MAX_INVALID, "max must be finite",
                       lambda low, high: not_finite(high)),
        ParameterCheck(ErrorKind.RANGE_INVALID, "max must be greater than min",
                       lambda low, high: high <= low),
    ),
    build=lambda low, high: stats.uniform(low, high - low),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Uniform PDF."""
    return ScalarUDF.create("uniform_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Uniform log PDF."""
    return ScalarUDF.create("uniform_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Uniform CDF."""
    return ScalarUDF.create("uniform_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Uniform SF."""
    return ScalarUDF.create("uniform_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Uniform distribution."""
    return _register(registry, functions())
