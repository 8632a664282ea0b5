"""
Triangular distribution functions.

Implemented by `scipy.stats.triang`, reparameterised from (min, max, mode)
to c = (mode - min) / (max - min), loc = min, scale = max - min.

Parameters:
    min: finite
    max: finite, min < max
    mode: finite, min <= mode <= max

Usage:
    triangular_pdf(x, min, max, mode)
    triangular_ln_pdf(x, min, max, mode)
    triangular_cdf(x, min, max, mode)
    triangular_sf(x, min, max, mode)

with
    x: [min, max] Float64
    min: (-inf, +inf) Float64
    max: (-inf, +inf) Float64
    mode: [min, max] Float64
"""

from __future__ import annotations

import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import DistributionFactory, ParameterCheck, not_finite
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature


def _build(low, high, mode):
    width = high - low
    return stats.triang((mode - low) / width, loc=low, scale=width)


FACTORY = DistributionFactory(
    distribution="triangular",
    checks=(
        ParameterCheck(ErrorKind.MIN_INVALID, "min must be finite",
                       lambda low, high, mode: not_finite(low)),
        ParameterCheck(ErrorKind.MAX_INVALID, "max must be finite",
                       lambda low, high, mode: not_finite(high)),
        ParameterCheck(ErrorKind.MODE_INVALID, "mode must be finite",
                       lambda low, high, mode: not_finite(mode)),
        ParameterCheck(ErrorKind.MODE_OUT_OF_RANGE, "mode must lie within [min, max]",
                       lambda low, high, mode: (mode < low) | (mode > high)),
        ParameterCheck(ErrorKind.MIN_EQUALS_MAX, "min must differ from max",
                       lambda low, high, mode: low == high),
    ),
    build=_build,
)

SIGNATURE = Signature.uniform(4, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Triangular PDF."""
    return ScalarUDF.create("triangular_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Triangular log PDF."""
    return ScalarUDF.create("triangular_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Triangular CDF."""
    return ScalarUDF.create("triangular_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Triangular SF."""
    return ScalarUDF.create("triangular_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Triangular distribution."""
    return _register(registry, functions())
