"""
Erlang distribution functions.

A Gamma distribution with integer shape. Implemented by
`scipy.stats.erlang` with scale 1 / rate.

Parameters:
    k: shape, k in N, 0 < k
    lambda: rate, 0 < lambda

Usage:
    erlang_pdf(x, k, lambda)
    erlang_ln_pdf(x, k, lambda)
    erlang_cdf(x, k, lambda)
    erlang_sf(x, k, lambda)

with
    x: [0, +inf) Float64
    k: [1, +inf) UInt64
    lambda: (0, +inf) Float64
"""

from __future__ import annotations

import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import (
    DistributionFactory,
    ParameterCheck,
    is_zero,
    not_positive,
)
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature

FACTORY = DistributionFactory(
    distribution="erlang",
    checks=(
        ParameterCheck(ErrorKind.SHAPE_INVALID, "shape must be at least 1",
                       lambda k, rate: is_zero(k)),
        ParameterCheck(ErrorKind.RATE_INVALID, "rate must be finite and positive",
                       lambda k, rate: not_positive(rate)),
    ),
    build=lambda k, rate: stats.erlang(k, scale=1.0 / rate),
)

SIGNATURE = Signature.exact([pl.Float64, pl.UInt64, pl.Float64])


def pdf() -> ScalarUDF:
    """ScalarUDF for the Erlang PDF."""
    return ScalarUDF.create("erlang_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Erlang log PDF."""
    return ScalarUDF.create("erlang_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Erlang CDF."""
    return ScalarUDF.create("erlang_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Erlang SF."""
    return ScalarUDF.create("erlang_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Erlang distribution."""
    return _register(registry, functions())
