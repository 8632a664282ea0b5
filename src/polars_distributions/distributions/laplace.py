"""
Laplace distribution functions.

Implemented by `scipy.stats.laplace`.

Parameters:
    mu: location, finite
    b: scale, 0 < b

Usage:
    laplace_pdf(x, mu, b)
    laplace_ln_pdf(x, mu, b)
    laplace_cdf(x, mu, b)
    laplace_sf(x, mu, b)

with
    x: (-inf, +inf) Float64
    mu: (-inf, +inf) Float64
    b: (0, +inf) Float64
"""

from __future__ import annotations

import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import (
    DistributionFactory,
    ParameterCheck,
    not_finite,
    not_positive,
)
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature

FACTORY = DistributionFactory(
    distribution="laplace",
    checks=(
        ParameterCheck(ErrorKind.LOCATION_INVALID, "location must be finite",
                       lambda loc, scale: not_finite(loc)),
        ParameterCheck(ErrorKind.SCALE_INVALID, "scale must be finite and positive",
                       lambda loc, scale: not_positive(scale)),
    ),
    build=lambda loc, scale: stats.laplace(loc, scale),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Laplace PDF."""
    return ScalarUDF.create("laplace_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Laplace log PDF."""
    return ScalarUDF.create("laplace_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Laplace CDF."""
    return ScalarUDF.create("laplace_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Laplace SF."""
    return ScalarUDF.create("laplace_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Laplace distribution."""
    return _register(registry, functions())
