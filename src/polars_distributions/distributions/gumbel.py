"""
Gumbel distribution functions.

Implemented by `scipy.stats.gumbel_r` (maximum extreme value).

Parameters:
    mu: location, finite
    beta: scale, 0 < beta

Usage:
    gumbel_pdf(x, mu, beta)
    gumbel_ln_pdf(x, mu, beta)
    gumbel_cdf(x, mu, beta)
    gumbel_sf(x, mu, beta)

with
    x: (-inf, +inf) Float64
    mu: (-inf, +inf) Float64
    beta: (0, +inf) Float64
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
    distribution="gumbel",
    checks=(
        ParameterCheck(ErrorKind.LOCATION_INVALID, "location must be finite",
                       lambda loc, scale: not_finite(loc)),
        ParameterCheck(ErrorKind.SCALE_INVALID, "scale must be finite and positive",
                       lambda loc, scale: not_positive(scale)),
    ),
    build=lambda loc, scale: stats.gumbel_r(loc, scale),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Gumbel PDF."""
    return ScalarUDF.create("gumbel_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Gumbel log PDF."""
    return ScalarUDF.create("gumbel_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Gumbel CDF."""
    return ScalarUDF.create("gumbel_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Gumbel SF."""
    return ScalarUDF.create("gumbel_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Gumbel distribution."""
    return _register(registry, functions())
