"""
Cauchy distribution functions.

Implemented by `scipy.stats.cauchy`.

Parameters:
    x0: location, finite
    gamma: scale, 0 < gamma

Usage:
    cauchy_pdf(x, x0, gamma)
    cauchy_ln_pdf(x, x0, gamma)
    cauchy_cdf(x, x0, gamma)
    cauchy_sf(x, x0, gamma)

with
    x: (-inf, +inf) Float64
    x0: (-inf, +inf) Float64
    gamma: (0, +inf) Float64

Example:
    df.select(cauchy.pdf().call(pl.lit(-1.0), pl.lit(0.0), pl.lit(0.5)))
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
    distribution="cauchy",
    checks=(
        ParameterCheck(ErrorKind.LOCATION_INVALID, "location must be finite",
                       lambda loc, scale: not_finite(loc)),
        ParameterCheck(ErrorKind.SCALE_INVALID, "scale must be finite and positive",
                       lambda loc, scale: not_positive(scale)),
    ),
    build=lambda loc, scale: stats.cauchy(loc, scale),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Cauchy PDF."""
    return ScalarUDF.create("cauchy_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Cauchy log PDF."""
    return ScalarUDF.create("cauchy_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Cauchy CDF."""
    return ScalarUDF.create("cauchy_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Cauchy SF."""
    return ScalarUDF.create("cauchy_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Cauchy distribution."""
    return _register(registry, functions())
