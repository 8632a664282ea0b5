"""
Student's t distribution functions.

Implemented by `scipy.stats.t` (location-scale form).

Parameters:
    location: finite
    scale: 0 < scale
    freedom: 0 < freedom, +inf gives the Normal limit

Usage:
    students_t_pdf(x, location, scale, freedom)
    students_t_ln_pdf(x, location, scale, freedom)
    students_t_cdf(x, location, scale, freedom)
    students_t_sf(x, location, scale, freedom)

with
    x: (-inf, +inf) Float64
    location: (-inf, +inf) Float64
    scale: (0, +inf) Float64
    freedom: (0, +inf] Float64
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
    distribution="students_t",
    checks=(
        ParameterCheck(ErrorKind.LOCATION_INVALID, "location must be finite",
                       lambda loc, scale, freedom: not_finite(loc)),
        ParameterCheck(ErrorKind.SCALE_INVALID, "scale must be finite and positive",
                       lambda loc, scale, freedom: not_positive(scale)),
        ParameterCheck(ErrorKind.FREEDOM_INVALID, "degrees of freedom must be positive",
                       lambda loc, scale, freedom: ~(freedom > 0)),
    ),
    build=lambda loc, scale, freedom: stats.t(freedom, loc, scale),
)

SIGNATURE = Signature.uniform(4, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Student's t PDF."""
    return ScalarUDF.create("students_t_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Student's t log PDF."""
    return ScalarUDF.create("students_t_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Student's t CDF."""
    return ScalarUDF.create("students_t_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Student's t SF."""
    return ScalarUDF.create("students_t_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Student's t distribution."""
    return _register(registry, functions())
