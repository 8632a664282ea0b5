"""
Pareto distribution functions.

Implemented by `scipy.stats.pareto` with shape alpha and scale x_m.

Parameters:
    x_m: scale, 0 < x_m
    alpha: shape, 0 < alpha

Usage:
    pareto_pdf(x, x_m, alpha)
    pareto_ln_pdf(x, x_m, alpha)
    pareto_cdf(x, x_m, alpha)
    pareto_sf(x, x_m, alpha)

with
    x: [x_m, +inf) Float64
    x_m: (0, +inf) Float64
    alpha: (0, +inf) Float64
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
    distribution="pareto",
    checks=(
        ParameterCheck(ErrorKind.SCALE_INVALID, "scale must be finite and positive",
                       lambda scale, shape: not_positive(scale)),
        ParameterCheck(ErrorKind.SHAPE_INVALID, "shape must be finite and positive",
                       lambda scale, shape: not_positive(shape)),
    ),
    build=lambda scale, shape: stats.pareto(shape, scale=scale),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Pareto PDF."""
    return ScalarUDF.create("pareto_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Pareto log PDF."""
    return ScalarUDF.create("pareto_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Pareto CDF."""
    return ScalarUDF.create("pareto_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Pareto SF."""
    return ScalarUDF.create("pareto_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Pareto distribution."""
    return _register(registry, functions())
