"""
Normal distribution functions.

Implemented by `scipy.stats.norm`.

Parameters:
    mean: finite
    std_dev: 0 < std_dev

Usage:
    normal_pdf(x, mean, std_dev)
    normal_ln_pdf(x, mean, std_dev)
    normal_cdf(x, mean, std_dev)
    normal_sf(x, mean, std_dev)

with
    x: (-inf, +inf) Float64
    mean: (-inf, +inf) Float64
    std_dev: (0, +inf) Float64

Example:
    df.lazy().dist.apply(registry, "normal_cdf", "x", pl.lit(0.0), pl.lit(1.0))
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
    distribution="normal",
    checks=(
        ParameterCheck(ErrorKind.MEAN_INVALID, "mean must be finite",
                       lambda mean, std_dev: not_finite(mean)),
        ParameterCheck(ErrorKind.STD_DEV_INVALID, "standard deviation must be finite and positive",
                       lambda mean, std_dev: not_positive(std_dev)),
    ),
    build=lambda mean, std_dev: stats.norm(mean, std_dev),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Normal PDF."""
    return ScalarUDF.create("normal_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Normal log PDF."""
    return ScalarUDF.create("normal_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Normal CDF."""
    return ScalarUDF.create("normal_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Normal SF."""
    return ScalarUDF.create("normal_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Normal distribution."""
    return _register(registry, functions())
