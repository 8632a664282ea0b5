"""
Discrete Uniform distribution functions.

Implemented by `scipy.stats.randint` over the closed integer range
[min, max].

Usage:
    discrete_uniform_pmf(x, min, max)
    discrete_uniform_ln_pmf(x, min, max)
    discrete_uniform_cdf(x, min, max)
    discrete_uniform_sf(x, min, max)

with
    x: (-inf, +inf) Int64
    min: (-inf, max] Int64
    max: [min, +inf) Int64
"""

from __future__ import annotations

import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import DistributionFactory, ParameterCheck
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature

FACTORY = DistributionFactory(
    distribution="discrete_uniform",
    checks=(
        ParameterCheck(ErrorKind.RANGE_INVALID, "min must not exceed max",
                       lambda low, high: low > high),
    ),
    # randint excludes its upper bound
    build=lambda low, high: stats.randint(low, high + 1),
    discrete=True,
)

SIGNATURE = Signature.uniform(3, pl.Int64)


def pmf() -> ScalarUDF:
    """ScalarUDF for the Discrete Uniform PMF."""
    return ScalarUDF.create("discrete_uniform_pmf", SIGNATURE, FunctionKind.PMF, FACTORY)


def ln_pmf() -> ScalarUDF:
    """ScalarUDF for the Discrete Uniform log PMF."""
    return ScalarUDF.create("discrete_uniform_ln_pmf", SIGNATURE, FunctionKind.LN_PMF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Discrete Uniform CDF."""
    return ScalarUDF.create("discrete_uniform_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Discrete Uniform SF."""
    return ScalarUDF.create("discrete_uniform_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pmf(), ln_pmf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Discrete Uniform distribution."""
    return _register(registry, functions())
