"""
Geometric distribution functions.

Implemented by `scipy.stats.geom`: the number of trials up to and
including the first success, so the support starts at 1.

Parameters:
    p: 0 < p <= 1

Usage:
    geometric_pmf(x, p)
    geometric_ln_pmf(x, p)
    geometric_cdf(x, p)
    geometric_sf(x, p)

with
    x: [1, +inf) UInt64
    p: (0, 1] Float64
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
    distribution="geometric",
    checks=(
        ParameterCheck(ErrorKind.PROBABILITY_INVALID, "p must be in (0, 1]",
                       lambda p: ~((p > 0) & (p <= 1))),
    ),
    build=lambda p: stats.geom(p),
    discrete=True,
)

SIGNATURE = Signature.exact([pl.UInt64, pl.Float64])


def pmf() -> ScalarUDF:
    """ScalarUDF for the Geometric PMF."""
    return ScalarUDF.create("geometric_pmf", SIGNATURE, FunctionKind.PMF, FACTORY)


def ln_pmf() -> ScalarUDF:
    """ScalarUDF for the Geometric log PMF."""
    return ScalarUDF.create("geometric_ln_pmf", SIGNATURE, FunctionKind.LN_PMF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Geometric CDF."""
    return ScalarUDF.create("geometric_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Geometric SF."""
    return ScalarUDF.create("geometric_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pmf(), ln_pmf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Geometric distribution."""
    return _register(registry, functions())
