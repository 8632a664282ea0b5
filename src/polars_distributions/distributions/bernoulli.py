"""
Bernoulli distribution functions.

Implemented by `scipy.stats.bernoulli`.

Parameters:
    p: 0 <= p <= 1

Usage:
    bernoulli_pmf(x, p)
    bernoulli_ln_pmf(x, p)
    bernoulli_cdf(x, p)
    bernoulli_sf(x, p)

with
    x: {0, 1} UInt64
    p: [0, 1] Float64

Example:
    df.select(bernoulli.cdf().call(pl.lit(0, dtype=pl.UInt64), pl.lit(0.2)))
"""

from __future__ import annotations

import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import (
    DistributionFactory,
    ParameterCheck,
    not_probability,
)
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature

FACTORY = DistributionFactory(
    distribution="bernoulli",
    checks=(
        ParameterCheck(ErrorKind.PROBABILITY_INVALID, "p must be in [0, 1]",
                       lambda p: not_probability(p)),
    ),
    build=lambda p: stats.bernoulli(p),
    discrete=True,
)

SIGNATURE = Signature.exact([pl.UInt64, pl.Float64])


def pmf() -> ScalarUDF:
    """ScalarUDF for the Bernoulli PMF."""
    return ScalarUDF.create("bernoulli_pmf", SIGNATURE, FunctionKind.PMF, FACTORY)


def ln_pmf() -> ScalarUDF:
    """ScalarUDF for the Bernoulli log PMF."""
    return ScalarUDF.create("bernoulli_ln_pmf", SIGNATURE, FunctionKind.LN_PMF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Bernoulli CDF."""
    return ScalarUDF.create("bernoulli_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Bernoulli SF."""
    return ScalarUDF.create("bernoulli_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pmf(), ln_pmf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Bernoulli distribution."""
    return _register(registry, functions())
