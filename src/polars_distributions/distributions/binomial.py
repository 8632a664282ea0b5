"""
Binomial distribution functions.

Implemented by `scipy.stats.binom`.

Parameters:
    n: n in N (natural numbers)
    p: 0 <= p <= 1

Usage:
    binomial_pmf(x, n, p)
    binomial_ln_pmf(x, n, p)
    binomial_cdf(x, n, p)
    binomial_sf(x, n, p)

with
    x: 0 <= x <= n UInt64
    n: 0 <= n UInt64
    p: [0, 1] Float64

Example:
    df.select(binomial.cdf().call(
        pl.lit(2, dtype=pl.UInt64), pl.lit(5, dtype=pl.UInt64), pl.lit(0.2),
    ))
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
    distribution="binomial",
    checks=(
        ParameterCheck(ErrorKind.PROBABILITY_INVALID, "p must be in [0, 1]",
                       lambda n, p: not_probability(p)),
    ),
    build=lambda n, p: stats.binom(n, p),
    discrete=True,
)

SIGNATURE = Signature.exact([pl.UInt64, pl.UInt64, pl.Float64])


def pmf() -> ScalarUDF:
    """ScalarUDF for the Binomial PMF."""
    return ScalarUDF.create("binomial_pmf", SIGNATURE, FunctionKind.PMF, FACTORY)


def ln_pmf() -> ScalarUDF:
    """ScalarUDF for the Binomial log PMF."""
    return ScalarUDF.create("binomial_ln_pmf", SIGNATURE, FunctionKind.LN_PMF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Binomial CDF."""
    return ScalarUDF.create("binomial_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Binomial SF."""
    return ScalarUDF.create("binomial_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pmf(), ln_pmf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Binomial distribution."""
    return _register(registry, functions())
