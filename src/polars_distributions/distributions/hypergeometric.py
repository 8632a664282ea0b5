"""
Hypergeometric distribution functions.

Implemented by `scipy.stats.hypergeom`: the number of successes k in n
draws, without replacement, from a population of N items of which K are
successes.

Usage:
    hypergeometric_pmf(k, N, K, n)
    hypergeometric_ln_pmf(k, N, K, n)
    hypergeometric_cdf(k, N, K, n)
    hypergeometric_sf(k, N, K, n)

with
    k: [max(0, n + K - N), min(n, K)] UInt64
    N: [0, +inf) UInt64
    K: [0, N] UInt64
    n: [0, N] UInt64

An empty population (N = 0) forces K = n = 0, so all mass sits at k = 0.
scipy cannot build that case, so it is evaluated as a population of one
with no successes and no draws, which has the same distribution.

Example:
    df.select(hypergeometric.ln_pmf().call(
        pl.lit(25, dtype=pl.UInt64), pl.lit(500, dtype=pl.UInt64),
        pl.lit(50, dtype=pl.UInt64), pl.lit(100, dtype=pl.UInt64),
    ))
"""

from __future__ import annotations

import numpy as np
import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import DistributionFactory, ParameterCheck
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature

FACTORY = DistributionFactory(
    distribution="hypergeometric",
    checks=(
        ParameterCheck(ErrorKind.TOO_MANY_SUCCESSES, "successes K exceed population N",
                       lambda population, successes, draws: successes > population),
        ParameterCheck(ErrorKind.TOO_MANY_DRAWS, "draws n exceed population N",
                       lambda population, successes, draws: draws > population),
    ),
    # scipy names them M (population), n (successes), N (draws) and rejects M = 0
    build=lambda population, successes, draws: stats.hypergeom(
        np.where(population == 0, 1.0, population), successes, draws
    ),
    discrete=True,
)

SIGNATURE = Signature.uniform(4, pl.UInt64)


def pmf() -> ScalarUDF:
    """ScalarUDF for the Hypergeometric PMF."""
    return ScalarUDF.create("hypergeometric_pmf", SIGNATURE, FunctionKind.PMF, FACTORY)


def ln_pmf() -> ScalarUDF:
    """ScalarUDF for the Hypergeometric log PMF."""
    return ScalarUDF.create("hypergeometric_ln_pmf", SIGNATURE, FunctionKind.LN_PMF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Hypergeometric CDF."""
    return ScalarUDF.create("hypergeometric_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Hypergeometric SF."""
    return ScalarUDF.create("hypergeometric_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pmf(), ln_pmf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Hypergeometric distribution."""
    return _register(registry, functions())
