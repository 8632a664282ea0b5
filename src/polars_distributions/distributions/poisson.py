"""
Poisson distribution functions.

Implemented by `scipy.stats.poisson`.

Parameters:
    lambda: 0 < lambda

Usage:
    poisson_pmf(x, lambda)
    poisson_ln_pmf(x, lambda)
    poisson_cdf(x, lambda)
    poisson_sf(x, lambda)

with
    x: [0, +inf) UInt64
    lambda: (0, +inf) Float64
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
    distribution="poisson",
    checks=(
        ParameterCheck(ErrorKind.LAMBDA_INVALID, "lambda must be finite and positive",
                       lambda lam: not_positive(lam)),
    ),
    build=lambda lam: stats.poisson(lam),
    discrete=True,
)

SIGNATURE = Signature.exact([pl.UInt64, pl.Float64])


def pmf() -> ScalarUDF:
    """ScalarUDF for the Poisson PMF."""
    return ScalarUDF.create("poisson_pmf", SIGNATURE, FunctionKind.PMF, FACTORY)


def ln_pmf() -> ScalarUDF:
    """ScalarUDF for the Poisson log PMF."""
    return ScalarUDF.create("poisson_ln_pmf", SIGNATURE, FunctionKind.LN_PMF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Poisson CDF."""
    return ScalarUDF.create("poisson_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Poisson SF."""
    return ScalarUDF.create("poisson_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pmf(), ln_pmf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Poisson distribution."""
    return _register(registry, functions())
