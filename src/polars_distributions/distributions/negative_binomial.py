"""
Negative Binomial distribution functions.

Implemented by `scipy.stats.nbinom`: the number of failures before the
r-th success.

Parameters:
    r: 0 <= r
    p: 0 <= p <= 1

scipy leaves the degenerate corners of this domain undefined. They are
filled in here:
- r = 0 or p = 1: every draw has zero failures (all mass at 0)
- p = 0 or r = +inf (with p < 1): no finite count has any mass

Usage:
    negative_binomial_pmf(x, r, p)
    negative_binomial_ln_pmf(x, r, p)
    negative_binomial_cdf(x, r, p)
    negative_binomial_sf(x, r, p)

with
    x: [0, +inf) UInt64
    r: [0, +inf] Float64
    p: [0, 1] Float64
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import DistributionFactory, ParameterCheck, not_probability
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature


@dataclass(frozen=True)
class NegativeBinomial:
    """
    scipy's nbinom with the degenerate rows replaced by their limits.

    Attributes:
        at_zero: Rows whose mass sits entirely at zero failures
        escaped: Rows whose mass lies beyond every finite count
        regular: Frozen nbinom, given placeholder parameters on degenerate rows
    """

    at_zero: np.ndarray
    escaped: np.ndarray
    regular: Any

    @classmethod
    def of(cls, r: Any, p: Any) -> NegativeBinomial:
        r = np.asarray(r, dtype=np.float64)
        p = np.asarray(p, dtype=np.float64)
        at_zero = (r == 0) | (p == 1)
        escaped = ~at_zero & ((p == 0) | np.isinf(r))
        degenerate = at_zero | escaped
        return cls(
            at_zero=at_zero,
            escaped=escaped,
            regular=stats.nbinom(np.where(degenerate, 1.0, r), np.where(degenerate, 0.5, p)),
        )

    def _select(self, regular: Any, at_zero: Any, escaped: float) -> np.ndarray:
        return np.where(self.at_zero, at_zero, np.where(self.escaped, escaped, regular))

    def pmf(self, x: Any) -> np.ndarray:
        x = np.asarray(x)
        return self._select(self.regular.pmf(x), np.where(x == 0, 1.0, 0.0), 0.0)

    def logpmf(self, x: Any) -> np.ndarray:
        x = np.asarray(x)
        return self._select(self.regular.logpmf(x), np.where(x == 0, 0.0, -np.inf), -np.inf)

    def cdf(self, x: Any) -> np.ndarray:
        x = np.asarray(x)
        return self._select(self.regular.cdf(x), np.where(x < 0, 0.0, 1.0), 0.0)

    def sf(self, x: Any) -> np.ndarray:
        x = np.asarray(x)
        return self._select(self.regular.sf(x), np.where(x < 0, 1.0, 0.0), 1.0)


FACTORY = DistributionFactory(
    distribution="negative_binomial",
    checks=(
        ParameterCheck(ErrorKind.SUCCESSES_INVALID, "r must be non-negative",
                       lambda r, p: ~(r >= 0)),
        ParameterCheck(ErrorKind.PROBABILITY_INVALID, "p must be in [0, 1]",
                       lambda r, p: not_probability(p)),
    ),
    build=NegativeBinomial.of,
    discrete=True,
)

SIGNATURE = Signature.exact([pl.UInt64, pl.Float64, pl.Float64])


def pmf() -> ScalarUDF:
    """ScalarUDF for the Negative Binomial PMF."""
    return ScalarUDF.create("negative_binomial_pmf", SIGNATURE, FunctionKind.PMF, FACTORY)


def ln_pmf() -> ScalarUDF:
    """ScalarUDF for the Negative Binomial log PMF."""
    return ScalarUDF.create("negative_binomial_ln_pmf", SIGNATURE, FunctionKind.LN_PMF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Negative Binomial CDF."""
    return ScalarUDF.create("negative_binomial_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Negative Binomial SF."""
    return ScalarUDF.create("negative_binomial_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pmf(), ln_pmf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Negative Binomial distribution."""
    return _register(registry, functions())
