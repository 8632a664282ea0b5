"""
Dirac (point mass) distribution functions.

scipy.stats has no degenerate distribution, so the point mass is a small
frozen object exposing the two statistics it defines.

Parameters:
    a: a in R (real numbers), finite

Usage:
    dirac_cdf(x, a)
    dirac_sf(x, a)

with
    x: (-inf, +inf) Float64
    a: (-inf, +inf) Float64

Example:
    df.select(dirac.cdf().call(pl.lit(0.1), pl.lit(1.2)))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import polars as pl

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import DistributionFactory, ParameterCheck, not_finite
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature


@dataclass(frozen=True)
class PointMass:
    """All probability concentrated at ``value``."""

    value: Any

    def cdf(self, x: Any) -> np.ndarray:
        return np.where(np.asarray(x) < self.value, 0.0, 1.0)

    def sf(self, x: Any) -> np.ndarray:
        return np.where(np.asarray(x) < self.value, 1.0, 0.0)


FACTORY = DistributionFactory(
    distribution="dirac",
    checks=(
        ParameterCheck(ErrorKind.VALUE_INVALID, "value must be finite",
                       lambda a: not_finite(a)),
    ),
    build=lambda a: PointMass(a),
)

SIGNATURE = Signature.uniform(2, pl.Float64)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Dirac CDF."""
    return ScalarUDF.create("dirac_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Dirac SF."""
    return ScalarUDF.create("dirac_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Dirac distribution."""
    return _register(registry, functions())
