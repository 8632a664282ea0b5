"""
Log-normal distribution functions.

Implemented by `scipy.stats.lognorm` with shape sigma and scale e^mu, so
that ln(X) is Normal(mu, sigma).

Parameters:
    mu: location, finite
    sigma: scale, 0 < sigma

Usage:
    log_normal_pdf(x, mu, sigma)
    log_normal_ln_pdf(x, mu, sigma)
    log_normal_cdf(x, mu, sigma)
    log_normal_sf(x, mu, sigma)

with
    x: (0, +inf) Float64
    mu: (-inf, +inf) Float64
    sigma: (0, +inf) Float64
"""

from __future__ import annotations

import numpy as np
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
    distribution="log_normal",
    checks=(
        ParameterCheck(ErrorKind.LOCATION_INVALID, "location must be finite",
                       lambda mu, sigma: not_finite(mu)),
        ParameterCheck(ErrorKind.SCALE_INVALID, "scale must be finite and positive",
                       lambda mu, sigma: not_positive(sigma)),
    ),
    build=lambda mu, sigma: stats.lognorm(sigma, scale=np.exp(mu)),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Log-normal PDF."""
    return ScalarUDF.create("log_normal_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Log-normal log PDF."""
    return ScalarUDF.create("log_normal_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Log-normal CDF."""
    return ScalarUDF.create("log_normal_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Log-normal SF."""
    return ScalarUDF.create("log_normal_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Log-normal distribution."""
    return _register(registry, functions())
