"""
Chi-squared distribution functions.

Implemented by `scipy.stats.chi2`.

Chi-squared is the Gamma(k/2, 1/2) special case, but an invalid k is
reported as FREEDOM_INVALID rather than a Gamma shape error, so callers see
the parameter they actually passed.

Parameters:
    k: degrees of freedom, 0 < k

Usage:
    chi_squared_pdf(x, k)
    chi_squared_ln_pdf(x, k)
    chi_squared_cdf(x, k)
    chi_squared_sf(x, k)

with
    x: [0, +inf) Float64
    k: (0, +inf) Float64
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
    distribution="chi_squared",
    checks=(
        ParameterCheck(ErrorKind.FREEDOM_INVALID, "degrees of freedom must be finite and positive",
                       lambda k: not_positive(k)),
    ),
    build=lambda k: stats.chi2(k),
)

SIGNATURE = Signature.uniform(2, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Chi-squared PDF."""
    return ScalarUDF.create("chi_squared_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Chi-squared log PDF."""
    return ScalarUDF.create("chi_squared_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Chi-squared CDF."""
    return ScalarUDF.create("chi_squared_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Chi-squared SF."""
    return ScalarUDF.create("chi_squared_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Chi-squared distribution."""
    return _register(registry, functions())
