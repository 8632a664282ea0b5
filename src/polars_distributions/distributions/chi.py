"""
Chi distribution functions.

Implemented by `scipy.stats.chi`.

Parameters:
    k: degrees of freedom, k in N, 0 < k

Usage:
    chi_pdf(x, k)
    chi_ln_pdf(x, k)
    chi_cdf(x, k)
    chi_sf(x, k)

with
    x: [0, +inf) Float64
    k: [1, +inf) UInt64
"""

from __future__ import annotations

import polars as pl
from scipy import stats

from polars_distributions.domain.enums import ErrorKind, FunctionKind
from polars_distributions.engine.factory import DistributionFactory, ParameterCheck, is_zero
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register
from polars_distributions.engine.udf import ScalarUDF, Signature

FACTORY = DistributionFactory(
    distribution="chi",
    checks=(
        ParameterCheck(ErrorKind.FREEDOM_INVALID, "degrees of freedom must be at least 1",
                       lambda k: is_zero(k)),
    ),
    build=lambda k: stats.chi(k),
)

SIGNATURE = Signature.exact([pl.Float64, pl.UInt64])


def pdf() -> ScalarUDF:
    """ScalarUDF for the Chi PDF."""
    return ScalarUDF.create("chi_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Chi log PDF."""
    return ScalarUDF.create("chi_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Chi CDF."""
    return ScalarUDF.create("chi_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Chi SF."""
    return ScalarUDF.create("chi_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Chi distribution."""
    return _register(registry, functions())
