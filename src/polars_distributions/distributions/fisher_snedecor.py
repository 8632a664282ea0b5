"""
Fisher-Snedecor (F) distribution functions.

Implemented by `scipy.stats.f`.

Parameters:
    d1: numerator degrees of freedom, 0 < d1
    d2: denominator degrees of freedom, 0 < d2

Usage:
    fisher_snedecor_pdf(x, d1, d2)
    fisher_snedecor_ln_pdf(x, d1, d2)
    fisher_snedecor_cdf(x, d1, d2)
    fisher_snedecor_sf(x, d1, d2)

with
    x: [0, +inf) Float64
    d1: (0, +inf) Float64
    d2: (0, +inf) Float64
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
    distribution="fisher_snedecor",
    checks=(
        ParameterCheck(ErrorKind.FREEDOM_1_INVALID, "d1 must be finite and positive",
                       lambda d1, d2: not_positive(d1)),
        ParameterCheck(ErrorKind.FREEDOM_2_INVALID, "d2 must be finite and positive",
                       lambda d1, d2: not_positive(d2)),
    ),
    build=lambda d1, d2: stats.f(d1, d2),
)

SIGNATURE = Signature.uniform(3, pl.Float64)


def pdf() -> ScalarUDF:
    """ScalarUDF for the Fisher-Snedecor PDF."""
    return ScalarUDF.create("fisher_snedecor_pdf", SIGNATURE, FunctionKind.PDF, FACTORY)


def ln_pdf() -> ScalarUDF:
    """ScalarUDF for the Fisher-Snedecor log PDF."""
    return ScalarUDF.create("fisher_snedecor_ln_pdf", SIGNATURE, FunctionKind.LN_PDF, FACTORY)


def cdf() -> ScalarUDF:
    """ScalarUDF for the Fisher-Snedecor CDF."""
    return ScalarUDF.create("fisher_snedecor_cdf", SIGNATURE, FunctionKind.CDF, FACTORY)


def sf() -> ScalarUDF:
    """ScalarUDF for the Fisher-Snedecor SF."""
    return ScalarUDF.create("fisher_snedecor_sf", SIGNATURE, FunctionKind.SF, FACTORY)


def functions() -> list[ScalarUDF]:
    return [pdf(), ln_pdf(), cdf(), sf()]


def register(registry: FunctionRegistry) -> FunctionRegistry:
    """Register the functions for the Fisher-Snedecor distribution."""
    return _register(registry, functions())
