"""
Polars distribution functions.

Probability density, mass, cumulative and survival functions for 26
probability distributions, usable as Polars expressions:
- Distribution modules: one per distribution under ``distributions``
- Function namespaces: plain mappings from function name to ScalarUDF
- Polars namespaces: ``lf.dist`` and ``expr.dist``

Usage:
    import polars as pl
    from polars_distributions import create_registry

    registry = create_registry()
    result = (
        pl.LazyFrame({"x": [0.5, 1.0]})
        .dist.apply(registry, "normal_cdf", "x", pl.lit(0.0), pl.lit(1.0))
        .collect()
    )
"""

from polars_distributions.contracts.config import RegistrationConfig
from polars_distributions.contracts.errors import (
    FunctionEvaluationError,
    FunctionNotFoundError,
    ParameterError,
    SignatureError,
)
from polars_distributions.distributions import DISTRIBUTIONS, create_registry, register
from polars_distributions.domain.enums import ErrorKind, FunctionKind, Volatility
from polars_distributions.engine import (
    ScalarUDF,
    Signature,
    call_function,
    lookup,
)

__all__ = [
    # Registration
    "create_registry",
    "register",
    "call_function",
    "lookup",
    "DISTRIBUTIONS",
    "RegistrationConfig",
    # Descriptors
    "ScalarUDF",
    "Signature",
    # Enums
    "FunctionKind",
    "ErrorKind",
    "Volatility",
    # Errors
    "ParameterError",
    "FunctionEvaluationError",
    "SignatureError",
    "FunctionNotFoundError",
]
