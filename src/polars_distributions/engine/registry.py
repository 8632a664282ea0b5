"""
Function namespace registration.

A function namespace is any mutable mapping from function name to
ScalarUDF, supplied by the caller. Nothing here keeps global state, so
independent sessions can hold distinct or overlapping function sets.

Registering a name that already exists replaces the previous entry and
logs a warning naming it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from typing import TYPE_CHECKING

from polars_distributions.contracts.errors import FunctionNotFoundError

if TYPE_CHECKING:
    import polars as pl

    from polars_distributions.engine.udf import ScalarUDF

logger = logging.getLogger(__name__)

FunctionRegistry = MutableMapping[str, "ScalarUDF"]


def register(
    registry: FunctionRegistry,
    functions: Iterable[ScalarUDF],
) -> FunctionRegistry:
    """
    Install functions into a namespace under their own names.

    Args:
        registry: Namespace to modify in place
        functions: Descriptors to install

    Returns:
        The same registry, for chaining
    """
    for udf in functions:
        existing = registry.get(udf.name)
        if existing is not None:
            logger.warning("Overwrite existing UDF: %s", existing.name)
        registry[udf.name] = udf
        logger.debug("Registered %s%s", udf.name, udf.signature)
    return registry


def lookup(registry: FunctionRegistry, name: str) -> ScalarUDF:
    """
    Resolve a function by name.

    Raises:
        FunctionNotFoundError: if the name is not registered
    """
    try:
        return registry[name]
    except KeyError:
        raise FunctionNotFoundError(name) from None


def call_function(registry: FunctionRegistry, name: str, *args: str | pl.Expr) -> pl.Expr:
    """
    Build an expression calling a registered function.

    Args:
        registry: Namespace to resolve the name in
        name: Function name, e.g. "binomial_pmf"
        *args: Column names or expressions, in signature order

    Returns:
        Float64 expression
    """
    return lookup(registry, name).call(*args)
