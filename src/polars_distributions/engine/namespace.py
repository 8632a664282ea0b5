"""
Polars namespaces for distribution functions.

Provides fluent access to registered functions via registered namespaces:
- `lf.dist.apply(registry, name, *args)` - Add a function result column
- `pl.col("x").dist.evaluate(udf, *params)` - Apply a function to an expression

Usage:
    import polars as pl
    from polars_distributions import create_registry
    import polars_distributions.engine.namespace  # Register namespace

    registry = create_registry()
    result = (lf
        .dist.apply(registry, "binomial_pmf", "x", "n", "p", alias="q")
        .collect()
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import polars as pl

from polars_distributions.engine.registry import call_function

if TYPE_CHECKING:
    from polars_distributions.engine.registry import FunctionRegistry
    from polars_distributions.engine.udf import ScalarUDF


# =============================================================================
# LAZYFRAME NAMESPACE
# =============================================================================


@pl.api.register_lazyframe_namespace("dist")
class DistributionLazyFrame:
    """
    Distribution function namespace for Polars LazyFrames.

    Example:
        lf.dist.apply(registry, "gamma_cdf", "x", "shape", "rate")
    """

    def __init__(self, lf: pl.LazyFrame) -> None:
        self._lf = lf

    def apply(
        self,
        registry: FunctionRegistry,
        name: str,
        *args: str | pl.Expr,
        alias: str | None = None,
    ) -> pl.LazyFrame:
        """
        Add a column holding a registered function's result.

        Args:
            registry: Namespace to resolve the function in
            name: Registered function name
            *args: Column names or expressions, in signature order
            alias: Output column name (defaults to the function name)

        Returns:
            LazyFrame with the result column added
        """
        expr = call_function(registry, name, *args)
        return self._lf.with_columns(expr.alias(alias or name))


# =============================================================================
# EXPRESSION NAMESPACE
# =============================================================================


@pl.api.register_expr_namespace("dist")
class DistributionExpr:
    """
    Distribution function namespace for Polars Expressions.

    The receiving expression is the evaluation point.

    Example:
        df.with_columns(
            pl.col("x").dist.evaluate(normal.cdf(), "mean", "std_dev"),
        )
    """

    def __init__(self, expr: pl.Expr) -> None:
        self._expr = expr

    def evaluate(self, udf: ScalarUDF, *params: str | pl.Expr) -> pl.Expr:
        """
        Apply a function with this expression as the evaluation point.

        Args:
            udf: Function descriptor
            *params: Distribution parameters as column names or expressions

        Returns:
            Float64 expression
        """
        return udf.call(self._expr, *params)
