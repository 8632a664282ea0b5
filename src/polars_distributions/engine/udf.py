"""
Scalar function descriptors and the vectorised row-wise wrapper.

A ScalarUDF is the unit that gets registered into a function namespace:
a name, a fixed signature, and an Evaluator. It can be applied to Polars
Series directly (``invoke``) or embedded in a query as an expression
(``call``), in which case Polars hands it each batch through map_batches.

Batch semantics:
- Arguments must match the signature exactly (count and dtype, no casting)
- All argument columns must have the same length
- A row with a null in any argument evaluates to NaN
- A row with invalid parameters fails the whole batch
- Output is Float64, same length and row order as the inputs

Usage:
    udf = binomial.pmf()
    df.select(udf.call("x", "n", "p").alias("q"))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
import polars as pl

from polars_distributions.contracts.errors import (
    FunctionEvaluationError,
    ParameterError,
    SignatureError,
)
from polars_distributions.domain.enums import FunctionKind, Volatility
from polars_distributions.engine.evaluator import Evaluator

if TYPE_CHECKING:
    from polars._typing import PolarsDataType

    from polars_distributions.engine.factory import DistributionFactory

logger = logging.getLogger(__name__)


# =============================================================================
# SIGNATURE
# =============================================================================


@dataclass(frozen=True)
class Signature:
    """
    Declared argument types of a function.

    Attributes:
        arg_types: Polars dtype expected at each position
        volatility: Determinism of the function
    """

    arg_types: tuple[PolarsDataType, ...]
    volatility: Volatility = Volatility.IMMUTABLE

    @classmethod
    def exact(cls, arg_types: Iterable[PolarsDataType]) -> Signature:
        """Signature with a specific dtype at each position."""
        return cls(arg_types=tuple(arg_types))

    @classmethod
    def uniform(cls, arity: int, dtype: PolarsDataType) -> Signature:
        """Signature with the same dtype at every position."""
        return cls(arg_types=(dtype,) * arity)

    @property
    def arity(self) -> int:
        return len(self.arg_types)

    def check(self, name: str, dtypes: list[PolarsDataType]) -> None:
        """
        Verify actual argument dtypes against the signature.

        Raises:
            SignatureError: on a count or dtype mismatch
        """
        if len(dtypes) != self.arity:
            raise SignatureError(
                f"{name} expects {self.arity} arguments, got {len(dtypes)}"
            )
        for position, (actual, expected) in enumerate(zip(dtypes, self.arg_types)):
            if actual != expected:
                raise SignatureError(
                    f"{name} argument {position} must be {expected}, got {actual}"
                )

    def __str__(self) -> str:
        return "(" + ", ".join(str(t) for t in self.arg_types) + ")"


# =============================================================================
# SCALAR UDF
# =============================================================================


@dataclass(frozen=True)
class ScalarUDF:
    """
    Immutable descriptor of a distribution function.

    Attributes:
        name: Lookup key in a function namespace, e.g. "gamma_cdf"
        signature: Declared argument dtypes (evaluation point first)
        evaluator: Statistic and distribution to compute
        return_dtype: Always Float64
    """

    name: str
    signature: Signature
    evaluator: Evaluator
    return_dtype: PolarsDataType = field(default=pl.Float64)

    @classmethod
    def create(
        cls,
        name: str,
        signature: Signature,
        kind: FunctionKind,
        factory: DistributionFactory,
    ) -> ScalarUDF:
        """Build a descriptor from its parts."""
        if signature.arity < 2:
            raise ValueError(f"{name} needs an evaluation point and at least one parameter")
        return cls(name=name, signature=signature, evaluator=Evaluator(kind, factory))

    @property
    def kind(self) -> FunctionKind:
        return self.evaluator.kind

    @property
    def distribution(self) -> str:
        return self.evaluator.factory.distribution

    @property
    def arity(self) -> int:
        return self.signature.arity

    def invoke(self, *columns: pl.Series) -> pl.Series:
        """
        Evaluate the function over one batch of argument columns.

        Args:
            *columns: One Series per argument, in signature order

        Returns:
            Float64 Series named after the function

        Raises:
            SignatureError: if argument count or dtypes do not match
            ValueError: if the columns differ in length
            FunctionEvaluationError: if any row has invalid parameters
        """
        self.signature.check(self.name, [c.dtype for c in columns])

        n_rows = len(columns[0])
        if any(len(c) != n_rows for c in columns):
            raise ValueError(
                f"{self.name} arguments differ in length: {[len(c) for c in columns]}"
            )

        present = np.ones(n_rows, dtype=bool)
        for column in columns:
            present &= column.is_not_null().to_numpy()
        rows = np.flatnonzero(present)

        logger.debug(
            "Evaluating %s over %d rows (%d with nulls)",
            self.name, n_rows, n_rows - len(rows),
        )

        # Integer columns holding nulls come back as float with NaN; the
        # null rows are dropped here either way.
        args = [column.to_numpy()[rows] for column in columns]

        try:
            values = self.evaluator.evaluate_batch(*args)
        except ParameterError as err:
            raise FunctionEvaluationError(self.name, int(rows[err.row]), err) from err

        out = np.full(n_rows, np.nan, dtype=np.float64)
        out[rows] = values
        return pl.Series(self.name, out, dtype=pl.Float64)

    def call(self, *args: str | pl.Expr) -> pl.Expr:
        """
        Build a Polars expression applying this function.

        Args:
            *args: Column names or expressions, in signature order

        Returns:
            Float64 expression aliased to the function name

        Raises:
            SignatureError: if the argument count does not match
        """
        if len(args) != self.arity:
            raise SignatureError(
                f"{self.name} expects {self.arity} arguments, got {len(args)}"
            )
        exprs = [pl.col(a) if isinstance(a, str) else a for a in args]
        fields = [expr.alias(f"arg_{i}") for i, expr in enumerate(exprs)]

        def apply(struct_series: pl.Series) -> pl.Series:
            columns = [struct_series.struct.field(f"arg_{i}") for i in range(self.arity)]
            return self.invoke(*columns)

        return (
            pl.struct(fields)
            .map_batches(apply, return_dtype=self.return_dtype)
            .alias(self.name)
        )

    __call__ = call
