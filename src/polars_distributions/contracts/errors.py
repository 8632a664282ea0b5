"""
Error types raised by distribution functions.

Two failure modes exist:
- ParameterError: a distribution's parameters are outside its domain
- FunctionEvaluationError: a batch evaluation aborted by a ParameterError

Missing (null) inputs are not errors; they evaluate to NaN for that row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polars_distributions.domain.enums import ErrorKind


class ParameterError(ValueError):
    """
    Distribution-specific validation error.

    Attributes:
        distribution: Distribution name, e.g. "binomial"
        kind: Which parameter check failed
        row: Offending row when validating a batch (0 for scalars)
    """

    def __init__(
        self,
        distribution: str,
        kind: ErrorKind,
        message: str,
        row: int = 0,
    ) -> None:
        super().__init__(f"{distribution}: {message}")
        self.distribution = distribution
        self.kind = kind
        self.message = message
        self.row = row


class FunctionEvaluationError(RuntimeError):
    """
    Failure of a whole batch evaluation.

    Wraps the ParameterError raised for the first invalid row.
    """

    def __init__(self, function: str, row: int, error: ParameterError) -> None:
        super().__init__(f"{function} failed at row {row}: {error}")
        self.function = function
        self.row = row
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


class SignatureError(TypeError):
    """Arguments do not match a function's declared signature."""


class FunctionNotFoundError(KeyError):
    """Function name not present in a function namespace."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Function not registered: {self.name}"
