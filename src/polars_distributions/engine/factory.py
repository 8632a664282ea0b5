"""
Parameter factories for distribution instances.

A DistributionFactory validates raw parameters against a distribution's
mathematical domain and builds a frozen scipy.stats distribution from them.

Validation is vectorised: parameters may be scalars or equal-length arrays
(one entry per row). When several rows are invalid the error names the first
one in index order, and within that row the first failing check in
declaration order.

Usage:
    factory = DistributionFactory(
        distribution="exp",
        checks=(ParameterCheck(ErrorKind.RATE_INVALID, "rate must be positive",
                               lambda rate: not_positive(rate)),),
        build=lambda rate: stats.expon(scale=1.0 / rate),
    )
    factory.make(0.25).pdf(1.0)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np

from polars_distributions.contracts.errors import ParameterError
from polars_distributions.domain.enums import ErrorKind


# =============================================================================
# DOMAIN PREDICATES (return True where a value is invalid)
# =============================================================================


def not_finite(value: np.ndarray) -> np.ndarray:
    """NaN or infinite."""
    return ~np.isfinite(value)


def not_positive(value: np.ndarray) -> np.ndarray:
    """NaN, infinite, zero or negative."""
    return ~(np.isfinite(value) & (value > 0))


def not_probability(value: np.ndarray) -> np.ndarray:
    """Outside [0, 1] (NaN included)."""
    return ~((value >= 0) & (value <= 1))


def is_zero(value: np.ndarray) -> np.ndarray:
    """Zero count, for unsigned parameters that must be at least one."""
    return value == 0


# =============================================================================
# FACTORY
# =============================================================================


@dataclass(frozen=True)
class ParameterCheck:
    """
    One domain rule for a distribution's parameters.

    Attributes:
        kind: Error kind reported when the rule is violated
        message: Human readable description of the rule
        is_invalid: Receives all parameters, returns a boolean mask of
                    invalid rows
    """

    kind: ErrorKind
    message: str
    is_invalid: Callable[..., Any]


@dataclass(frozen=True)
class DistributionFactory:
    """
    Validating constructor for one distribution.

    Attributes:
        distribution: Distribution name used in errors and function names
        checks: Domain rules, in the order they are reported
        build: Creates the scipy.stats frozen distribution from parameters
        discrete: True when the distribution has a mass function
    """

    distribution: str
    checks: tuple[ParameterCheck, ...]
    build: Callable[..., Any]
    discrete: bool = False

    def validate(self, *params: Any) -> None:
        """
        Check every row of the parameters against the domain rules.

        Raises:
            ParameterError: for the first invalid row
        """
        if not self.checks:
            return

        arrays = [np.atleast_1d(np.asarray(p, dtype=np.float64)) for p in params]
        n_rows = max((len(a) for a in arrays), default=1)
        if n_rows == 0:
            return

        invalid = np.vstack([
            np.broadcast_to(np.asarray(check.is_invalid(*arrays), dtype=bool), (n_rows,))
            for check in self.checks
        ])
        bad_rows = invalid.any(axis=0)
        if not bad_rows.any():
            return

        row = int(np.argmax(bad_rows))
        check = self.checks[int(np.argmax(invalid[:, row]))]
        raise ParameterError(self.distribution, check.kind, check.message, row=row)

    def make(self, *params: Any) -> Any:
        """
        Validate parameters and build the distribution.

        Args:
            *params: Scalars or equal-length arrays, in call order

        Returns:
            Frozen scipy.stats distribution (array parameters broadcast)

        Raises:
            ParameterError: if any row is outside the domain
        """
        self.validate(*params)
        return self.build(*(_as_float(p) for p in params))


def _as_float(value: Any) -> Any:
    # Unsigned inputs wrap around in scipy's support arithmetic (e.g. hypergeom)
    if np.ndim(value) == 0:
        return float(value)
    return np.asarray(value, dtype=np.float64)
