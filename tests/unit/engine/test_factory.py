"""
Unit tests for parameter validation and distribution construction.

Covers the domain predicates, first-invalid-row reporting across
batches, check ordering within a row, and conversion of integer
parameters before they reach scipy.
"""

from __future__ import annotations

import numpy as np
import pytest

from polars_distributions.contracts.errors import ParameterError
from polars_distributions.distributions import gamma, hypergeometric, triangular
from polars_distributions.domain.enums import ErrorKind
from polars_distributions.engine.factory import (
    is_zero,
    not_finite,
    not_positive,
    not_probability,
)
from tests.fixtures.columns import REL


# =============================================================================
# PREDICATES
# =============================================================================


class TestPredicates:
    """Domain predicates flag invalid entries."""

    def test_not_finite(self) -> None:
        values = np.array([1.0, -3.0, np.nan, np.inf, -np.inf])
        assert not_finite(values).tolist() == [False, False, True, True, True]

    def test_not_positive(self) -> None:
        values = np.array([0.5, 0.0, -1.0, np.nan, np.inf])
        assert not_positive(values).tolist() == [False, True, True, True, True]

    def test_not_probability(self) -> None:
        values = np.array([0.0, 0.5, 1.0, -0.1, 1.25, np.nan])
        assert not_probability(values).tolist() == [False, False, False, True, True, True]

    def test_is_zero(self) -> None:
        values = np.array([0, 1, 7], dtype=np.uint64)
        assert is_zero(values).tolist() == [True, False, False]


# =============================================================================
# VALIDATION
# =============================================================================


class TestValidate:
    """DistributionFactory.validate reporting."""

    def test_valid_scalars_pass(self) -> None:
        gamma.FACTORY.validate(3.0, 0.25)

    def test_invalid_scalar_reports_kind(self) -> None:
        with pytest.raises(ParameterError) as exc_info:
            gamma.FACTORY.validate(3.0, 0.0)

        assert exc_info.value.kind == ErrorKind.RATE_INVALID
        assert exc_info.value.distribution == "gamma"
        assert exc_info.value.row == 0

    def test_first_failing_check_in_declaration_order(self) -> None:
        with pytest.raises(ParameterError) as exc_info:
            gamma.FACTORY.validate(-1.0, -1.0)

        assert exc_info.value.kind == ErrorKind.SHAPE_INVALID

    def test_first_invalid_row_is_reported(self) -> None:
        shape = np.array([1.0, 2.0, 3.0, -1.0])
        rate = np.array([1.0, 1.0, 0.0, 1.0])

        with pytest.raises(ParameterError) as exc_info:
            gamma.FACTORY.validate(shape, rate)

        assert exc_info.value.row == 2
        assert exc_info.value.kind == ErrorKind.RATE_INVALID

    def test_scalar_broadcasts_against_arrays(self) -> None:
        with pytest.raises(ParameterError) as exc_info:
            gamma.FACTORY.validate(np.array([1.0, 2.0, 0.0]), 1.0)

        assert exc_info.value.row == 2

    def test_empty_batch_passes(self) -> None:
        gamma.FACTORY.validate(np.array([]), np.array([]))

    def test_message_names_distribution(self) -> None:
        with pytest.raises(ParameterError, match="^gamma: rate"):
            gamma.FACTORY.validate(1.0, -2.0)

    def test_triangular_mode_checks_precede_range(self) -> None:
        with pytest.raises(ParameterError) as exc_info:
            triangular.FACTORY.validate(0.0, 1.0, -1.25)

        assert exc_info.value.kind == ErrorKind.MODE_OUT_OF_RANGE

    def test_triangular_degenerate_range(self) -> None:
        with pytest.raises(ParameterError) as exc_info:
            triangular.FACTORY.validate(2.0, 2.0, 2.0)

        assert exc_info.value.kind == ErrorKind.MIN_EQUALS_MAX


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestMake:
    """DistributionFactory.make builds scipy distributions."""

    def test_make_scalar(self) -> None:
        dist = gamma.FACTORY.make(3.0, 0.25)
        assert dist.pdf(1.0) == pytest.approx(0.006084381117745331, rel=REL)

    def test_make_validates(self) -> None:
        with pytest.raises(ParameterError):
            gamma.FACTORY.make(0.0, 1.0)

    def test_make_with_arrays_is_row_wise(self) -> None:
        dist = gamma.FACTORY.make(np.array([3.0, 1.0]), np.array([0.25, 1.0]))
        values = dist.pdf(np.array([1.0, 1.0]))

        assert values[0] == pytest.approx(0.006084381117745331, rel=REL)
        assert values[1] == pytest.approx(np.exp(-1.0), rel=REL)

    def test_unsigned_parameters_are_converted(self) -> None:
        population = np.array([20], dtype=np.uint64)
        successes = np.array([10], dtype=np.uint64)
        draws = np.array([15], dtype=np.uint64)

        dist = hypergeometric.FACTORY.make(population, successes, draws)

        assert dist.pmf(5.0)[0] == pytest.approx(0.016253869969040248, rel=REL)
        assert dist.pmf(0.0)[0] == 0.0
