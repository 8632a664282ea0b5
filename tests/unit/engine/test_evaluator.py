"""
Unit tests for Evaluator.
"""

from __future__ import annotations

import numpy as np
import pytest

from polars_distributions.contracts.errors import ParameterError
from polars_distributions.distributions import binomial, exp, weibull
from polars_distributions.domain.enums import FunctionKind
from polars_distributions.engine.evaluator import Evaluator
from tests.fixtures.columns import REL


class TestEvaluatorConstruction:
    """Pairing statistics with distributions."""

    def test_name(self) -> None:
        assert Evaluator(FunctionKind.LN_PMF, binomial.FACTORY).name == "binomial_ln_pmf"

    def test_mass_requires_discrete(self) -> None:
        with pytest.raises(ValueError, match="discrete"):
            Evaluator(FunctionKind.PMF, exp.FACTORY)

    def test_density_requires_continuous(self) -> None:
        with pytest.raises(ValueError, match="continuous"):
            Evaluator(FunctionKind.PDF, binomial.FACTORY)

    def test_cdf_and_sf_accept_both(self) -> None:
        Evaluator(FunctionKind.CDF, binomial.FACTORY)
        Evaluator(FunctionKind.SF, exp.FACTORY)


class TestEvaluate:
    """Single row and batch evaluation."""

    def test_scalar_pmf(self) -> None:
        evaluator = Evaluator(FunctionKind.PMF, binomial.FACTORY)
        assert evaluator.evaluate(0, 3, 0.25) == pytest.approx(0.421875, rel=REL)

    def test_scalar_invalid_raises(self) -> None:
        evaluator = Evaluator(FunctionKind.CDF, weibull.FACTORY)
        with pytest.raises(ParameterError):
            evaluator.evaluate(1.0, 0.0, 1.25)

    def test_sf_is_scipy_survival(self) -> None:
        evaluator = Evaluator(FunctionKind.SF, exp.FACTORY)
        assert evaluator.evaluate(1.0, 0.25) == pytest.approx(0.7788007830714049, rel=REL)

    def test_batch_preserves_row_order(self) -> None:
        evaluator = Evaluator(FunctionKind.CDF, binomial.FACTORY)
        x = np.array([3, 0, 1], dtype=np.uint64)
        n = np.array([3, 3, 3], dtype=np.uint64)
        p = np.array([0.25, 0.25, 0.25])

        values = evaluator.evaluate_batch(x, n, p)

        assert values.tolist() == pytest.approx([1.0, 0.421875, 0.84375], rel=REL)

    def test_batch_broadcasts_scalar_parameters(self) -> None:
        evaluator = Evaluator(FunctionKind.PDF, exp.FACTORY)
        values = evaluator.evaluate_batch(np.array([1.0, 1.0, 1.0]), 0.25)

        assert values.shape == (3,)
        assert values[2] == pytest.approx(0.19470019576785122, rel=REL)

    def test_empty_batch(self) -> None:
        evaluator = Evaluator(FunctionKind.PDF, exp.FACTORY)
        values = evaluator.evaluate_batch(np.array([]), np.array([]))

        assert values.dtype == np.float64
        assert len(values) == 0
