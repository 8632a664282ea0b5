"""
Unit tests for discrete distribution functions.

Each class checks known values, domain errors and the distribution's
signature for one distribution. Values are taken from closed forms or
cross-checked against scipy.stats.
"""

from __future__ import annotations

import math

import pytest

from polars_distributions.contracts.errors import FunctionEvaluationError, SignatureError
from polars_distributions.distributions import (
    bernoulli,
    binomial,
    discrete_uniform,
    geometric,
    hypergeometric,
    negative_binomial,
    poisson,
)
from polars_distributions.domain.enums import ErrorKind
from tests.fixtures.columns import REL, f64, i64, u64


def value(udf, *columns) -> float:
    return udf.invoke(*columns).item()


# =============================================================================
# BERNOULLI
# =============================================================================


class TestBernoulli:
    """bernoulli_pmf(x: UInt64, p: Float64) and friends."""

    def test_pmf(self) -> None:
        assert value(bernoulli.pmf(), u64(0), f64(0.25)) == pytest.approx(0.75, rel=REL)
        assert value(bernoulli.pmf(), u64(1), f64(0.25)) == pytest.approx(0.25, rel=REL)

    def test_ln_pmf(self) -> None:
        assert value(bernoulli.ln_pmf(), u64(0), f64(0.25)) == pytest.approx(math.log(0.75), rel=REL)

    def test_cdf_and_sf(self) -> None:
        assert value(bernoulli.cdf(), u64(0), f64(0.25)) == pytest.approx(0.75, rel=REL)
        assert value(bernoulli.sf(), u64(0), f64(0.25)) == pytest.approx(0.25, rel=REL)

    def test_probability_out_of_range(self) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            bernoulli.pmf().invoke(u64(0), f64(1.25))

        assert exc_info.value.kind == ErrorKind.PROBABILITY_INVALID

    def test_rejects_float_evaluation_point(self) -> None:
        with pytest.raises(SignatureError):
            bernoulli.pmf().invoke(f64(0.0), f64(0.25))


# =============================================================================
# BINOMIAL
# =============================================================================


class TestBinomial:
    """binomial_pmf(x: UInt64, n: UInt64, p: Float64) and friends."""

    def test_pmf(self) -> None:
        assert value(binomial.pmf(), u64(0), u64(3), f64(0.25)) == pytest.approx(0.421875, rel=REL)

    def test_cdf(self) -> None:
        assert value(binomial.cdf(), u64(1), u64(3), f64(0.25)) == pytest.approx(0.84375, rel=REL)

    def test_sf(self) -> None:
        assert value(binomial.sf(), u64(1), u64(3), f64(0.25)) == pytest.approx(0.15625, rel=REL)

    def test_ln_pmf(self) -> None:
        assert value(binomial.ln_pmf(), u64(2), u64(10), f64(0.5)) == pytest.approx(
            -3.1248093158291335, rel=REL
        )

    def test_beyond_trials_has_no_mass(self) -> None:
        assert value(binomial.pmf(), u64(4), u64(3), f64(0.25)) == 0.0

    def test_negative_probability(self) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            binomial.pmf().invoke(u64(0), u64(3), f64(-0.1))

        assert exc_info.value.kind == ErrorKind.PROBABILITY_INVALID

    def test_trials_must_be_unsigned(self) -> None:
        with pytest.raises(SignatureError):
            binomial.pmf().invoke(u64(0), i64(3), f64(0.25))


# =============================================================================
# GEOMETRIC
# =============================================================================


class TestGeometric:
    """Support starts at the first trial."""

    def test_pmf(self) -> None:
        assert value(geometric.pmf(), u64(0), f64(0.25)) == 0.0
        assert value(geometric.pmf(), u64(5), f64(0.25)) == pytest.approx(0.0791015625, rel=REL)

    def test_cdf(self) -> None:
        assert value(geometric.cdf(), u64(5), f64(0.25)) == pytest.approx(0.7626953125, rel=REL)

    def test_sf(self) -> None:
        assert value(geometric.sf(), u64(0), f64(0.25)) == pytest.approx(1.0, rel=REL)

    def test_ln_pmf(self) -> None:
        assert value(geometric.ln_pmf(), u64(3), f64(0.25)) == pytest.approx(
            -1.9616585060234524, rel=REL
        )

    def test_certain_success(self) -> None:
        assert value(geometric.pmf(), u64(1), f64(1.0)) == pytest.approx(1.0, rel=REL)

    def test_zero_probability(self) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            geometric.pmf().invoke(u64(1), f64(0.0))

        assert exc_info.value.kind == ErrorKind.PROBABILITY_INVALID


# =============================================================================
# HYPERGEOMETRIC
# =============================================================================


class TestHypergeometric:
    """hypergeometric_pmf(k, N, K, n), all UInt64."""

    def test_pmf(self) -> None:
        assert value(hypergeometric.pmf(), u64(5), u64(20), u64(10), u64(15)) == pytest.approx(
            0.016253869969040248, rel=REL
        )

    def test_below_support(self) -> None:
        assert value(hypergeometric.pmf(), u64(0), u64(20), u64(10), u64(15)) == 0.0

    def test_sf(self) -> None:
        assert value(hypergeometric.sf(), u64(5), u64(20), u64(10), u64(15)) == pytest.approx(
            0.9837461300309583, rel=REL
        )

    def test_ln_pmf(self) -> None:
        assert value(hypergeometric.ln_pmf(), u64(25), u64(500), u64(50), u64(100)) == pytest.approx(
            -14.854954378819315, rel=REL
        )

    def test_too_many_successes(self) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            hypergeometric.pmf().invoke(u64(1), u64(0), u64(5), u64(15))

        assert exc_info.value.kind == ErrorKind.TOO_MANY_SUCCESSES

    def test_too_many_draws(self) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            hypergeometric.cdf().invoke(u64(1), u64(10), u64(5), u64(15))

        assert exc_info.value.kind == ErrorKind.TOO_MANY_DRAWS

    def test_empty_population(self) -> None:
        args = (u64(0, 1), u64(0, 0), u64(0, 0), u64(0, 0))

        assert hypergeometric.pmf().invoke(*args).to_list() == pytest.approx([1.0, 0.0], rel=REL)
        assert hypergeometric.ln_pmf().invoke(*args).to_list()[0] == pytest.approx(0.0, abs=1e-12)
        assert hypergeometric.cdf().invoke(*args).to_list() == pytest.approx([1.0, 1.0], rel=REL)
        assert hypergeometric.sf().invoke(*args).to_list() == pytest.approx([0.0, 0.0], abs=1e-12)


# =============================================================================
# NEGATIVE BINOMIAL
# =============================================================================


class TestNegativeBinomial:
    """Failures before the r-th success."""

    def test_pmf(self) -> None:
        assert value(negative_binomial.pmf(), u64(1), f64(3.0), f64(0.25)) == pytest.approx(
            0.03515625, rel=REL
        )
        assert value(negative_binomial.pmf(), u64(2), f64(3.0), f64(0.25)) == pytest.approx(
            0.052734375, rel=REL
        )

    def test_cdf(self) -> None:
        assert value(negative_binomial.cdf(), u64(1), f64(3.0), f64(0.25)) == pytest.approx(
            0.05078125, rel=REL
        )

    def test_ln_pmf(self) -> None:
        assert value(negative_binomial.ln_pmf(), u64(2), f64(8.0), f64(0.11)) == pytest.approx(
            -14.307747999573525, rel=REL
        )

    def test_zero_successes_judges_probability(self) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            negative_binomial.pmf().invoke(u64(1), f64(0.0), f64(1.25))

        assert exc_info.value.kind == ErrorKind.PROBABILITY_INVALID

    @pytest.mark.parametrize("r", [-1.0, float("nan")])
    def test_successes_must_be_non_negative(self, r: float) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            negative_binomial.pmf().invoke(u64(1), f64(r), f64(0.25))

        assert exc_info.value.kind == ErrorKind.SUCCESSES_INVALID

    def test_zero_successes_is_point_mass_at_zero(self) -> None:
        x = u64(0, 1, 4)
        r = f64(0.0, 0.0, 0.0)
        p = f64(0.25, 0.25, 0.0)

        assert negative_binomial.pmf().invoke(x, r, p).to_list() == [1.0, 0.0, 0.0]
        assert negative_binomial.ln_pmf().invoke(x, r, p).to_list() == [0.0, -math.inf, -math.inf]
        assert negative_binomial.cdf().invoke(x, r, p).to_list() == [1.0, 1.0, 1.0]
        assert negative_binomial.sf().invoke(x, r, p).to_list() == [0.0, 0.0, 0.0]

    def test_certain_success_is_point_mass_at_zero(self) -> None:
        assert value(negative_binomial.pmf(), u64(0), f64(3.0), f64(1.0)) == pytest.approx(1.0, rel=REL)
        assert value(negative_binomial.sf(), u64(0), f64(3.0), f64(1.0)) == 0.0

    def test_zero_probability_has_no_finite_mass(self) -> None:
        x = u64(0, 3)
        r = f64(2.0, 2.0)
        p = f64(0.0, 0.0)

        assert negative_binomial.pmf().invoke(x, r, p).to_list() == [0.0, 0.0]
        assert negative_binomial.ln_pmf().invoke(x, r, p).to_list() == [-math.inf, -math.inf]
        assert negative_binomial.cdf().invoke(x, r, p).to_list() == [0.0, 0.0]
        assert negative_binomial.sf().invoke(x, r, p).to_list() == [1.0, 1.0]

    def test_degenerate_rows_leave_regular_rows_alone(self) -> None:
        result = negative_binomial.pmf().invoke(u64(1, 1, 1), f64(3.0, 0.0, 3.0), f64(0.25, 0.25, 0.0))

        assert result.to_list() == pytest.approx([0.03515625, 0.0, 0.0], rel=REL)

    def test_probability_out_of_range(self) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            negative_binomial.pmf().invoke(u64(1), f64(3.0), f64(1.5))

        assert exc_info.value.kind == ErrorKind.PROBABILITY_INVALID


# =============================================================================
# POISSON
# =============================================================================


class TestPoisson:
    """poisson_pmf(x: UInt64, lambda: Float64) and friends."""

    def test_pmf(self) -> None:
        assert value(poisson.pmf(), u64(0), f64(1.0)) == pytest.approx(math.exp(-1.0), rel=REL)
        assert value(poisson.pmf(), u64(2), f64(3.0)) == pytest.approx(4.5 * math.exp(-3.0), rel=REL)

    def test_cdf(self) -> None:
        assert value(poisson.cdf(), u64(1), f64(2.0)) == pytest.approx(3.0 * math.exp(-2.0), rel=REL)

    @pytest.mark.parametrize("rate", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_rate(self, rate: float) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            poisson.pmf().invoke(u64(1), f64(rate))

        assert exc_info.value.kind == ErrorKind.LAMBDA_INVALID


# =============================================================================
# DISCRETE UNIFORM
# =============================================================================


class TestDiscreteUniform:
    """Closed integer range [min, max], all Int64."""

    def test_pmf(self) -> None:
        assert value(discrete_uniform.pmf(), i64(3), i64(1), i64(6)) == pytest.approx(1 / 6, rel=REL)

    def test_outside_range(self) -> None:
        assert value(discrete_uniform.pmf(), i64(7), i64(1), i64(6)) == 0.0

    def test_negative_range(self) -> None:
        assert value(discrete_uniform.pmf(), i64(-2), i64(-3), i64(0)) == pytest.approx(0.25, rel=REL)

    def test_cdf_and_sf(self) -> None:
        assert value(discrete_uniform.cdf(), i64(3), i64(1), i64(6)) == pytest.approx(0.5, rel=REL)
        assert value(discrete_uniform.sf(), i64(3), i64(1), i64(6)) == pytest.approx(0.5, rel=REL)

    def test_single_point(self) -> None:
        assert value(discrete_uniform.pmf(), i64(4), i64(4), i64(4)) == pytest.approx(1.0, rel=REL)

    def test_reversed_range(self) -> None:
        with pytest.raises(FunctionEvaluationError) as exc_info:
            discrete_uniform.pmf().invoke(i64(3), i64(6), i64(1))

        assert exc_info.value.kind == ErrorKind.RANGE_INVALID
