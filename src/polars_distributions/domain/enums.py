"""
Domain enums for distribution functions.

Defines the closed sets the function wrappers are built from:
- FunctionKind: statistic computed by a function (pdf, cdf, sf, ...)
- Volatility: determinism advertised to the host engine
- ErrorKind: which parameter violated a distribution's domain
"""

from enum import StrEnum


class FunctionKind(StrEnum):
    """
    Statistic evaluated by a distribution function.

    The value doubles as the function name suffix, e.g. ``binomial_pmf``.
    """

    PDF = "pdf"
    """Probability density (continuous distributions)"""

    LN_PDF = "ln_pdf"
    """Natural log of the probability density"""

    PMF = "pmf"
    """Probability mass (discrete distributions)"""

    LN_PMF = "ln_pmf"
    """Natural log of the probability mass"""

    CDF = "cdf"
    """Cumulative distribution, P(X <= x)"""

    SF = "sf"
    """Survival function, P(X > x)"""

    @property
    def method(self) -> str:
        """Name of the scipy.stats method computing this statistic."""
        return _SCIPY_METHODS[self]

    @property
    def is_mass(self) -> bool:
        """True for statistics only defined on discrete distributions."""
        return self in (FunctionKind.PMF, FunctionKind.LN_PMF)

    @property
    def is_density(self) -> bool:
        """True for statistics only defined on continuous distributions."""
        return self in (FunctionKind.PDF, FunctionKind.LN_PDF)


_SCIPY_METHODS = {
    FunctionKind.PDF: "pdf",
    FunctionKind.LN_PDF: "logpdf",
    FunctionKind.PMF: "pmf",
    FunctionKind.LN_PMF: "logpmf",
    FunctionKind.CDF: "cdf",
    FunctionKind.SF: "sf",
}


class Volatility(StrEnum):
    """Determinism of a function's result."""

    IMMUTABLE = "immutable"
    """Result depends only on the inputs"""


class ErrorKind(StrEnum):
    """
    Parameter validation failures.

    Each distribution reports one of these when a parameter falls outside
    its mathematical domain.
    """

    PROBABILITY_INVALID = "probability_invalid"
    SHAPE_INVALID = "shape_invalid"
    SHAPE_A_INVALID = "shape_a_invalid"
    SHAPE_B_INVALID = "shape_b_invalid"
    SCALE_INVALID = "scale_invalid"
    RATE_INVALID = "rate_invalid"
    LOCATION_INVALID = "location_invalid"
    MEAN_INVALID = "mean_invalid"
    STD_DEV_INVALID = "std_dev_invalid"
    FREEDOM_INVALID = "freedom_invalid"
    FREEDOM_1_INVALID = "freedom_1_invalid"
    FREEDOM_2_INVALID = "freedom_2_invalid"
    LAMBDA_INVALID = "lambda_invalid"
    SUCCESSES_INVALID = "successes_invalid"
    VALUE_INVALID = "value_invalid"

    MIN_INVALID = "min_invalid"
    MAX_INVALID = "max_invalid"
    MODE_INVALID = "mode_invalid"
    MODE_OUT_OF_RANGE = "mode_out_of_range"
    MIN_EQUALS_MAX = "min_equals_max"
    RANGE_INVALID = "range_invalid"
    """Upper bound not greater than (or, for integers, below) the lower bound"""

    TOO_MANY_SUCCESSES = "too_many_successes"
    """Hypergeometric: more successes than the population holds"""

    TOO_MANY_DRAWS = "too_many_draws"
    """Hypergeometric: more draws than the population holds"""
