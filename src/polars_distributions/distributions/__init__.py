"""
Probability distribution function sets.

Each module exposes constructors for its functions (``pdf()``, ``cdf()``,
...), ``functions()`` returning all of them, and ``register(registry)``.

Usage:
    from polars_distributions.distributions import create_registry

    registry = create_registry()
    df.lazy().dist.apply(registry, "gamma_cdf", "x", "shape", "rate")
"""

from __future__ import annotations

import logging
from types import ModuleType

from polars_distributions.contracts.config import RegistrationConfig
from polars_distributions.distributions import (
    bernoulli,
    beta,
    binomial,
    cauchy,
    chi,
    chi_squared,
    dirac,
    discrete_uniform,
    erlang,
    exp,
    fisher_snedecor,
    gamma,
    geometric,
    gumbel,
    hypergeometric,
    inverse_gamma,
    laplace,
    log_normal,
    negative_binomial,
    normal,
    pareto,
    poisson,
    students_t,
    triangular,
    uniform,
    weibull,
)
from polars_distributions.engine.registry import FunctionRegistry
from polars_distributions.engine.registry import register as _register

logger = logging.getLogger(__name__)

DISTRIBUTIONS: dict[str, ModuleType] = {
    "bernoulli": bernoulli,
    "beta": beta,
    "binomial": binomial,
    "cauchy": cauchy,
    "chi": chi,
    "chi_squared": chi_squared,
    "dirac": dirac,
    "discrete_uniform": discrete_uniform,
    "erlang": erlang,
    "exp": exp,
    "fisher_snedecor": fisher_snedecor,
    "gamma": gamma,
    "geometric": geometric,
    "gumbel": gumbel,
    "hypergeometric": hypergeometric,
    "inverse_gamma": inverse_gamma,
    "laplace": laplace,
    "log_normal": log_normal,
    "negative_binomial": negative_binomial,
    "normal": normal,
    "pareto": pareto,
    "poisson": poisson,
    "students_t": students_t,
    "triangular": triangular,
    "uniform": uniform,
    "weibull": weibull,
}


def register(
    registry: FunctionRegistry,
    config: RegistrationConfig | None = None,
) -> FunctionRegistry:
    """
    Register distribution functions into a namespace.

    Args:
        registry: Namespace to modify in place
        config: Selection of distributions and statistics (default: all)

    Returns:
        The same registry

    Raises:
        ValueError: if the config names an unknown distribution
    """
    config = config or RegistrationConfig.all()

    if config.distributions is not None:
        unknown = sorted(config.distributions.difference(DISTRIBUTIONS))
        if unknown:
            raise ValueError(f"Unknown distributions: {', '.join(unknown)}")

    selected = [
        udf
        for name, module in DISTRIBUTIONS.items()
        if config.includes_distribution(name)
        for udf in module.functions()
        if config.includes_kind(udf.kind)
    ]
    _register(registry, selected)
    logger.info("Registered %d functions", len(selected))
    return registry


def create_registry(config: RegistrationConfig | None = None) -> dict:
    """Fresh namespace holding the configured distribution functions."""
    registry: dict = {}
    register(registry, config)
    return registry


__all__ = [
    "DISTRIBUTIONS",
    "register",
    "create_registry",
]
