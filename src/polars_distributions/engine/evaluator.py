"""
Evaluators binding a statistic to a distribution factory.

An Evaluator pairs a FunctionKind (pdf, ln_pdf, cdf, sf, pmf, ln_pmf) with a
DistributionFactory. Evaluating builds the distribution from the parameters
(validating them) and calls the matching scipy.stats method at the
evaluation point.

Survival values come straight from scipy's ``sf``; they are not derived
from the cdf here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from polars_distributions.domain.enums import FunctionKind

if TYPE_CHECKING:
    from polars_distributions.engine.factory import DistributionFactory


@dataclass(frozen=True)
class Evaluator:
    """
    Computes one statistic of one distribution.

    Attributes:
        kind: Statistic to compute
        factory: Validating constructor for the distribution
    """

    kind: FunctionKind
    factory: DistributionFactory

    def __post_init__(self) -> None:
        if self.kind.is_mass and not self.factory.discrete:
            raise ValueError(
                f"{self.kind} is only defined for discrete distributions, "
                f"{self.factory.distribution} is continuous"
            )
        if self.kind.is_density and self.factory.discrete:
            raise ValueError(
                f"{self.kind} is only defined for continuous distributions, "
                f"{self.factory.distribution} is discrete"
            )

    @property
    def name(self) -> str:
        """Conventional function name, e.g. ``gamma_cdf``."""
        return f"{self.factory.distribution}_{self.kind}"

    def evaluate(self, x: float, *params: float) -> float:
        """
        Evaluate the statistic for a single row.

        Raises:
            ParameterError: if the parameters are outside the domain
        """
        dist = self.factory.make(*params)
        return float(getattr(dist, self.kind.method)(float(x)))

    def evaluate_batch(self, x: np.ndarray, *params: np.ndarray) -> np.ndarray:
        """
        Evaluate the statistic for many rows at once.

        All arrays must have the same length. Row i of the result corresponds
        to row i of the inputs.

        Raises:
            ParameterError: for the first row whose parameters are invalid
        """
        if len(x) == 0:
            return np.empty(0, dtype=np.float64)
        dist = self.factory.make(*params)
        values: Any = getattr(dist, self.kind.method)(np.asarray(x, dtype=np.float64))
        return np.broadcast_to(np.asarray(values, dtype=np.float64), (len(x),)).copy()
