"""
Registration configuration.

RegistrationConfig selects which distribution functions a bulk
registration installs. The default installs everything.

Usage:
    config = RegistrationConfig.only("normal", "binomial")
    config = RegistrationConfig.all().with_kinds(FunctionKind.CDF, FunctionKind.SF)
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from polars_distributions.domain.enums import FunctionKind


@dataclass(frozen=True)
class RegistrationConfig:
    """
    Selection of functions to register.

    Attributes:
        distributions: Distribution names to include (None = all)
        kinds: Statistics to include (None = all the distribution offers)
    """

    distributions: frozenset[str] | None = None
    kinds: frozenset[FunctionKind] | None = None

    @classmethod
    def all(cls) -> RegistrationConfig:
        """Every function of every distribution."""
        return cls()

    @classmethod
    def only(cls, *distributions: str) -> RegistrationConfig:
        """Every function of the named distributions."""
        return cls(distributions=frozenset(distributions))

    def with_kinds(self, *kinds: FunctionKind | str) -> RegistrationConfig:
        """Copy restricted to the given statistics."""
        return replace(self, kinds=frozenset(FunctionKind(k) for k in kinds))

    def includes_distribution(self, name: str) -> bool:
        return self.distributions is None or name in self.distributions

    def includes_kind(self, kind: FunctionKind) -> bool:
        return self.kinds is None or kind in self.kinds
