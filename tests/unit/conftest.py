"""
Shared fixtures for distribution function unit tests.
"""

from __future__ import annotations

import pytest

from polars_distributions.distributions import create_registry


@pytest.fixture(scope="session")
def registry() -> dict:
    """Namespace holding every distribution function."""
    return create_registry()


@pytest.fixture
def empty_registry() -> dict:
    """Fresh namespace with nothing registered."""
    return {}
