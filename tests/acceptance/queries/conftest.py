"""
Fixtures for end-to-end query scenarios.

Scenarios run registered functions through Polars LazyFrame queries the
way a caller would: build a namespace, reference functions by name,
collect.
"""

from __future__ import annotations

import polars as pl
import pytest

from polars_distributions import create_registry


@pytest.fixture(scope="module")
def registry() -> dict:
    return create_registry()


@pytest.fixture
def binomial_frame() -> pl.LazyFrame:
    return pl.LazyFrame(
        {"x": [0, 1, 1], "n": [3, 3, 3], "p": [0.25, 0.25, 0.25]},
        schema={"x": pl.UInt64, "n": pl.UInt64, "p": pl.Float64},
    )


@pytest.fixture
def hypergeometric_frame() -> pl.LazyFrame:
    return pl.LazyFrame(
        {"k": [5, 0, None], "N": [20, 20, 20], "K": [10, 10, 10], "n": [15, 15, 15]},
        schema={"k": pl.UInt64, "N": pl.UInt64, "K": pl.UInt64, "n": pl.UInt64},
    )
