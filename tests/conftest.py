"""Shared test fixtures."""

from __future__ import annotations

import pytest

from microrand.core.generator import RandomGenerator
from microrand.core.rng import make_rng


@pytest.fixture
def rng() -> RandomGenerator:
    """Default-constant generator seeded with 1234."""
    return make_rng(1234)


@pytest.fixture
def park_miller_rng() -> RandomGenerator:
    """Park-Miller generator seeded with 1234."""
    return make_rng(1234, preset="park_miller")
