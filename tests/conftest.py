"""Pytest configuration and fixtures for hatchery tests."""

import random

import pytest

from tests.fakes.scripted_rng import ConstantRandom

# Fixed wall clock (seconds) so ids and generated_at are reproducible
FIXED_CLOCK = 1_700_000_000.0


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def midpoint_rng():
    """Constant 0.5 stream used by the golden hatch scenario."""
    return ConstantRandom(0.5)


@pytest.fixture
def generator():
    """A generator with default tables, a fixed clock and a seeded factory."""
    from hatchery.genetics.generator import CreatureGeneticsGenerator

    seeds = iter(range(1_000_000))
    return CreatureGeneticsGenerator(
        rng_factory=lambda: random.Random(next(seeds)),
        clock=lambda: FIXED_CLOCK,
    )


@pytest.fixture
def tables():
    from hatchery.config.tables import DEFAULT_TABLES

    return DEFAULT_TABLES
