"""Pytest configuration and fixtures for Sub Boom! tests."""

import random

import pytest

from game.subboom.config import SimConfig
from game.subboom.state import new_state


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def config():
    """Default-sized world at 30 FPS."""
    return SimConfig()


@pytest.fixture
def state(config, seeded_rng):
    """A fresh round: destroyer only, empty collections."""
    return new_state(config, seeded_rng)
