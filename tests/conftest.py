"""Shared fixtures for shamirsolve tests."""

import random
import pytest
from shamirsolve import rational


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def sample_rationals(rng):
    """20 small random rationals (nonzero denominators) for property testing."""
    out = []
    for _ in range(20):
        den = rng.choice([d for d in range(-12, 13) if d != 0])
        out.append(rational.make(rng.randint(-50, 50), den))
    return out


@pytest.fixture
def sample_text():
    """A four-share, threshold-3 case on f(x) = x^2 + 3."""
    return """{
    "keys": {
        "n": 4,
        "k": 3
    },
    "1": {
        "base": "10",
        "value": "4"
    },
    "2": {
        "base": "2",
        "value": "111"
    },
    "3": {
        "base": "10",
        "value": "12"
    },
    "6": {
        "base": "4",
        "value": "213"
    }
}
"""
