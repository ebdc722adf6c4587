"""Shared fixtures for the synthesis test suite."""

import numpy as np
import pytest

from cerke_bg import NoiseLattice


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def lattice(rng):
    """Random 16x12 lattice."""
    return NoiseLattice.generate(16, 12, rng)


@pytest.fixture
def ramp_lattice():
    """4x3 lattice whose value at (x, y) is y * 4 + x."""
    return NoiseLattice(4, 3, np.arange(12, dtype=np.float64))
