"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def small_config():
    """Configuration for a small 17x17 lattice."""
    from ripplesim.core import LatticeConfig
    return LatticeConfig(granularity=8, stiffness=1.0)


@pytest.fixture
def pulse_field():
    """N=2 lattice with a unit displacement at the center only."""
    from ripplesim.core import create_wave_field

    def center_only(x, y):
        return 1.0 if x == 0 and y == 0 else 0.0

    return create_wave_field(granularity=2, stiffness=1.0, initial_height=center_only)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
