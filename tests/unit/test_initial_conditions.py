"""Unit tests for initial-height functions."""

import numpy as np
import pytest

from ripplesim.core import initial_conditions as ic
from ripplesim.core import create_wave_field


class TestPointPulse:
    """Tests for single-point pulses."""

    def test_center_pulse(self):
        fn = ic.point_pulse(granularity=4)
        assert fn(0.0, 0.0) == 1.0
        assert fn(0.25, 0.0) == 0.0
        assert fn(0.0, -0.25) == 0.0

    def test_off_center_pulse_snaps_to_lattice(self):
        fn = ic.point_pulse(granularity=4, x0=0.3, y0=-0.45, amplitude=2.0)
        # 0.3*4 = 1.2 -> 1, -0.45*4 = -1.8 -> -2
        assert fn(0.25, -0.5) == 2.0
        assert fn(0.5, -0.5) == 0.0

    def test_exactly_one_point_displaced(self):
        field = create_wave_field(granularity=5, initial_height=ic.point_pulse(5, x0=0.4))
        heights = field.heights
        assert np.count_nonzero(heights) == 1
        assert field.height_at(2, 0) == 1.0


class TestGaussianBump:
    """Tests for Gaussian bumps."""

    def test_peak_at_center(self):
        fn = ic.gaussian_bump(x0=0.2, y0=-0.1, amplitude=3.0, sigma=0.1)
        assert fn(0.2, -0.1) == pytest.approx(3.0)

    def test_falls_off_with_distance(self):
        fn = ic.gaussian_bump(sigma=0.2)
        assert fn(0.0, 0.0) > fn(0.1, 0.0) > fn(0.3, 0.0) > 0.0

    def test_one_sigma(self):
        fn = ic.gaussian_bump(sigma=0.2)
        assert fn(0.2, 0.0) == pytest.approx(np.exp(-0.5))

    def test_invalid_sigma(self):
        with pytest.raises(ValueError):
            ic.gaussian_bump(sigma=0.0)


class TestShapes:
    """Tests for ring and disk displacements."""

    def test_ring(self):
        fn = ic.ring(radius=0.5, width=0.1, amplitude=2.0)
        assert fn(0.5, 0.0) == 2.0
        assert fn(0.0, -0.52) == 2.0
        assert fn(0.0, 0.0) == 0.0
        assert fn(0.7, 0.0) == 0.0

    def test_uniform_disk(self):
        fn = ic.uniform_disk(radius=0.3, amplitude=0.5, x0=0.5)
        assert fn(0.5, 0.0) == 0.5
        assert fn(0.7, 0.1) == 0.5
        assert fn(0.0, 0.0) == 0.0

    def test_zero(self):
        fn = ic.zero()
        assert fn(0.3, -0.9) == 0.0


class TestSmoothedNoise:
    """Tests for seeded random surfaces."""

    def test_reproducible(self):
        a = ic.smoothed_noise(granularity=6, seed=7)
        b = ic.smoothed_noise(granularity=6, seed=7)
        points = [(i / 6, j / 6) for i in range(-6, 7) for j in range(-6, 7)]
        assert [a(x, y) for x, y in points] == [b(x, y) for x, y in points]

    def test_different_seeds_differ(self):
        a = ic.smoothed_noise(granularity=6, seed=1)
        b = ic.smoothed_noise(granularity=6, seed=2)
        assert a(0.0, 0.0) != b(0.0, 0.0)

    def test_scaled_to_amplitude(self):
        fn = ic.smoothed_noise(granularity=6, amplitude=0.5, seed=0)
        values = np.array([fn(i / 6, j / 6) for i in range(-6, 7) for j in range(-6, 7)])
        assert np.abs(values).max() == pytest.approx(0.5)

    def test_outside_grid_is_zero(self):
        fn = ic.smoothed_noise(granularity=6, seed=0)
        assert fn(2.0, 0.0) == 0.0


class TestSuperpose:
    """Tests for summing height functions."""

    def test_sum(self):
        fn = ic.superpose(ic.uniform_disk(radius=1.0, amplitude=1.0), ic.gaussian_bump(sigma=0.1))
        assert fn(0.0, 0.0) == pytest.approx(2.0)
        assert fn(0.9, 0.0) == pytest.approx(1.0, abs=1e-6)

    def test_empty_is_zero(self):
        assert ic.superpose()(0.1, 0.2) == 0.0
