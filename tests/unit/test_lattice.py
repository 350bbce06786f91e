"""Unit tests for Lattice and LatticeConfig."""

import math

import numpy as np
import pytest

from ripplesim.core.lattice import Lattice, LatticeConfig, round_half_away


class TestLatticeConfig:
    """Tests for LatticeConfig."""

    def test_default_config(self):
        cfg = LatticeConfig(granularity=10)
        assert cfg.granularity == 10
        assert cfg.stiffness == 1.0
        assert cfg.dtype == np.float32

    def test_custom_config(self):
        cfg = LatticeConfig(granularity=3, stiffness=0.25, dtype=np.float64)
        assert cfg.granularity == 3
        assert cfg.stiffness == 0.25
        assert cfg.dtype == np.float64

    def test_numpy_integer_granularity(self):
        cfg = LatticeConfig(granularity=np.int64(4))
        assert cfg.granularity == 4
        assert type(cfg.granularity) is int

    @pytest.mark.parametrize("granularity", [0, -3, 1.5, True, "4"])
    def test_invalid_granularity(self, granularity):
        with pytest.raises(ValueError):
            LatticeConfig(granularity=granularity)

    @pytest.mark.parametrize("dtype", [np.int32, np.int64, bool, np.complex128, "not-a-dtype"])
    def test_invalid_dtype(self, dtype):
        with pytest.raises(ValueError):
            LatticeConfig(granularity=2, dtype=dtype)

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.float64, "float64"])
    def test_floating_dtypes_accepted(self, dtype):
        cfg = LatticeConfig(granularity=2, dtype=dtype)
        assert cfg.dtype == dtype

    def test_fractional_heights_kept(self):
        from ripplesim.core.wave_field import WaveField

        field = WaveField(LatticeConfig(granularity=2, dtype=np.float64), lambda x, y: 0.5)
        assert field.height_at(0, 0) == 0.5

    @pytest.mark.parametrize("stiffness", [0.0, -1.0, math.nan, math.inf])
    def test_invalid_stiffness(self, stiffness):
        with pytest.raises(ValueError):
            LatticeConfig(granularity=4, stiffness=stiffness)


class TestRounding:
    """Tests for half-away-from-zero rounding."""

    def test_ties_go_away_from_zero(self):
        assert round_half_away(0.5) == 1
        assert round_half_away(2.5) == 3
        assert round_half_away(-0.5) == -1
        assert round_half_away(-2.5) == -3

    def test_non_ties(self):
        assert round_half_away(0.49) == 0
        assert round_half_away(-0.49) == 0
        assert round_half_away(1.51) == 2
        assert round_half_away(-1.51) == -2


class TestLatticeGeometry:
    """Tests for sizes, index mapping and boundary set."""

    def test_sizes(self):
        lat = Lattice(LatticeConfig(granularity=5))
        assert lat.width == 11
        assert lat.shape == (11, 11)
        assert lat.size == 121
        assert lat.spacing == pytest.approx(0.2)

    def test_index_mapping(self):
        lat = Lattice(LatticeConfig(granularity=3))
        assert lat.index(-3, -3) == 0
        assert lat.index(-3, -2) == 1
        assert lat.index(-2, -3) == 7
        assert lat.index(0, 0) == 3 * 7 + 3
        assert lat.index(3, 3) == lat.size - 1

    def test_index_is_dense_and_unique(self):
        lat = Lattice(LatticeConfig(granularity=4))
        indices = sorted(lat.index(i, j) for i, j in lat.iter_coords())
        assert indices == list(range(lat.size))

    def test_offset_outside_raises(self):
        lat = Lattice(LatticeConfig(granularity=2))
        with pytest.raises(ValueError):
            lat.offset(3, 0)

    def test_boundary_mask_count(self):
        n = 6
        lat = Lattice(LatticeConfig(granularity=n))
        expected = (2 * n + 1) ** 2 - (2 * n - 1) ** 2
        assert lat.boundary_mask.sum() == expected
        assert lat.interior_mask.sum() == (2 * n - 1) ** 2

    def test_boundary_mask_matches_is_boundary(self):
        lat = Lattice(LatticeConfig(granularity=3))
        for i, j in lat.iter_coords():
            assert lat.boundary_mask[lat.offset(i, j)] == lat.is_boundary(i, j)

    def test_is_boundary_outside(self):
        lat = Lattice(LatticeConfig(granularity=2))
        assert lat.is_boundary(5, 0)
        assert lat.is_boundary(0, -7)
        assert not lat.is_boundary(1, -1)

    def test_normalized_and_nearest(self):
        lat = Lattice(LatticeConfig(granularity=4))
        assert lat.normalized(2, -4) == (0.5, -1.0)
        assert lat.nearest(0.5, -1.0) == (2, -4)
        assert lat.nearest(0.125, -0.125) == (1, -1)


class TestIteration:
    """Tests for coordinate iteration."""

    def test_iter_coords_count(self):
        lat = Lattice(LatticeConfig(granularity=3))
        assert len(list(lat.iter_coords())) == 49

    def test_iter_interior_excludes_boundary(self):
        lat = Lattice(LatticeConfig(granularity=3))
        interior = list(lat.iter_interior())
        assert len(interior) == 25
        assert not any(lat.is_boundary(i, j) for i, j in interior)

    def test_single_interior_point(self):
        lat = Lattice(LatticeConfig(granularity=1))
        assert list(lat.iter_interior()) == [(0, 0)]
