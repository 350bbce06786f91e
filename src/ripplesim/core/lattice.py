"""
Lattice: the square grid of sample points the wave field lives on.

Coordinates are integer pairs (i, j) with i, j in [-N, N], where N is the
granularity. Each coordinate maps to the normalized position
(i/N, j/N) in [-1, 1]².

The outer ring (|i| == N or |j| == N) is the boundary set. The lattice
only knows geometry; heights and velocities live in WaveField.
"""

from dataclasses import dataclass
from typing import Iterator
import math

import numpy as np


@dataclass
class LatticeConfig:
    """Configuration for a wave-field lattice."""

    granularity: int  # N: half-width in grid units, 2N+1 points per axis
    stiffness: float = 1.0  # α: scales curvature into acceleration
    dtype: type = np.float32  # Storage precision of the fields

    def __post_init__(self):
        if isinstance(self.granularity, bool) or not isinstance(
            self.granularity, (int, np.integer)
        ):
            raise ValueError(f"granularity must be an integer, got {self.granularity!r}")
        if self.granularity < 1:
            raise ValueError(f"granularity must be >= 1, got {self.granularity}")
        if not math.isfinite(self.stiffness) or self.stiffness <= 0:
            raise ValueError(f"stiffness must be positive and finite, got {self.stiffness}")
        try:
            floating = np.issubdtype(np.dtype(self.dtype), np.floating)
        except TypeError:
            floating = False
        if not floating:
            raise ValueError(f"dtype must be a floating-point type, got {self.dtype!r}")
        self.granularity = int(self.granularity)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class Lattice:
    """
    Geometry of the (2N+1)² lattice.

    Fields are stored as dense 2D arrays of shape (2N+1, 2N+1), where
    lattice coordinate (i, j) lives at array position [i + N, j + N].
    Row-major flattening gives index(i, j) = (i+N)·(2N+1) + (j+N).
    """

    def __init__(self, config: LatticeConfig):
        self.config = config
        n = config.granularity
        width = 2 * n + 1

        self.boundary_mask = np.zeros((width, width), dtype=bool)
        self.boundary_mask[0, :] = True
        self.boundary_mask[-1, :] = True
        self.boundary_mask[:, 0] = True
        self.boundary_mask[:, -1] = True

    @property
    def granularity(self) -> int:
        return self.config.granularity

    @property
    def width(self) -> int:
        """Points per axis (2N+1)."""
        return 2 * self.config.granularity + 1

    @property
    def shape(self) -> tuple[int, int]:
        return self.width, self.width

    @property
    def size(self) -> int:
        """Total number of lattice points, (2N+1)²."""
        return self.width * self.width

    @property
    def spacing(self) -> float:
        """Grid spacing h = 1/N in normalized coordinates."""
        return 1.0 / self.config.granularity

    @property
    def interior_mask(self) -> np.ndarray:
        return ~self.boundary_mask

    def contains(self, i: int, j: int) -> bool:
        n = self.config.granularity
        return -n <= i <= n and -n <= j <= n

    def is_boundary(self, i: int, j: int) -> bool:
        """True for coordinates on (or outside) the outer ring."""
        n = self.config.granularity
        return i <= -n or i >= n or j <= -n or j >= n

    def offset(self, i: int, j: int) -> tuple[int, int]:
        """Array position of lattice coordinate (i, j)."""
        if not self.contains(i, j):
            raise ValueError(f"({i}, {j}) is outside the lattice")
        n = self.config.granularity
        return i + n, j + n

    def index(self, i: int, j: int) -> int:
        """Flat (row-major) index of lattice coordinate (i, j)."""
        row, col = self.offset(i, j)
        return row * self.width + col

    def normalized(self, i: int, j: int) -> tuple[float, float]:
        """Continuous position (i/N, j/N) of a lattice coordinate."""
        n = self.config.granularity
        return i / n, j / n

    def nearest(self, x: float, y: float) -> tuple[int, int]:
        """Nearest lattice coordinate to a normalized position (may fall outside)."""
        n = self.config.granularity
        return round_half_away(x * n), round_half_away(y * n)

    def iter_coords(self) -> Iterator[tuple[int, int]]:
        """Iterate over all (i, j) coordinates, i-major."""
        n = self.config.granularity
        for i in range(-n, n + 1):
            for j in range(-n, n + 1):
                yield i, j

    def iter_interior(self) -> Iterator[tuple[int, int]]:
        """Iterate over interior (non-boundary) coordinates."""
        n = self.config.granularity
        for i in range(-n + 1, n):
            for j in range(-n + 1, n):
                yield i, j
