"""
Initial-height functions for seeding a WaveField.

Every factory returns a plain callable f(x, y) -> float over normalized
coordinates in [-1, 1]. WaveField only ever calls them at interior
lattice points, so none of them needs to care about the boundary.

- point_pulse: a single displaced lattice point (the classic "drop")
- gaussian_bump: smooth bump, good for clean circular ripples
- ring / uniform_disk: shaped displacements
- smoothed_noise: seeded random surface, low-pass filtered
"""

from __future__ import annotations
from typing import Callable
import math

import numpy as np
from scipy.ndimage import gaussian_filter

from ripplesim.core.lattice import round_half_away

HeightFn = Callable[[float, float], float]


def zero() -> HeightFn:
    """Flat surface."""
    def height(x: float, y: float) -> float:
        return 0.0
    return height


def point_pulse(
    granularity: int,
    x0: float = 0.0,
    y0: float = 0.0,
    amplitude: float = 1.0,
) -> HeightFn:
    """
    Displace the single lattice point nearest (x0, y0).

    Args:
        granularity: N of the target lattice (decides which point is nearest)
        x0, y0: Pulse position in normalized coordinates
        amplitude: Height at the pulse point
    """
    target = (round_half_away(x0 * granularity), round_half_away(y0 * granularity))

    def height(x: float, y: float) -> float:
        here = (round_half_away(x * granularity), round_half_away(y * granularity))
        return amplitude if here == target else 0.0
    return height


def gaussian_bump(
    x0: float = 0.0,
    y0: float = 0.0,
    amplitude: float = 1.0,
    sigma: float = 0.1,
) -> HeightFn:
    """
    Gaussian bump centered at (x0, y0).

    Args:
        x0, y0: Center in normalized coordinates
        amplitude: Peak height
        sigma: Standard deviation (spread), in normalized units
    """
    if sigma <= 0:
        raise ValueError(f"sigma must be positive, got {sigma}")

    def height(x: float, y: float) -> float:
        dist_sq = (x - x0) ** 2 + (y - y0) ** 2
        return amplitude * math.exp(-dist_sq / (2 * sigma ** 2))
    return height


def ring(
    radius: float,
    width: float,
    amplitude: float = 1.0,
    x0: float = 0.0,
    y0: float = 0.0,
) -> HeightFn:
    """Annulus of constant height: |dist - radius| < width/2."""
    def height(x: float, y: float) -> float:
        dist = math.hypot(x - x0, y - y0)
        return amplitude if abs(dist - radius) < width / 2 else 0.0
    return height


def uniform_disk(
    radius: float,
    amplitude: float = 1.0,
    x0: float = 0.0,
    y0: float = 0.0,
) -> HeightFn:
    """Disk of constant height."""
    def height(x: float, y: float) -> float:
        return amplitude if math.hypot(x - x0, y - y0) <= radius else 0.0
    return height


def smoothed_noise(
    granularity: int,
    amplitude: float = 1.0,
    sigma: float = 2.0,
    seed: int | None = None,
) -> HeightFn:
    """
    Random surface, Gaussian-smoothed and scaled so max |height| == amplitude.

    The noise is drawn once on a (2N+1)² grid, so sampling the returned
    function at lattice points is deterministic for a given seed.

    Args:
        granularity: N of the target lattice
        amplitude: Peak absolute height after scaling
        sigma: Smoothing width in lattice cells
        seed: RNG seed for reproducibility
    """
    rng = np.random.default_rng(seed)
    width = 2 * granularity + 1
    noise = gaussian_filter(rng.standard_normal((width, width)), sigma=sigma, mode="constant")
    peak = np.abs(noise).max()
    if peak > 0:
        noise *= amplitude / peak

    def height(x: float, y: float) -> float:
        i = round_half_away(x * granularity)
        j = round_half_away(y * granularity)
        if -granularity <= i <= granularity and -granularity <= j <= granularity:
            return float(noise[i + granularity, j + granularity])
        return 0.0
    return height


def superpose(*functions: HeightFn) -> HeightFn:
    """Sum of several height functions."""
    def height(x: float, y: float) -> float:
        return sum(f(x, y) for f in functions)
    return height
