"""
WaveField: explicit finite-difference integrator for the 2D wave equation.

State is a pair of co-indexed fields over the lattice:
- H: height (wave amplitude)
- V: velocity (rate of change of height)

Each advance(dt) applies one semi-implicit Euler step of

    d²H/dt² = α · ∇²H

on interior points, with H pinned to zero on the boundary ring.

Stability is a modeling constraint, not a runtime check: the scheme stays
bounded only while α·dt²/h² is small (see ripplesim.analysis.stability).
Past that limit heights grow without bound.
"""

from __future__ import annotations
from typing import Protocol, Callable, Union
import math

import numpy as np

from ripplesim.core.lattice import Lattice, LatticeConfig


class HeightFunction(Protocol):
    """Initial height as a pure function of normalized coordinates in [-1, 1]."""

    def __call__(self, x: float, y: float) -> float:
        ...


class WaveField:
    """
    Wave field simulator on a fixed (2N+1)² lattice.

    The driver constructs it once, then per frame calls advance(dt)
    followed by sample(x, y) for every mesh vertex. Nothing else touches
    the fields directly; heights/velocities hand out copies.
    """

    def __init__(
        self,
        config: LatticeConfig,
        initial_height: HeightFunction | None = None,
    ):
        """
        Build the field pair from an initial height function.

        Args:
            config: Lattice granularity, stiffness and dtype
            initial_height: Called once per interior point with (i/N, j/N).
                Boundary points are never passed to it. None means flat.
        """
        self.config = config
        self.lattice = Lattice(config)
        shape = self.lattice.shape
        dtype = config.dtype

        self._heights = np.zeros(shape, dtype=dtype)
        self._velocities = np.zeros(shape, dtype=dtype)
        # Staging buffer for the next generation, swapped with _heights
        self._scratch = np.zeros(shape, dtype=dtype)

        self.time = 0.0
        self.steps = 0

        if initial_height is not None:
            n = config.granularity
            for i, j in self.lattice.iter_interior():
                self._heights[i + n, j + n] = initial_height(i / n, j / n)

    @classmethod
    def from_array(cls, config: LatticeConfig, heights: np.ndarray) -> WaveField:
        """
        Build a field from a ready-made height grid indexed [i+N, j+N].

        The boundary ring is forced to zero regardless of the input.
        """
        field = cls(config)
        heights = np.asarray(heights)
        if heights.shape != field.lattice.shape:
            raise ValueError(
                f"heights must have shape {field.lattice.shape}, got {heights.shape}"
            )
        field._heights[...] = heights
        field._heights[field.lattice.boundary_mask] = 0.0
        return field

    # ------------------------------------------------------------------
    # Time stepping
    # ------------------------------------------------------------------

    def advance(self, dt: float) -> None:
        """
        Advance simulated time by dt.

        For each interior point the 3-point second difference in each axis
        is read from the pre-step heights, velocity is updated first
        (V += α·L·dt), then the new height uses the updated velocity
        (H' = H + V·dt). New heights are staged in a scratch buffer and
        swapped in as a whole generation, so no stencil sees a neighbor
        from the same step. Boundary heights are staged as zero and
        boundary velocities are never touched.
        """
        dt = float(dt)
        h = self.lattice.spacing
        alpha = self.config.stiffness

        H = self._heights
        center = H[1:-1, 1:-1]

        d2x = ((H[2:, 1:-1] - center) / h - (center - H[:-2, 1:-1]) / h) / h
        d2y = ((H[1:-1, 2:] - center) / h - (center - H[1:-1, :-2]) / h) / h
        accel = alpha * (d2x + d2y)

        v = self._velocities[1:-1, 1:-1]
        v += accel * dt

        staged = self._scratch
        staged[1:-1, 1:-1] = center + v * dt
        staged[0, :] = 0.0
        staged[-1, :] = 0.0
        staged[:, 0] = 0.0
        staged[:, -1] = 0.0

        self._heights, self._scratch = staged, H
        self.time += dt
        self.steps += 1

    def run(self, dt: float, n_steps: int) -> dict:
        """
        Advance n_steps times with a fixed dt.

        Returns:
            Statistics dictionary
        """
        for _ in range(n_steps):
            self.advance(dt)

        abs_heights = np.abs(self._heights)
        return {
            "n_steps": n_steps,
            "time": self.time,
            "max_abs_height": float(abs_heights.max()),
            "mean_abs_height": float(abs_heights.mean()),
        }

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def sample(self, x: float, y: float) -> float:
        """
        Height at normalized position (x, y), nearest-neighbor.

        Rounds to the closest lattice coordinate. Anything on or outside
        the boundary ring, and any non-finite input, gives 0.0.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            return 0.0

        i, j = self.lattice.nearest(x, y)
        if self.lattice.is_boundary(i, j):
            return 0.0

        n = self.config.granularity
        return float(self._heights[i + n, j + n])

    def sample_many(self, xs, ys) -> np.ndarray:
        """Vectorized sample(): same per-point semantics over arrays of positions."""
        n = self.config.granularity
        xs = np.asarray(xs, dtype=np.float64) * n
        ys = np.asarray(ys, dtype=np.float64) * n
        xs, ys = np.broadcast_arrays(xs, ys)

        result = np.zeros(xs.shape, dtype=self._heights.dtype)
        finite = np.isfinite(xs) & np.isfinite(ys)

        ii = np.zeros(xs.shape, dtype=np.float64)
        jj = np.zeros(ys.shape, dtype=np.float64)
        ii[finite] = np.sign(xs[finite]) * np.floor(np.abs(xs[finite]) + 0.5)
        jj[finite] = np.sign(ys[finite]) * np.floor(np.abs(ys[finite]) + 0.5)

        inside = finite & (ii > -n) & (ii < n) & (jj > -n) & (jj < n)
        rows = ii[inside].astype(np.int64) + n
        cols = jj[inside].astype(np.int64) + n
        result[inside] = self._heights[rows, cols]
        return result

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def heights(self) -> np.ndarray:
        """Copy of the height field, indexed [i+N, j+N]."""
        return self._heights.copy()

    @property
    def velocities(self) -> np.ndarray:
        """Copy of the velocity field, indexed [i+N, j+N]."""
        return self._velocities.copy()

    def height_at(self, i: int, j: int) -> float:
        return float(self._heights[self.lattice.offset(i, j)])

    def velocity_at(self, i: int, j: int) -> float:
        return float(self._velocities[self.lattice.offset(i, j)])

    def copy(self) -> WaveField:
        """Independent simulator with identical state."""
        result = type(self)(self.config)
        result._heights[...] = self._heights
        result._velocities[...] = self._velocities
        result.time = self.time
        result.steps = self.steps
        return result


def create_wave_field(
    granularity: int,
    stiffness: float = 1.0,
    initial_height: Union[HeightFunction, Callable[[float, float], float], None] = None,
) -> WaveField:
    """
    Factory mirroring the (resolution, stiffness, initial_height) constructor.

    Args:
        granularity: N, with 2N+1 lattice points per axis (must be >= 1)
        stiffness: α, controls propagation speed
        initial_height: Function of normalized (x, y); None for a flat field
    """
    config = LatticeConfig(granularity=granularity, stiffness=stiffness)
    return WaveField(config, initial_height)
