"""
GridMesh: CPU-side vertex data for the rippling grid.

The mesh is a (2n+1)² grid of points in the y=0 plane, spanning
[-scale, scale] in x and z. Each vertex carries a scalar offset that the
vertex shader adds to its height; this module only fills that attribute,
it never talks to a GPU.

Vertex order is x-major: for x in -n..n, for y in -n..n.
"""

from __future__ import annotations
from typing import Callable, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ripplesim.core.wave_field import WaveField

DEFAULT_COLOR = (1.0, 0.0, 0.0)


class GridMesh:
    """
    Vertex attributes for a square grid: position, color, offset.

    Offsets are whatever the height source returns; they are copied
    without validation.
    """

    def __init__(
        self,
        scale: float = 1.0,
        num_steps: int = 50,
        color: tuple[float, float, float] = DEFAULT_COLOR,
        height_fn: Callable[[float, float], float] | None = None,
    ):
        """
        Create the grid.

        Args:
            scale: Half-extent of the grid in world units
            num_steps: n, with 2n+1 vertices per axis
            color: RGB color for every vertex
            height_fn: Initial offsets as f(x, y) over normalized coords (flat if None)
        """
        if num_steps < 1:
            raise ValueError(f"num_steps must be >= 1, got {num_steps}")

        self.scale = scale
        self.num_steps = num_steps

        steps = np.arange(-num_steps, num_steps + 1)
        xx, yy = np.meshgrid(steps, steps, indexing="ij")
        # Normalized (x, y) per vertex, in vertex order
        self.normalized = np.stack(
            [xx.ravel() / num_steps, yy.ravel() / num_steps], axis=1
        )

        count = self.normalized.shape[0]
        self.positions = np.zeros((count, 3), dtype=np.float32)
        self.positions[:, 0] = self.normalized[:, 0] * scale
        self.positions[:, 2] = self.normalized[:, 1] * scale

        self.colors = np.tile(np.asarray(color, dtype=np.float32), (count, 1))
        self.offsets = np.zeros(count, dtype=np.float32)

        # Bumped whenever offsets change, so a renderer knows to re-upload
        self.revision = 0

        if height_fn is not None:
            self.update_offsets(height_fn)

    @property
    def vertex_count(self) -> int:
        return self.offsets.shape[0]

    def update_offsets(self, fn: Callable[[float, float], float]) -> None:
        """Set each vertex offset to fn(x, y), visiting vertices in order."""
        for idx, (x, y) in enumerate(self.normalized):
            self.offsets[idx] = fn(float(x), float(y))
        self.revision += 1

    def update_from_field(self, field: "WaveField") -> None:
        """Same as update_offsets(field.sample), in one vectorized pass."""
        self.offsets[:] = field.sample_many(self.normalized[:, 0], self.normalized[:, 1])
        self.revision += 1

    def vertex_data(self) -> np.ndarray:
        """
        Interleaved float32 buffer, one row per vertex.

        Layout: [pos.x, pos.y, pos.z, r, g, b, offset]
        """
        return np.concatenate(
            [self.positions, self.colors, self.offsets[:, None]], axis=1
        ).astype(np.float32)

    def displaced_positions(self, height_scale: float = 1.0) -> np.ndarray:
        """Positions with the offset applied along y, as the shader would."""
        displaced = self.positions.copy()
        displaced[:, 1] += self.offsets * height_scale
        return displaced
