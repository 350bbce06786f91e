"""
RippleScene: the per-frame update loop around a WaveField.

Each frame:
1. Measure elapsed wall-clock time since the previous frame
2. field.advance(dt)
3. Copy field samples into the mesh offsets

Rendering is someone else's job; the scene only keeps the mesh current.
"""

from __future__ import annotations
from dataclasses import dataclass, field as dc_field
from typing import Callable
import logging
import time

from ripplesim.analysis.stability import max_stable_dt
from ripplesim.core.wave_field import WaveField
from ripplesim.mesh.grid import GridMesh

logger = logging.getLogger(__name__)


@dataclass
class SceneConfig:
    """Configuration for the frame driver."""

    max_dt: float | None = None  # Clamp for long frames (None = no clamp)
    time_scale: float = 1.0  # Simulated seconds per wall-clock second
    vectorized_sampling: bool = True  # Use sample_many instead of per-vertex sample

    def __post_init__(self):
        if self.max_dt is not None and self.max_dt <= 0:
            raise ValueError(f"max_dt must be positive, got {self.max_dt}")
        if self.time_scale <= 0:
            raise ValueError(f"time_scale must be positive, got {self.time_scale}")


@dataclass
class RippleScene:
    """
    Drives a WaveField and keeps a GridMesh in sync with it.

    The clock is injectable so frames can be replayed deterministically.
    """

    wave_field: WaveField
    mesh: GridMesh
    config: SceneConfig = dc_field(default_factory=SceneConfig)
    clock: Callable[[], float] = time.perf_counter

    frames: int = dc_field(default=0, init=False)
    _last_time: float | None = dc_field(default=None, init=False)
    _warned_unstable: bool = dc_field(default=False, init=False)
    _stable_dt: float = dc_field(default=0.0, init=False)

    def __post_init__(self):
        self._stable_dt = max_stable_dt(self.wave_field.config)
        self.mesh.update_from_field(self.wave_field)

    def update(self, now: float | None = None) -> float:
        """
        Advance by the time elapsed since the previous call.

        The first call only starts the clock and advances by zero.

        Returns:
            The dt actually applied
        """
        if now is None:
            now = self.clock()

        if self._last_time is None:
            dt = 0.0
        else:
            dt = max(0.0, now - self._last_time) * self.config.time_scale
        self._last_time = now

        if self.config.max_dt is not None:
            dt = min(dt, self.config.max_dt)

        self.step(dt)
        return dt

    def step(self, dt: float) -> None:
        """Advance the field by an explicit dt and refresh the mesh."""
        if dt >= self._stable_dt and not self._warned_unstable:
            logger.warning(
                "Frame dt=%.4g exceeds the stability limit %.4g "
                "(granularity=%d, stiffness=%g); heights will diverge",
                dt,
                self._stable_dt,
                self.wave_field.config.granularity,
                self.wave_field.config.stiffness,
            )
            self._warned_unstable = True

        self.wave_field.advance(dt)

        if self.config.vectorized_sampling:
            self.mesh.update_from_field(self.wave_field)
        else:
            self.mesh.update_offsets(self.wave_field.sample)

        self.frames += 1
        logger.debug("frame %d: dt=%.4g t=%.4g", self.frames, dt, self.wave_field.time)
