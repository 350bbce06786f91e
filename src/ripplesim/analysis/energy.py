"""
Energy diagnostics for a WaveField.

The continuous wave equation conserves

    E = ½∫V² + ½α∫|∇H|²

On the lattice the gradient term becomes -½α·HᵀLH with L the interior
Dirichlet Laplacian. The semi-implicit Euler step does not conserve E
exactly but keeps it bounded under stable parameters, so a growing
energy is the quickest sign of a sign or stencil error.

IMPORTANT: read-only. Nothing here changes the field except
track_energy, which advances it on purpose.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ripplesim.analysis.stability import build_dirichlet_laplacian

if TYPE_CHECKING:
    from ripplesim.core.wave_field import WaveField


@dataclass
class EnergyReport:
    """Energy split of a field at one instant."""

    kinetic: float
    potential: float
    total: float
    max_abs_height: float


def field_energy(field: "WaveField") -> EnergyReport:
    """
    Compute the discrete energy of a field.

    Both terms are area-weighted by h², so refining N with the same
    continuous initial condition gives comparable numbers.
    """
    h2 = field.lattice.spacing ** 2
    heights = field.heights.astype(np.float64)
    velocities = field.velocities.astype(np.float64)

    h_inner = heights[1:-1, 1:-1].ravel()
    v_inner = velocities[1:-1, 1:-1].ravel()

    L = build_dirichlet_laplacian(field.config.granularity)

    kinetic = 0.5 * float(v_inner @ v_inner) * h2
    potential = -0.5 * field.config.stiffness * float(h_inner @ (L @ h_inner)) * h2

    return EnergyReport(
        kinetic=kinetic,
        potential=potential,
        total=kinetic + potential,
        max_abs_height=float(np.abs(heights).max()),
    )


def track_energy(
    field: "WaveField",
    dt: float,
    n_steps: int,
    every: int = 1,
) -> dict[str, np.ndarray]:
    """
    Advance a field and record its energy along the way.

    Args:
        field: Field to advance (mutated)
        dt: Step size
        n_steps: Number of advance calls
        every: Record every `every` steps (the initial state is always recorded)

    Returns:
        Dict of 1D arrays: "time", "kinetic", "potential", "total", "max_abs_height"
    """
    if every < 1:
        raise ValueError(f"every must be >= 1, got {every}")

    history = {key: [] for key in ("time", "kinetic", "potential", "total", "max_abs_height")}

    def record():
        report = field_energy(field)
        history["time"].append(field.time)
        history["kinetic"].append(report.kinetic)
        history["potential"].append(report.potential)
        history["total"].append(report.total)
        history["max_abs_height"].append(report.max_abs_height)

    record()
    for step in range(1, n_steps + 1):
        field.advance(dt)
        if step % every == 0:
            record()

    return {key: np.array(values) for key, values in history.items()}


def compute_radial_profile(
    heights: np.ndarray,
    center: tuple[int, int] = (0, 0),
    max_radius: int | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Mean height on each integer-radius ring around a lattice coordinate.

    Lattice point (i, j) falls in ring r = round(|(i, j) - center|), so
    ring 0 is the center alone and ring 1 holds its eight neighbors
    (distances 1 and √2).

    Args:
        heights: Field indexed [i+N, j+N], shape (2N+1, 2N+1)
        center: (i, j) lattice coordinate of the center
        max_radius: Last ring to report (default: distance to the nearest edge)

    Returns:
        (radii, values) - ring radii in cells and mean height per ring
            (0.0 for rings with no lattice points)
    """
    n = (heights.shape[0] - 1) // 2
    ci, cj = center

    if max_radius is None:
        max_radius = n - max(abs(ci), abs(cj))
    if max_radius < 0:
        raise ValueError(f"center {center} is outside the lattice")

    coords = np.arange(-n, n + 1)
    di = coords[:, None] - ci
    dj = coords[None, :] - cj
    rings = np.floor(np.hypot(di, dj) + 0.5).astype(np.int64)

    inside = rings <= max_radius
    sums = np.bincount(rings[inside], weights=heights[inside], minlength=max_radius + 1)
    counts = np.bincount(rings[inside], minlength=max_radius + 1)

    values = np.divide(sums, counts, out=np.zeros(max_radius + 1), where=counts > 0)
    return np.arange(max_radius + 1), values
