"""
Plots of wave-field state.

Provides heatmaps, 3D surfaces, snapshot strips, radial profiles and
energy histories. Fields are indexed [i+N, j+N]; plots put i on the
horizontal axis and use normalized [-1, 1] extents.

All plots use matplotlib and return (fig, ax) or fig.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from ripplesim.core.wave_field import WaveField


# Diverging colormap: deep blue troughs → pale still water → warm crests
def _create_ripple_cmap():
    """Create a diverging colormap centered on still water."""
    from matplotlib.colors import LinearSegmentedColormap

    colors = [
        (0.020, 0.110, 0.270),   # Deep trough
        (0.090, 0.310, 0.560),   # Blue
        (0.400, 0.640, 0.800),   # Light blue
        (0.960, 0.960, 0.930),   # Still water
        (0.960, 0.720, 0.450),   # Light orange
        (0.820, 0.360, 0.160),   # Orange-red
        (0.400, 0.060, 0.050),   # Crest
    ]
    return LinearSegmentedColormap.from_list("ripple", colors)


CMAP_RIPPLE = _create_ripple_cmap()
CMAP_VELOCITY = "RdBu_r"

EXTENT = (-1.0, 1.0, -1.0, 1.0)

FieldLike = Union["WaveField", np.ndarray]


def _as_heights(field: FieldLike) -> np.ndarray:
    if isinstance(field, np.ndarray):
        return field
    return field.heights


def _symmetric_limit(values: np.ndarray) -> float:
    limit = float(np.abs(values).max())
    return limit if limit > 0 else 1.0


def plot_height_field(
    field: FieldLike,
    title: str = "Height H(x, y)",
    cmap=None,
    vmax: float | None = None,
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (7, 6),
) -> tuple[Figure, Axes]:
    """
    Plot a height field as a heatmap with a symmetric color scale.

    Args:
        field: WaveField or 2D height array indexed [i+N, j+N]
        title: Plot title
        cmap: Colormap (ripple colormap if None)
        vmax: Color scale limit, applied as [-vmax, vmax] (auto if None)
        ax: Existing axes to plot on (creates new figure if None)
        colorbar: Whether to add a colorbar
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    heights = _as_heights(field)
    if cmap is None:
        cmap = CMAP_RIPPLE
    if vmax is None:
        vmax = _symmetric_limit(heights)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    im = ax.imshow(
        heights.T,
        origin="lower",
        cmap=cmap,
        vmin=-vmax,
        vmax=vmax,
        extent=EXTENT,
        aspect="equal",
    )

    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def plot_velocity_field(
    field: "WaveField",
    title: str = "Velocity V(x, y)",
    ax: Axes | None = None,
    **kwargs,
) -> tuple[Figure, Axes]:
    """Plot the velocity field of a WaveField."""
    return plot_height_field(
        field.velocities,
        title=title,
        cmap=CMAP_VELOCITY,
        ax=ax,
        **kwargs,
    )


def plot_surface(
    field: FieldLike,
    title: str = "Wave Surface",
    cmap=None,
    zlim: float | None = None,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """
    Plot the height field as a 3D surface over [-1, 1]².

    Returns:
        (fig, ax) tuple, ax being a 3D axes
    """
    heights = _as_heights(field)
    if cmap is None:
        cmap = CMAP_RIPPLE
    if zlim is None:
        zlim = _symmetric_limit(heights)

    width = heights.shape[0]
    coords = np.linspace(-1.0, 1.0, width)
    xx, yy = np.meshgrid(coords, coords, indexing="ij")

    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(projection="3d")
    ax.plot_surface(
        xx, yy, heights,
        cmap=cmap,
        vmin=-zlim,
        vmax=zlim,
        linewidth=0,
        antialiased=True,
    )
    ax.set_zlim(-zlim, zlim)
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("H")

    return fig, ax


def plot_snapshots(
    snapshots: Sequence[np.ndarray],
    times: Sequence[float] | None = None,
    title: str = "Ripple Evolution",
    figsize_per_panel: float = 3.5,
) -> Figure:
    """
    Plot a row of height snapshots on a shared color scale.

    Args:
        snapshots: Height arrays (e.g. collected from field.heights)
        times: Optional simulated time per snapshot, used as panel titles

    Returns:
        Figure
    """
    if len(snapshots) == 0:
        raise ValueError("snapshots must not be empty")
    if times is not None and len(times) != len(snapshots):
        raise ValueError("times and snapshots must have the same length")

    vmax = max(_symmetric_limit(s) for s in snapshots)
    n = len(snapshots)
    fig, axes = plt.subplots(1, n, figsize=(figsize_per_panel * n, figsize_per_panel))
    axes = np.atleast_1d(axes)

    for k, (ax, heights) in enumerate(zip(axes, snapshots)):
        label = f"t = {times[k]:.3f}" if times is not None else f"#{k}"
        plot_height_field(heights, title=label, vmax=vmax, ax=ax, colorbar=False)

    fig.suptitle(title)
    fig.tight_layout()
    return fig


def plot_radial_profiles(
    snapshots: Sequence[np.ndarray],
    times: Sequence[float] | None = None,
    center: tuple[int, int] = (0, 0),
    max_radius: int | None = None,
    title: str = "Ring-averaged height",
    figsize: tuple[float, float] = (8, 5),
) -> Figure:
    """
    Overlay ring-averaged height around a lattice point for several snapshots.

    Rings come from compute_radial_profile, so radius is in cells and
    ring 0 is the center alone.
    """
    from ripplesim.analysis.energy import compute_radial_profile

    if len(snapshots) == 0:
        raise ValueError("need at least one snapshot")
    if times is not None and len(times) != len(snapshots):
        raise ValueError(f"{len(times)} times for {len(snapshots)} snapshots")

    fig, ax = plt.subplots(figsize=figsize)

    for k, heights in enumerate(snapshots):
        radii, values = compute_radial_profile(heights, center=center, max_radius=max_radius)
        label = f"t = {times[k]:.2f}" if times is not None else f"#{k}"
        ax.plot(radii, values, "o-", markersize=3, label=label)

    ax.set_xlabel(f"Ring radius around {center} (cells)")
    ax.set_ylabel("Mean height")
    ax.set_title(title)
    ax.axhline(y=0.0, color="gray", linewidth=0.8)
    ax.legend(loc="upper right")

    fig.tight_layout()
    return fig


def plot_energy_history(
    history: dict[str, np.ndarray],
    title: str = "Energy",
    figsize: tuple[float, float] = (9, 5),
) -> Figure:
    """
    Plot kinetic, potential and total energy over time.

    Args:
        history: Output of ripplesim.analysis.track_energy

    Returns:
        Figure
    """
    fig, ax = plt.subplots(figsize=figsize)
    t = history["time"]

    ax.plot(t, history["kinetic"], label="kinetic", linewidth=1.5)
    ax.plot(t, history["potential"], label="potential", linewidth=1.5)
    ax.plot(t, history["total"], "k-", label="total", linewidth=2)

    ax.set_xlabel("Simulated time")
    ax.set_ylabel("Energy")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> Path:
    """Write a figure to disk, creating missing directories. Returns the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    kwargs.setdefault("bbox_inches", "tight")
    fig.savefig(path, dpi=dpi, **kwargs)
    return path
