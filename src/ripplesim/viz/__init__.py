"""
Visualization utilities.

- Height/velocity heatmaps
- 3D surface
- Snapshot strips
- Radial profiles and energy histories
"""

from ripplesim.viz.fields import (
    CMAP_RIPPLE,
    plot_height_field,
    plot_velocity_field,
    plot_surface,
    plot_snapshots,
    plot_radial_profiles,
    plot_energy_history,
    save_figure,
)

__all__ = [
    "CMAP_RIPPLE",
    "plot_height_field",
    "plot_velocity_field",
    "plot_surface",
    "plot_snapshots",
    "plot_radial_profiles",
    "plot_energy_history",
    "save_figure",
]
