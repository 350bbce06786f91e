"""
Analysis layer: derived quantities for choosing parameters and checking runs.

IMPORTANT: The engine never sees this. One-way derivation only.

- build_dirichlet_laplacian / laplacian_spectral_radius: the discrete operator
- courant_number / max_stable_dt / is_stable: stability limits
- field_energy / track_energy: energy bookkeeping
- compute_radial_profile: ring averages around a point
"""

from ripplesim.analysis.stability import (
    build_dirichlet_laplacian,
    laplacian_spectral_radius,
    courant_number,
    max_stable_dt,
    is_stable,
)
from ripplesim.analysis.energy import (
    EnergyReport,
    field_energy,
    track_energy,
    compute_radial_profile,
)

__all__ = [
    "build_dirichlet_laplacian",
    "laplacian_spectral_radius",
    "courant_number",
    "max_stable_dt",
    "is_stable",
    "EnergyReport",
    "field_energy",
    "track_energy",
    "compute_radial_profile",
]
