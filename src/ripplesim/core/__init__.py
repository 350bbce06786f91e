"""
Core engine primitives.

This layer only knows about the wave field itself:
- The lattice geometry (coordinates, boundary ring, index mapping)
- Height and velocity fields
- One explicit time step, and nearest-neighbor sampling

Energy, stability limits and plotting live in the analysis and viz layers.
"""

from ripplesim.core.lattice import Lattice, LatticeConfig, round_half_away
from ripplesim.core.wave_field import HeightFunction, WaveField, create_wave_field
from ripplesim.core import initial_conditions

__all__ = [
    "Lattice",
    "LatticeConfig",
    "round_half_away",
    "HeightFunction",
    "WaveField",
    "create_wave_field",
    "initial_conditions",
]
