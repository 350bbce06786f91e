"""
Mesh side of the ripple effect.

- GridMesh: vertex positions/colors/offsets for the displayed grid
- RippleScene: per-frame driver (advance the field, refresh the offsets)
"""

from ripplesim.mesh.grid import GridMesh
from ripplesim.mesh.scene import RippleScene, SceneConfig

__all__ = [
    "GridMesh",
    "RippleScene",
    "SceneConfig",
]
