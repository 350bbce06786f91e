"""
ripplesim: discrete wave-field simulator for ripple effects on a grid mesh.

An explicit finite-difference integrator for the 2D scalar wave equation
on a bounded square lattice, sampled once per frame to displace the
vertices of a rendering grid.

Core concepts:
- A (2N+1)² lattice over [-1, 1]², boundary ring pinned at zero height
- Semi-implicit Euler steps of d²H/dt² = α·∇²H
- Nearest-neighbor sampling at normalized (x, y)
"""

__version__ = "0.1.0"
