"""
Stability limits for the explicit wave integrator.

The semi-implicit Euler step used by WaveField treats each eigenmode of
the discrete Laplacian as an oscillator with ω² = α·λ. A mode stays
bounded while ω·dt <= 2, so the whole field is stable when

    dt < 2 / sqrt(α · ρ(L))

where ρ(L) is the spectral radius of the Dirichlet Laplacian on the
interior. In terms of the Courant-style number α·dt²/h² this works out to
roughly α·dt²/h² < 1/2.

Nothing here is enforced by the engine. These are tools for choosing
α, dt and N.
"""

from __future__ import annotations
from typing import Literal
import math

import numpy as np
from scipy import sparse
from scipy.sparse.linalg import eigsh

from ripplesim.core.lattice import LatticeConfig


def build_dirichlet_laplacian(granularity: int) -> sparse.csr_matrix:
    """
    Build the 5-point Laplacian on the interior of the lattice.

    Unknowns are the (2N-1)² interior points in row-major order. The
    boundary ring is held at zero, so connections into it simply drop out.

    Uses: ∇²H ≈ (H_E + H_W + H_N + H_S - 4H_C) / h², with h = 1/N.
    """
    if granularity < 1:
        raise ValueError(f"granularity must be >= 1, got {granularity}")

    m = 2 * granularity - 1  # Interior points per axis
    inv_h2 = float(granularity) ** 2

    # 1D second difference with zero ends, then L = I⊗T + T⊗I
    identity = sparse.identity(m, format="csr")
    second_diff = (
        -2.0 * identity
        + sparse.eye(m, k=1, format="csr")
        + sparse.eye(m, k=-1, format="csr")
    )
    L = sparse.kron(identity, second_diff) + sparse.kron(second_diff, identity)
    return (inv_h2 * L).tocsr()


def laplacian_spectral_radius(
    granularity: int,
    method: Literal["analytic", "eigsh"] = "analytic",
) -> float:
    """
    Largest |eigenvalue| of the interior Dirichlet Laplacian.

    Args:
        granularity: N of the lattice
        method: "analytic" uses the closed form (8/h²)·sin²(π(2N-1)/(4N));
            "eigsh" computes it numerically from the sparse matrix.
    """
    if method == "analytic":
        if granularity < 1:
            raise ValueError(f"granularity must be >= 1, got {granularity}")
        inv_h2 = float(granularity) ** 2
        return 8.0 * inv_h2 * math.sin(math.pi * (2 * granularity - 1) / (4 * granularity)) ** 2

    if method == "eigsh":
        L = build_dirichlet_laplacian(granularity)
        if L.shape[0] <= 2:
            # eigsh needs k < n
            return float(np.abs(np.linalg.eigvalsh(L.toarray())).max())
        values = eigsh(L, k=1, which="LM", return_eigenvectors=False)
        return float(np.abs(values).max())

    raise ValueError(f"Unknown method: {method}")


def courant_number(config: LatticeConfig, dt: float) -> float:
    """α·dt²/h², the dimensionless step size."""
    return config.stiffness * dt ** 2 * config.granularity ** 2


def max_stable_dt(config: LatticeConfig) -> float:
    """Largest dt (exclusive) for which every mode stays bounded."""
    rho = laplacian_spectral_radius(config.granularity)
    return 2.0 / math.sqrt(config.stiffness * rho)


def is_stable(config: LatticeConfig, dt: float) -> bool:
    """True if a step of size dt keeps the integrator bounded."""
    return 0 <= dt < max_stable_dt(config)
