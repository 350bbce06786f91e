"""
Demo: Where the explicit integrator blows up.

Runs the same initial condition at several step sizes around the
stability limit dt_max = 2 / sqrt(α·ρ(L)) and plots the peak height
over time. Below the limit the peak stays bounded; above it, grows
exponentially.
"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

from ripplesim.core import LatticeConfig, WaveField, initial_conditions
from ripplesim.viz import save_figure
from ripplesim.analysis import (
    courant_number,
    laplacian_spectral_radius,
    max_stable_dt,
)


def main():
    """Run the stability sweep."""
    print("=" * 60)
    print("Stability Sweep")
    print("=" * 60)

    granularity = 16
    stiffness = 1.0
    n_steps = 400

    config = LatticeConfig(granularity=granularity, stiffness=stiffness, dtype=np.float64)
    dt_max = max_stable_dt(config)

    rho_analytic = laplacian_spectral_radius(granularity)
    rho_numeric = laplacian_spectral_radius(granularity, method="eigsh")
    print(f"\n   ρ(L) analytic: {rho_analytic:.4f}")
    print(f"   ρ(L) eigsh:    {rho_numeric:.4f}")
    print(f"   dt_max = {dt_max:.5f}")

    height_fn = initial_conditions.smoothed_noise(granularity, amplitude=1.0, sigma=1.5, seed=42)

    fig, ax = plt.subplots(figsize=(9, 5))
    for factor in (0.5, 0.9, 0.99, 1.01, 1.1):
        dt = factor * dt_max
        field = WaveField(config, height_fn)

        peaks = []
        for _ in range(n_steps):
            field.advance(dt)
            peaks.append(np.abs(field.heights).max())

        peaks = np.array(peaks)
        print(f"   dt = {factor:4.2f}·dt_max  (α·dt²/h² = {courant_number(config, dt):.3f})"
              f"  final peak = {peaks[-1]:.3e}")
        ax.semilogy(np.arange(1, n_steps + 1), peaks, label=f"{factor}·dt_max")

    ax.set_xlabel("Step")
    ax.set_ylabel("max |H|")
    ax.set_title(f"Peak height vs step (N={granularity}, α={stiffness})")
    ax.grid(True, alpha=0.3)
    ax.legend()

    output_dir = Path("output")
    output_path = output_dir / "stability_sweep.png"
    save_figure(fig, output_path)
    print(f"\n   Saved to: {output_path}")

    plt.show()


if __name__ == "__main__":
    main()
