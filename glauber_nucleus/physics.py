"""glauber_nucleus/physics.py
Author: Sabin Thapa <sthapa3@kent.edu>

Small, stable physics utilities used across the package.
Keep this file boring and well-tested.

Conventions:
- length: fm
- σ_NN inelastic: mb (input) and fm^2 (internal)
"""

from __future__ import annotations

import numpy as np

MB_TO_FM2 = 0.1  # 1 mb = 0.1 fm^2

# Typical saturation density, only used when an absolute ρ(r) is wanted.
RHO0 = 0.17  # fm^-3


def mb_to_fm2(sigma_mb: float) -> float:
    """Convert millibarn to fm^2."""
    return MB_TO_FM2 * float(sigma_mb)


def woods_saxon(r: np.ndarray, R: float, a: float) -> np.ndarray:
    r"""Unnormalized Woods–Saxon profile
    $$f(r) = \frac{1}{1 + e^{(r - R)/a}}.$$
    """
    r = np.asarray(r, dtype=float)
    # exp overflows to inf far outside the nucleus; 1/inf -> 0 is what we want
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.exp((r - R) / a))
