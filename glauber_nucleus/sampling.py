"""glauber_nucleus/sampling.py
Author: Sabin Thapa <sthapa3@kent.edu>

Tabulated inverse-CDF sampling.

The Woods–Saxon radial law r^2/(1 + exp((r-R)/a)) has no closed-form inverse
CDF. We tabulate the density once on a fine grid, integrate it with the
trapezoid rule, and invert by linear interpolation of the CDF table:

    r = interp(u, cdf, r_grid),   u ~ U[0, 1)

With ~1000 intervals this is very accurate, and each draw is one binary
search in the table. The table never changes after construction, so a single
instance can be shared by any number of readers; the only state that advances
during sampling is the generator you pass in.
"""

from __future__ import annotations

import logging
import numpy as np
from functools import lru_cache
from scipy.integrate import cumulative_trapezoid

from .physics import woods_saxon

logger = logging.getLogger(__name__)


class PiecewiseLinearDistribution:
    """Distribution on [x0, xN] with a piecewise-linear CDF.

    Parameters
    ----------
    breakpoints : strictly increasing grid x_0 < ... < x_N
    density : unnormalized, non-negative density tabulated on the grid
    """

    def __init__(self, breakpoints: np.ndarray, density: np.ndarray):
        x = np.array(breakpoints, dtype=float)
        f = np.array(density, dtype=float)

        if x.ndim != 1 or x.size < 2:
            raise ValueError("Need at least two breakpoints.")
        if f.shape != x.shape:
            raise ValueError(f"density shape {f.shape} does not match breakpoints shape {x.shape}.")
        if np.any(np.diff(x) <= 0.0):
            raise ValueError("Breakpoints must be strictly increasing.")
        if np.any(f < 0.0) or not np.all(np.isfinite(f)):
            raise ValueError("Density must be finite and non-negative.")

        cdf = cumulative_trapezoid(f, x, initial=0.0)
        total = cdf[-1]
        if total <= 0.0:
            raise ValueError("Density integrates to zero.")
        cdf /= total
        cdf[-1] = 1.0

        for arr in (x, f, cdf):
            arr.flags.writeable = False
        self._x = x
        self._f = f
        self._cdf = cdf

    @property
    def breakpoints(self) -> np.ndarray:
        return self._x

    @property
    def densities(self) -> np.ndarray:
        return self._f

    @property
    def cdf_table(self) -> np.ndarray:
        return self._cdf

    @property
    def support(self) -> tuple[float, float]:
        return float(self._x[0]), float(self._x[-1])

    def cdf(self, x: np.ndarray) -> np.ndarray:
        """Tabulated CDF (0 below, 1 above the support)."""
        return np.interp(x, self._x, self._cdf, left=0.0, right=1.0)

    def ppf(self, u: np.ndarray) -> np.ndarray:
        """Inverse CDF by linear interpolation of the table."""
        return np.interp(u, self._cdf, self._x)

    def sample(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return self.ppf(rng.random(size))

    def __len__(self) -> int:
        return self._x.size


@lru_cache(maxsize=16)
def woods_saxon_distribution(R: float, a: float, n_steps: int = 1000, rmax_diffuseness: float = 10.0) -> PiecewiseLinearDistribution:
    """Radial distribution r^2/(1 + exp((r-R)/a)) on [0, R + rmax_diffuseness*a].

    Cached: tables are read-only, so nuclei of the same species share one.
    """
    rmax = R + rmax_diffuseness * a
    r = np.linspace(0.0, rmax, int(n_steps) + 1)
    logger.debug("Building Woods-Saxon table: R=%.4g a=%.4g rmax=%.4g steps=%d", R, a, rmax, n_steps)
    return PiecewiseLinearDistribution(r, r * r * woods_saxon(r, R, a))
