"""glauber_nucleus/plotting.py
Author: Sabin Thapa <sthapa3@kent.edu>

Publication-oriented matplotlib helpers, plus a quick visual check of the
Woods–Saxon sampler.

Default choices:
- no grid
- no figure titles by default
- clean spines
- consistent fonts/sizes
"""

from __future__ import annotations

import matplotlib as mpl
import numpy as np
from scipy.integrate import quad

from .physics import woods_saxon


def set_pub_style():
    mpl.rcParams.update({
        "figure.figsize": (6.5, 4.2),
        "figure.dpi": 120,
        "savefig.dpi": 300,
        "axes.grid": False,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "legend.frameon": False,
        "font.size": 12,
        "axes.titlesize": 12,
        "axes.labelsize": 12,
        "xtick.labelsize": 11,
        "ytick.labelsize": 11,
        "lines.linewidth": 2.0,
        "mathtext.fontset": "stix",
        "font.family": "DejaVu Sans",
    })


def style_ax(ax):
    ax.grid(False)
    ax.set_title("")
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)


def plot_radial_distribution(ax, nucleus, *, n_samples: int = 100000, rng: np.random.Generator, bins: int = 80):
    """Histogram of sampled radii vs the normalized analytic r^2 ρ(r).

    `nucleus` must be a WoodsSaxonNucleus. Returns the histogram counts.
    """
    dist = nucleus.radial_distribution
    r0, r1 = dist.support
    R, a = nucleus.R, nucleus.a

    r = dist.sample(rng, n_samples)
    counts, _, _ = ax.hist(r, bins=bins, range=(r0, r1), density=True, histtype="step", label="sampled")

    norm, _ = quad(lambda s: float(s * s * woods_saxon(s, R, a)), r0, r1, limit=200)
    s = np.linspace(r0, r1, 400)
    ax.plot(s, s * s * woods_saxon(s, R, a) / norm, label=r"$r^2\rho(r)$")
    ax.axvline(nucleus.radius(), ls="--", lw=1.0, color="0.4")

    ax.set_xlabel(r"$r$ [fm]")
    ax.set_ylabel("probability density [fm$^{-1}$]")
    ax.legend()
    style_ax(ax)
    return counts
