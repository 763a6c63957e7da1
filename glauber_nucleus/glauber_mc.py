"""glauber_nucleus/glauber_mc.py
Author: Sabin Thapa <sthapa3@kent.edu>

Minimal MC Glauber event loop on top of the nucleus samplers.

This module provides:
- impact-parameter sampling with p(b) ∝ b up to bmax
- black-disk collision criterion using σ_NN
- participant marking on the nucleons, participant & collision counting
- two-component entropy proxy S = (1-χ) Npart/2 + χ Ncoll

Note: This is intentionally simple; it exists to drive the nucleus samplers
the way a full initial-condition generator does.
"""

from __future__ import annotations

import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional, Dict, Any

from .nucleus import Nucleus, create_nucleus
from .physics import mb_to_fm2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MCGlauberConfig:
    projectile: str  # "p","Cu","Au","Pb"
    target: str
    sigmaNN_mb: float

    # entropy / multiplicity proxy
    chi: float = 0.15

    # sampling; None -> sum of nuclear radii plus the black-disk distance
    bmax: Optional[float] = None


def black_disk_distance(sigma_fm2: float) -> float:
    """Interaction distance d0 = sqrt(σ/π) in fm."""
    return float(np.sqrt(sigma_fm2 / np.pi))


def collide(projectile: Nucleus, target: Nucleus, sigma_fm2: float) -> tuple[int, int]:
    """Mark participants on both nuclei and return (Npart, Ncoll)."""
    XY_p = projectile.positions()
    XY_t = target.positions()
    d0sq = sigma_fm2 / np.pi

    # Pairwise distance check (broadcast)
    dx = XY_p[:, None, 0] - XY_t[None, :, 0]
    dy = XY_p[:, None, 1] - XY_t[None, :, 1]
    coll = dx * dx + dy * dy < d0sq

    # Participants: any nucleon with ≥1 collision
    part_p = coll.any(axis=1)
    part_t = coll.any(axis=0)
    for nucleon, hit in zip(projectile, part_p):
        if hit:
            nucleon.set_participant()
    for nucleon, hit in zip(target, part_t):
        if hit:
            nucleon.set_participant()

    return int(part_p.sum() + part_t.sum()), int(coll.sum())


def run_mc_glauber(
    cfg: MCGlauberConfig,
    *,
    n_events: int = 20000,
    seed: int = 123,
) -> Dict[str, Any]:
    """Run MC Glauber and return event-level observables.

    Returns dict with arrays:
      b, Npart, Ncoll, S
    """
    rng = np.random.default_rng(int(seed))
    sig = mb_to_fm2(cfg.sigmaNN_mb)

    proj = create_nucleus(cfg.projectile)
    targ = create_nucleus(cfg.target)

    bmax = cfg.bmax
    if bmax is None:
        bmax = proj.radius() + targ.radius() + black_disk_distance(sig)
    logger.info("MC Glauber %s+%s: sigmaNN=%.1f mb, bmax=%.3f fm, %d events",
                cfg.projectile, cfg.target, cfg.sigmaNN_mb, bmax, n_events)

    # correct geometric sampling for impact parameter: p(b) ∝ b
    b = np.sqrt(rng.random(n_events)) * bmax

    Npart = np.zeros(n_events, dtype=int)
    Ncoll = np.zeros(n_events, dtype=int)

    for ievt in range(n_events):
        # projectile at +b/2, target at -b/2 along x
        proj.sample_nucleons(+0.5 * b[ievt], rng=rng)
        targ.sample_nucleons(-0.5 * b[ievt], rng=rng)
        Npart[ievt], Ncoll[ievt] = collide(proj, targ, sig)

    S = (1.0 - cfg.chi) * 0.5 * Npart + cfg.chi * Ncoll
    n_empty = int(np.count_nonzero(Npart == 0))
    logger.debug("%d of %d events without participants", n_empty, n_events)

    return {"b": b, "Npart": Npart, "Ncoll": Ncoll, "S": S, "cfg": cfg}
