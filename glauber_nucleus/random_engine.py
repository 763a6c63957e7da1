"""glauber_nucleus/random_engine.py
Author: Sabin Thapa <sthapa3@kent.edu>

The shared pseudorandom stream.

Every sampling routine in this package takes an optional ``rng``. When it is
omitted, draws come from the process-wide generator held here, so seeding it
once reproduces an entire run:

    random_engine.seed(123)
    nucleus.sample_nucleons(0.0)

Draw order matters for reproducibility. If several threads sample at once,
give each its own generator (``np.random.default_rng(seed)``) instead of
sharing this one.
"""

from __future__ import annotations

import numpy as np
from typing import Optional

_engine: np.random.Generator = np.random.default_rng()


def engine() -> np.random.Generator:
    """Current shared generator."""
    return _engine


def seed(value: Optional[int] = None) -> np.random.Generator:
    """Replace the shared generator with a freshly seeded one and return it."""
    global _engine
    _engine = np.random.default_rng(value)
    return _engine


def resolve(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return _engine if rng is None else rng


def cos_theta(rng: np.random.Generator, size: int) -> np.ndarray:
    """Uniform cos θ in [-1, 1) (isotropic polar angle)."""
    return rng.uniform(-1.0, 1.0, size=size)


def phi(rng: np.random.Generator, size: int) -> np.ndarray:
    """Uniform azimuth in [0, 2π)."""
    return rng.uniform(0.0, 2.0 * np.pi, size=size)
