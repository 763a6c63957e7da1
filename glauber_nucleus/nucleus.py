"""glauber_nucleus/nucleus.py
Author: Sabin Thapa <sthapa3@kent.edu>

Nucleus types: an ensemble of nucleons plus a rule for sampling their
transverse positions.

- Proton: one nucleon, always at (offset, 0)
- WoodsSaxonNucleus: A nucleons with uncorrelated radii drawn from a spherical
  Woods–Saxon density and isotropic directions, projected on the (x,y) plane

Use the factory:

    pb = create_nucleus("Pb")
    bmax = 2 * pb.radius()
    pb.sample_nucleons(+0.5 * b, rng=rng)
    for nucleon in pb:
        ...

Woods–Saxon parameters from the PHOBOS Glauber compilation
(B. Alver et al., arXiv:0805.4411).
"""

from __future__ import annotations

import abc
import logging
import numpy as np
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from . import random_engine
from .nucleon import Nucleon
from .physics import RHO0
from .sampling import PiecewiseLinearDistribution, woods_saxon_distribution

logger = logging.getLogger(__name__)


class UnknownSpeciesError(ValueError):
    """Raised by the factory for a symbol missing from the species table."""

    def __init__(self, species: str):
        self.species = species
        super().__init__(
            f"Unknown nucleus species '{species}'. Known: {', '.join(available_species())}."
        )


# -------------------------
# Configuration
# -------------------------

@dataclass(frozen=True)
class SamplerConfig:
    """Resolution and truncation policy for Woods–Saxon sampling.

    n_steps            : intervals in the tabulated CDF
    rmax_diffuseness   : table covers r in [0, R + rmax_diffuseness * a]
    radius_diffuseness : radius() reports R + radius_diffuseness * a

    radius() bounds the impact-parameter range, so it is kept below the table
    edge. The defaults leave < 1e-4 of the sampled radii (3D, before
    projection) beyond radius() for every tabulated species; Cu is the
    tightest at ~6e-5.
    """
    n_steps: int = 1000
    rmax_diffuseness: float = 10.0
    radius_diffuseness: float = 9.5

    def __post_init__(self):
        if isinstance(self.n_steps, bool) or int(self.n_steps) != self.n_steps or self.n_steps < 1:
            raise ValueError(f"n_steps must be a positive integer, got {self.n_steps!r}.")
        object.__setattr__(self, "n_steps", int(self.n_steps))
        if not 0.0 < self.radius_diffuseness < self.rmax_diffuseness:
            raise ValueError("Need 0 < radius_diffuseness < rmax_diffuseness.")


DEFAULT_SAMPLER = SamplerConfig()


@dataclass(frozen=True)
class WoodsSaxonParams:
    """Spherical Woods–Saxon parameters.

    rho(r) = rho0 / (1 + exp((r - R)/a))
    """
    A: int
    R: float
    a: float
    rho0: float = RHO0

    def __post_init__(self):
        if int(self.A) < 1:
            raise ValueError(f"A must be >= 1, got {self.A}.")
        if not (self.R > 0.0 and self.a > 0.0):
            raise ValueError(f"Woods-Saxon R and a must be positive, got R={self.R}, a={self.a}.")


# symbol -> parameters; None marks the proton
SPECIES: Dict[str, Optional[WoodsSaxonParams]] = {
    "p": None,
    "Cu": WoodsSaxonParams(A=63, R=4.20, a=0.596),
    "Au": WoodsSaxonParams(A=197, R=6.38, a=0.535),
    "Pb": WoodsSaxonParams(A=208, R=6.62, a=0.546),
}


def available_species() -> list[str]:
    return list(SPECIES)


# -------------------------
# Nucleus interface
# -------------------------

class Nucleus(abc.ABC):
    """Fixed-size ensemble of nucleons.

    Iterating a nucleus yields its nucleons in a stable order. The count never
    changes; sample_nucleons() overwrites every position in place.
    """

    def __init__(self, A: int):
        A = int(A)
        if A < 1:
            raise ValueError(f"A must be >= 1, got {A}.")
        self._nucleons = tuple(Nucleon() for _ in range(A))

    @staticmethod
    def create(species: str, config: Optional[SamplerConfig] = None) -> "Nucleus":
        """Factory: see create_nucleus()."""
        return create_nucleus(species, config=config)

    @property
    def A(self) -> int:
        return len(self._nucleons)

    def __len__(self) -> int:
        return len(self._nucleons)

    def __iter__(self) -> Iterator[Nucleon]:
        return iter(self._nucleons)

    def __getitem__(self, i: int) -> Nucleon:
        return self._nucleons[i]

    def positions(self) -> np.ndarray:
        """Current transverse positions as an (A,2) array (a copy)."""
        return np.array([n.position for n in self._nucleons], dtype=float).reshape(self.A, 2)

    @abc.abstractmethod
    def radius(self) -> float:
        """Largest distance from the center at which nucleons are expected."""

    @abc.abstractmethod
    def sample_nucleons(self, offset: float, *, rng: Optional[np.random.Generator] = None) -> None:
        """Sample a new ensemble of positions, shifting every x by offset."""

    @staticmethod
    def _set_nucleon_position(nucleon: Nucleon, x: float, y: float) -> None:
        nucleon._set_position(x, y)


class Proton(Nucleus):
    """A trivial nucleus with a single nucleon."""

    def __init__(self):
        super().__init__(1)

    def radius(self) -> float:
        return 0.0

    def sample_nucleons(self, offset: float, *, rng: Optional[np.random.Generator] = None) -> None:
        self._set_nucleon_position(self._nucleons[0], offset, 0.0)

    def __repr__(self) -> str:
        return "Proton()"


class WoodsSaxonNucleus(Nucleus):
    """Uncorrelated nucleons from a spherical Woods–Saxon distribution.

    For non-deformed heavy nuclei such as Pb.
    """

    def __init__(self, A: int, R: float, a: float, config: Optional[SamplerConfig] = None):
        self.params = WoodsSaxonParams(A=int(A), R=float(R), a=float(a))
        self.config = DEFAULT_SAMPLER if config is None else config
        super().__init__(self.params.A)

        cfg = self.config
        self._dist = woods_saxon_distribution(self.params.R, self.params.a, cfg.n_steps, cfg.rmax_diffuseness)

    @classmethod
    def from_params(cls, params: WoodsSaxonParams, config: Optional[SamplerConfig] = None) -> "WoodsSaxonNucleus":
        return cls(params.A, params.R, params.a, config=config)

    @property
    def R(self) -> float:
        return self.params.R

    @property
    def a(self) -> float:
        return self.params.a

    @property
    def radial_distribution(self) -> PiecewiseLinearDistribution:
        return self._dist

    def radius(self) -> float:
        # Deliberately short of the table edge: the tail falls off
        # exponentially, and a larger radius would mostly add empty events.
        return self.params.R + self.config.radius_diffuseness * self.params.a

    def sample_nucleons(self, offset: float, *, rng: Optional[np.random.Generator] = None) -> None:
        rng = random_engine.resolve(rng)
        n = self.A

        # Sample radii + angles
        r = self._dist.sample(rng, n)
        cos_th = random_engine.cos_theta(rng, n)
        phi = random_engine.phi(rng, n)
        r_sin_th = r * np.sqrt(1.0 - cos_th * cos_th)

        # z = r cos θ is dropped: only transverse positions matter
        x = r_sin_th * np.cos(phi) + offset
        y = r_sin_th * np.sin(phi)

        for nucleon, xi, yi in zip(self._nucleons, x, y):
            self._set_nucleon_position(nucleon, xi, yi)

    def __repr__(self) -> str:
        return f"WoodsSaxonNucleus(A={self.A}, R={self.R}, a={self.a})"


def create_nucleus(species: str, config: Optional[SamplerConfig] = None) -> Nucleus:
    """Build a new nucleus from its standard symbol, e.g. "p" or "Pb".

    Symbols are case-sensitive. Raises UnknownSpeciesError for anything not in
    SPECIES.
    """
    try:
        params = SPECIES[species]
    except (KeyError, TypeError):
        logger.error("Unknown nucleus species %r", species)
        raise UnknownSpeciesError(species) from None

    if params is None:
        return Proton()
    return WoodsSaxonNucleus.from_params(params, config=config)
