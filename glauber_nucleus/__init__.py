"""Nucleon position sampling for MC Glauber initial conditions

Author: Sabin Thapa <sthapa3@kent.edu>

Small package providing fast, reusable, reproducible utilities for:

- Nucleus ensembles (proton, spherical Woods–Saxon) with a species factory
- Tabulated inverse-CDF sampling of the Woods–Saxon radial density
- A shared, seedable random stream (or bring your own np.random.Generator)
- (Optional) a minimal MC Glauber event loop and diagnostic plots

All distances are in fm unless stated otherwise.
"""

from .nucleon import Nucleon
from .nucleus import (
    Nucleus,
    Proton,
    WoodsSaxonNucleus,
    WoodsSaxonParams,
    SamplerConfig,
    UnknownSpeciesError,
    SPECIES,
    available_species,
    create_nucleus,
)
from .sampling import PiecewiseLinearDistribution, woods_saxon_distribution
from .logging_config import setup_logging

__all__ = [
    "Nucleon",
    "Nucleus",
    "Proton",
    "WoodsSaxonNucleus",
    "WoodsSaxonParams",
    "SamplerConfig",
    "UnknownSpeciesError",
    "SPECIES",
    "available_species",
    "create_nucleus",
    "PiecewiseLinearDistribution",
    "woods_saxon_distribution",
    "setup_logging",
]
