import logging

import numpy as np
import pytest
from scipy.integrate import trapezoid

from glauber_nucleus import random_engine
from glauber_nucleus.nucleus import (
    Nucleus,
    Proton,
    SamplerConfig,
    SPECIES,
    UnknownSpeciesError,
    WoodsSaxonNucleus,
    WoodsSaxonParams,
    available_species,
    create_nucleus,
)

HEAVY = ["Cu", "Au", "Pb"]


def transverse_radii(nucleus, n_calls, rng):
    out = []
    for _ in range(n_calls):
        nucleus.sample_nucleons(0.0, rng=rng)
        xy = nucleus.positions()
        out.append(np.hypot(xy[:, 0], xy[:, 1]))
    return np.concatenate(out)


# -------------------------
# factory
# -------------------------

def test_factory_proton():
    p = create_nucleus("p")
    assert isinstance(p, Proton)
    assert len(p) == 1


@pytest.mark.parametrize("species", HEAVY)
def test_factory_woods_saxon(species):
    nuc = Nucleus.create(species)
    params = SPECIES[species]
    assert isinstance(nuc, WoodsSaxonNucleus)
    assert nuc.A == params.A == len(nuc)
    assert nuc.R == params.R
    assert nuc.a == params.a


def test_factory_returns_independent_instances():
    a = create_nucleus("Pb")
    b = create_nucleus("Pb")
    assert a is not b
    assert all(na is not nb for na, nb in zip(a, b))
    # the read-only table is shared
    assert a.radial_distribution is b.radial_distribution

    a.sample_nucleons(5.0, rng=np.random.default_rng(1))
    assert all(n.position == (0.0, 0.0) for n in b)


@pytest.mark.parametrize("species", ["Xx", "pb", "PB", "", "U"])
def test_unknown_species(species):
    with pytest.raises(UnknownSpeciesError) as excinfo:
        create_nucleus(species)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.species == species


def test_unknown_species_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="glauber_nucleus"):
        with pytest.raises(UnknownSpeciesError):
            Nucleus.create("Xx")
    assert "Xx" in caplog.text


def test_available_species():
    assert available_species() == ["p", "Cu", "Au", "Pb"]


# -------------------------
# Proton
# -------------------------

@pytest.mark.parametrize("offset", [-12.5, 0.0, 3.7, 1.0e6])
def test_proton_placement(offset):
    p = Proton()
    assert p.radius() == 0.0
    p.sample_nucleons(offset)
    assert p[0].position == (offset, 0.0)
    assert p.radius() == 0.0
    assert len(p) == 1


def test_proton_draws_no_random_numbers():
    rng = np.random.default_rng(3)
    before = rng.bit_generator.state
    Proton().sample_nucleons(1.0, rng=rng)
    assert rng.bit_generator.state == before


# -------------------------
# Woods–Saxon
# -------------------------

@pytest.mark.parametrize("species", HEAVY)
def test_count_invariant(species):
    nuc = create_nucleus(species)
    A = nuc.A
    rng = np.random.default_rng(11)
    for offset in (0.0, -3.0, 7.5):
        nuc.sample_nucleons(offset, rng=rng)
        assert len(nuc) == A
        assert len(list(nuc)) == A
        assert nuc.positions().shape == (A, 2)


def test_iteration_order_is_stable():
    nuc = create_nucleus("Cu")
    before = [id(n) for n in nuc]
    nuc.sample_nucleons(0.0, rng=np.random.default_rng(2))
    assert [id(n) for n in nuc] == before

    xy = nuc.positions()
    for i, n in enumerate(nuc):
        assert (xy[i, 0], xy[i, 1]) == n.position
        assert nuc[i] is n


def test_sampling_overwrites_positions_and_clears_participants():
    nuc = create_nucleus("Au")
    rng = np.random.default_rng(5)
    nuc.sample_nucleons(0.0, rng=rng)
    first = nuc.positions()
    for n in nuc:
        n.set_participant()

    nuc.sample_nucleons(0.0, rng=rng)
    assert not np.array_equal(first, nuc.positions())
    assert not any(n.is_participant for n in nuc)


@pytest.mark.parametrize("species", HEAVY)
def test_radius_inside_support(species):
    nuc = create_nucleus(species)
    rmin, rmax = nuc.radial_distribution.support
    assert rmin == 0.0
    assert nuc.R < nuc.radius() < rmax
    assert nuc.radius() == pytest.approx(nuc.R + 9.5 * nuc.a)


@pytest.mark.parametrize("species", HEAVY)
def test_radius_tail_fraction(species):
    nuc = create_nucleus(species)
    n_calls = 100000 // nuc.A + 1
    r = transverse_radii(nuc, n_calls, np.random.default_rng(2024))
    assert r.size >= 100000
    assert np.mean(r > nuc.radius()) < 1e-4


@pytest.mark.parametrize("species", HEAVY)
def test_radial_mass_beyond_radius(species):
    # tabulated probability of a 3D radius beyond radius(), no sampling noise
    nuc = create_nucleus(species)
    tail = 1.0 - float(nuc.radial_distribution.cdf(nuc.radius()))
    assert 0.0 < tail < 1e-4


@pytest.mark.parametrize("species", HEAVY)
def test_sampled_radii_beyond_radius(species):
    nuc = create_nucleus(species)
    r = nuc.radial_distribution.sample(np.random.default_rng(2025), 1000000)
    assert np.mean(r > nuc.radius()) < 1e-4


def test_positions_within_support():
    nuc = create_nucleus("Pb")
    r = transverse_radii(nuc, 50, np.random.default_rng(8))
    assert r.max() <= nuc.radial_distribution.support[1]


def test_mean_transverse_radius():
    # <r_T^2> = (2/3) <r^2> for isotropic directions
    nuc = create_nucleus("Pb")
    rT = transverse_radii(nuc, 300, np.random.default_rng(13))
    dist = nuc.radial_distribution
    r = np.asarray(dist.breakpoints)
    w = np.asarray(dist.densities)  # already includes r^2
    r2 = trapezoid(r * r * w, r) / trapezoid(w, r)
    assert np.mean(rT ** 2) == pytest.approx(2.0 / 3.0 * r2, rel=0.02)


def test_reproducible_with_shared_engine():
    def run():
        random_engine.seed(42)
        pb, cu = create_nucleus("Pb"), create_nucleus("Cu")
        out = []
        for b in (0.0, 2.5, -4.0):
            pb.sample_nucleons(+0.5 * b)
            cu.sample_nucleons(-0.5 * b)
            out.append(pb.positions())
            out.append(cu.positions())
        return out

    for a, b in zip(run(), run()):
        np.testing.assert_array_equal(a, b)


def test_reproducible_with_explicit_rng():
    nuc1, nuc2 = create_nucleus("Au"), create_nucleus("Au")
    rng1, rng2 = np.random.default_rng(99), np.random.default_rng(99)
    for _ in range(3):
        nuc1.sample_nucleons(1.0, rng=rng1)
        nuc2.sample_nucleons(1.0, rng=rng2)
        np.testing.assert_array_equal(nuc1.positions(), nuc2.positions())


def test_explicit_rng_leaves_shared_engine_alone():
    random_engine.seed(7)
    before = random_engine.engine().bit_generator.state
    create_nucleus("Cu").sample_nucleons(0.0, rng=np.random.default_rng(1))
    assert random_engine.engine().bit_generator.state == before


@pytest.mark.parametrize("d", [-8.0, 0.3, 15.0])
def test_offset_linearity(d):
    nuc = create_nucleus("Pb")
    nuc.sample_nucleons(0.0, rng=np.random.default_rng(31))
    base = nuc.positions()
    nuc.sample_nucleons(d, rng=np.random.default_rng(31))
    shifted = nuc.positions()

    np.testing.assert_allclose(shifted[:, 0] - base[:, 0], d, rtol=0.0, atol=1e-12)
    np.testing.assert_array_equal(shifted[:, 1], base[:, 1])


# -------------------------
# preconditions
# -------------------------

@pytest.mark.parametrize("R,a", [(0.0, 0.5), (-1.0, 0.5), (6.0, 0.0), (6.0, -0.2)])
def test_bad_shape_parameters(R, a):
    with pytest.raises(ValueError):
        WoodsSaxonNucleus(10, R, a)
    with pytest.raises(ValueError):
        WoodsSaxonParams(A=10, R=R, a=a)


def test_bad_sampler_config():
    with pytest.raises(ValueError):
        SamplerConfig(n_steps=0)
    with pytest.raises(ValueError):
        SamplerConfig(radius_diffuseness=12.0, rmax_diffuseness=10.0)


@pytest.mark.parametrize("n_steps", [10.5, 0.5, -3, True])
def test_sampler_config_rejects_non_integer_steps(n_steps):
    with pytest.raises(ValueError):
        SamplerConfig(n_steps=n_steps)


def test_sampler_config_coerces_integral_steps():
    cfg = SamplerConfig(n_steps=500.0)
    assert cfg.n_steps == 500 and isinstance(cfg.n_steps, int)
    nuc = create_nucleus("Cu", config=cfg)
    assert len(nuc.radial_distribution) == 501


def test_custom_sampler_config():
    cfg = SamplerConfig(n_steps=200, rmax_diffuseness=8.0, radius_diffuseness=3.0)
    nuc = create_nucleus("Pb", config=cfg)
    assert len(nuc.radial_distribution) == 201
    assert nuc.radius() == pytest.approx(6.62 + 3.0 * 0.546)
    assert nuc.radial_distribution.support[1] == pytest.approx(6.62 + 8.0 * 0.546)
