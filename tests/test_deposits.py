from collections import Counter

import pytest

from drynn.deposits import Resource, generate_deposits
from drynn.dice import Dice
from drynn.model import Cluster, Planet, PlanetKind


def _cluster():
    planets = []
    pid = 1
    for kind in (PlanetKind.ROCKY, PlanetKind.GAS_GIANT, PlanetKind.ASTEROID_BELT):
        for md in (100.0, 600.0):
            for _ in range(20):
                planets.append(Planet(id=pid, star_id=1, orbit=1, kind=kind, mining_difficulty=md))
                pid += 1
    return Cluster(radius=3, planets=planets)


def test_resource_strings():
    assert str(Resource.NON_METAL) == "non-metal"
    assert Resource.METAL.label() == "Metals"
    assert Resource.NON_METAL.label() == "Non-Metals"
    assert Resource.METAL.unit_code() == "METS"
    assert Resource.NON_METAL.unit_code() == "NMTS"
    assert Resource.GOLD.unit_code() == "GOLD"


def test_none_cluster_yields_nothing():
    assert generate_deposits(Dice(1, 1), None) == []


def test_deposits_appended_to_cluster():
    cluster = _cluster()
    added = generate_deposits(Dice(10, 10), cluster)
    assert added == cluster.deposits
    assert cluster.total_deposits() == len(added)


def test_deterministic():
    a = _cluster()
    b = _cluster()
    generate_deposits(Dice(4, 5), a)
    generate_deposits(Dice(4, 5), b)
    assert a.deposits == b.deposits


@pytest.mark.parametrize(
    "kind, low, high",
    [
        (PlanetKind.ASTEROID_BELT, 10, 40),
        (PlanetKind.GAS_GIANT, 3, 36),
        (PlanetKind.ROCKY, 1, 22),
    ],
)
def test_deposit_counts_per_kind(kind, low, high):
    cluster = _cluster()
    generate_deposits(Dice(7, 8), cluster)
    counts = Counter(d.planet_id for d in cluster.deposits)
    for planet in cluster.planets:
        if planet.kind is kind:
            assert low <= counts[planet.id] <= high


def test_ids_and_inherited_fields():
    cluster = _cluster()
    generate_deposits(Dice(2, 9), cluster)
    for planet in cluster.planets:
        deposits = cluster.deposits_for_planet(planet.id)
        assert [d.id for d in deposits] == [planet.id * 100 + n for n in range(1, len(deposits) + 1)]
        assert all(d.mining_difficulty == planet.mining_difficulty for d in deposits)


def test_resource_mix_by_kind():
    cluster = _cluster()
    generate_deposits(Dice(3, 3), cluster)
    kinds = {p.id: p.kind for p in cluster.planets}
    gas_giant_resources = {
        d.resource for d in cluster.deposits if kinds[d.planet_id] is PlanetKind.GAS_GIANT
    }
    belt_resources = {
        d.resource for d in cluster.deposits if kinds[d.planet_id] is PlanetKind.ASTEROID_BELT
    }
    assert gas_giant_resources
    assert gas_giant_resources <= {Resource.FUEL, Resource.METAL, Resource.NON_METAL}
    assert belt_resources
    assert belt_resources <= {Resource.GOLD, Resource.FUEL, Resource.METAL}


def test_quantity_and_yield_ranges():
    cluster = _cluster()
    generate_deposits(Dice(12, 34), cluster)
    kinds = {p.id: p.kind for p in cluster.planets}
    for d in cluster.deposits:
        assert 0.0 <= d.yield_pct <= 0.8
        if d.resource is Resource.GOLD:
            assert d.quantity % 50_000 == 0
            assert 100_000 <= d.quantity <= 5_000_000
            if kinds[d.planet_id] is PlanetKind.ROCKY:
                assert d.quantity <= 1_000_000
        else:
            assert d.quantity % 500_000 == 0
            assert 1_000_000 <= d.quantity <= 99_000_000