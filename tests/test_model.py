import pytest

from drynn.deposits import Deposit, Resource
from drynn.hexes import Axial
from drynn.model import (
    AtmosphericGas,
    Cluster,
    Planet,
    PlanetKind,
    Star,
    StarColor,
    StarType,
    System,
    planet_kind_from_diameter,
)


@pytest.fixture
def cluster():
    systems = [System(id=1, hex=Axial(0, 0)), System(id=2, hex=Axial(1, 0)), System(id=3, hex=Axial(0, 1))]
    stars = [
        Star(id=1, system_id=1, num_planets=2),
        Star(id=2, system_id=2, num_planets=1),
        Star(id=3, system_id=2, num_planets=1),
        Star(id=4, system_id=3, num_planets=0),
    ]
    planets = [
        Planet(id=1, star_id=1, orbit=1),
        Planet(id=2, star_id=1, orbit=2),
        Planet(id=3, star_id=2, orbit=1),
        Planet(id=4, star_id=3, orbit=1),
    ]
    deposits = [
        Deposit(id=101, planet_id=1, resource=Resource.FUEL),
        Deposit(id=102, planet_id=1, resource=Resource.GOLD),
        Deposit(id=301, planet_id=3, resource=Resource.METAL),
    ]
    return Cluster(radius=2, systems=systems, stars=stars, planets=planets, deposits=deposits)


def test_planet_kind_labels():
    assert str(planet_kind_from_diameter(12)) == "rocky"
    assert str(planet_kind_from_diameter(143)) == "gas giant"
    assert str(PlanetKind(3)) == "asteroid belt"


def test_planet_kind_from_diameter_threshold():
    assert planet_kind_from_diameter(40) is PlanetKind.ROCKY
    assert planet_kind_from_diameter(41) is PlanetKind.GAS_GIANT


def test_gas_labels():
    assert str(AtmosphericGas(3)) == "He"
    assert str(AtmosphericGas(8)) == "HCl"
    assert str(AtmosphericGas(13)) == "H2S"
    assert str(AtmosphericGas(0)) == "?"


def test_star_labels():
    assert str(StarType(3)) == "main-sequence"
    assert str(StarColor(2)) == "blue-white"
    assert str(StarColor(4)) == "yellow-white"


def test_stars_for_system(cluster):
    assert [s.id for s in cluster.stars_for_system(2)] == [2, 3]
    assert cluster.stars_for_system(99) == []


def test_planets_for_star(cluster):
    assert [p.orbit for p in cluster.planets_for_star(1)] == [1, 2]
    assert cluster.planets_for_star(4) == []


def test_planets_for_system(cluster):
    assert [p.id for p in cluster.planets_for_system(2)] == [3, 4]
    assert [p.id for p in cluster.planets_for_system(1)] == [1, 2]


def test_deposits_for_planet(cluster):
    assert [d.id for d in cluster.deposits_for_planet(1)] == [101, 102]
    assert cluster.deposits_for_planet(2) == []


def test_totals(cluster):
    assert cluster.total_stars() == len(cluster.stars)
    assert cluster.total_planets() == len(cluster.planets)
    assert cluster.total_deposits() == len(cluster.deposits)


def test_count_multi_star_systems(cluster):
    assert cluster.count_multi_star_systems() == 1
    assert Cluster().count_multi_star_systems() == 0


def test_planet_gases_not_shared():
    a = Planet()
    b = Planet()
    a.gases[AtmosphericGas.N2] = 100
    assert b.gases == {}