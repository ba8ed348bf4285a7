import pytest

from drynn.cartesian.galaxy import (
    MIN_RADIUS,
    STANDARD_GALACTIC_RADIUS,
    STANDARD_NUMBER_OF_STAR_SYSTEMS,
    Galaxy,
    GalaxyStar,
    StandardGalaxyGenerator,
    generate,
)
from drynn.cartesian.points import Point, UniformSpherePointsGenerator, UnitPoint
from drynn.dice import Dice
from drynn.model import StarColor, StarType


class _FixedPoints:
    def __init__(self, points):
        self.points = points
        self.requested = None

    def generate(self, n, rng):
        self.requested = n
        return list(self.points)


class _RecordingGalaxyGenerator:
    def __init__(self):
        self.args = None

    def generate(self, num_systems, radius, rng, point_generator):
        self.args = (num_systems, radius, rng, point_generator)
        return Galaxy(radius=radius, stars=[GalaxyStar(Point())])


def test_small_radius_is_replaced_by_standard_density_radius():
    galaxy = generate(num_systems=100)
    min_volume = 100 * STANDARD_GALACTIC_RADIUS**3 / STANDARD_NUMBER_OF_STAR_SYSTEMS
    assert galaxy.radius**3 >= min_volume
    assert galaxy.radius == MIN_RADIUS or (galaxy.radius - 1) ** 3 < min_volume


def test_few_systems_keep_minimum_radius():
    galaxy = generate(num_systems=1)
    assert galaxy.radius == MIN_RADIUS


def test_large_radius_is_kept():
    galaxy = generate(num_systems=20, radius=30.0)
    assert galaxy.radius == 30.0


def test_origin_always_holds_a_star():
    galaxy = generate(num_systems=40)
    assert Point(0, 0, 0) in [s.point for s in galaxy.stars]


def test_star_count_bounded_and_points_unique():
    galaxy = generate(num_systems=60)
    points = [s.point for s in galaxy.stars]
    assert 1 <= len(points) <= 60
    assert len(set(points)) == len(points)


def test_stars_are_sorted_by_point():
    galaxy = generate(num_systems=80, rng=Dice(1, 2))
    keys = [(s.point.x, s.point.y, s.point.z) for s in galaxy.stars]
    assert keys == sorted(keys)


def test_default_generator_is_flat_disk():
    galaxy = generate(num_systems=50)
    assert all(s.point.z == 0 for s in galaxy.stars)


def test_star_attributes_in_range():
    galaxy = generate(num_systems=200, radius=25.0, rng=Dice(9, 9))
    for star in galaxy.stars:
        assert 1 <= star.num_planets <= 9
        assert 0 <= star.size <= 9
        assert star.kind in set(StarType)
        assert star.color in set(StarColor)
        assert star.home_system is False


def test_generation_is_deterministic():
    a = generate(num_systems=50, rng=Dice(4, 5))
    b = generate(num_systems=50, rng=Dice(4, 5))
    assert a == b


def test_sphere_generator_fills_three_dimensions():
    galaxy = generate(
        num_systems=100, radius=20.0, point_generator=UniformSpherePointsGenerator()
    )
    depths = [abs(s.point.z) for s in galaxy.stars]
    assert max(depths) >= 1
    assert max(depths) <= 20


def test_custom_point_generator_is_quantized():
    points = _FixedPoints([UnitPoint(0.5, 0.5, 0.0)] * 3)
    galaxy = StandardGalaxyGenerator().generate(5, 10.0, Dice(1, 1), points)
    assert points.requested == 500
    assert [s.point for s in galaxy.stars] == [Point(0, 0, 0), Point(5, 5, 0)]


def test_sampling_stops_at_requested_count():
    samples = [UnitPoint(0.1 * i, 0.0, 0.0) for i in range(1, 9)]
    galaxy = StandardGalaxyGenerator().generate(3, 10.0, Dice(1, 1), _FixedPoints(samples))
    assert [s.point.x for s in galaxy.stars] == [0, 1, 2]


@pytest.mark.parametrize("num_systems", [1, 10])
def test_custom_galaxy_generator_receives_arguments(num_systems):
    recorder = _RecordingGalaxyGenerator()
    rng = Dice(3, 3)
    points = _FixedPoints([])
    galaxy = generate(
        num_systems=num_systems,
        radius=12.5,
        galaxy_generator=recorder,
        point_generator=points,
        rng=rng,
    )
    assert recorder.args == (num_systems, 12.5, rng, points)
    assert galaxy.radius == 12.5