import math

import pytest

from drynn.cartesian.points import (
    NaiveDiskPointsGenerator,
    NaiveSpherePointsGenerator,
    Point,
    UniformDiskPointsGenerator,
    UniformSpherePointsGenerator,
    UnitPoint,
    generate_systems,
    nearest_neighbor,
    no_closer_than,
    sort_points,
    sort_unit_points,
)
from drynn.dice import Dice

ALL_GENERATORS = [
    NaiveDiskPointsGenerator,
    NaiveSpherePointsGenerator,
    UniformDiskPointsGenerator,
    UniformSpherePointsGenerator,
]


def test_distance_squared_to_self_is_zero():
    p = Point(4, -7, 2)
    assert p.distance_squared(p) == 0


def test_distance_squared_is_symmetric():
    a, b = Point(1, 2, 3), Point(-4, 8, 0)
    assert a.distance_squared(b) == b.distance_squared(a)


def test_distance_is_ceiling_of_root():
    a, b = Point(0, 0, 0), Point(2, 3, 1)
    assert a.distance(b) == math.ceil(math.sqrt(a.distance_squared(b)))
    assert a.distance(b) ** 2 >= a.distance_squared(b)


def test_less_orders_by_coordinates():
    assert Point(1, 5, 5).less(Point(2, 0, 0))
    assert not Point(2, 0, 0).less(Point(1, 5, 5))
    assert Point(1, 1, 5).less(Point(1, 2, 0))
    assert Point(1, 1, 1).less(Point(1, 1, 2))
    assert not Point(1, 1, 2).less(Point(1, 1, 1))


def test_less_counts_equal_points_as_less():
    assert Point(3, 3, 3).less(Point(3, 3, 3))


def test_nearest_neighbor_finds_closest():
    points = [Point(0, 0, 0), Point(10, 0, 0), Point(1, 0, 0)]
    assert nearest_neighbor(points, 0) == 2


def test_nearest_neighbor_tie_goes_to_lowest_index():
    points = [Point(0, 0, 0), Point(1, 0, 0), Point(0, 0, 0), Point(1, 0, 0)]
    assert nearest_neighbor(points, 0) == 2


def test_nearest_neighbor_single_point_is_none():
    assert nearest_neighbor([Point(1, 1, 1)], 0) is None


def test_no_closer_than_non_positive_is_true():
    points = [Point(0, 0, 0), Point(0, 0, 0)]
    assert no_closer_than(points, 0, 0) is True
    assert no_closer_than(points, 0, -3) is True


def test_no_closer_than_detects_close_points():
    points = [Point(0, 0, 0), Point(1, 0, 0), Point(50, 50, 0)]
    assert no_closer_than(points, 2, 5) is True
    assert no_closer_than(points, 0, 5) is False


def test_sort_points_by_planar_distance():
    points = [Point(5, 5, 0), Point(-1, 0, 0), Point(0, 2, 0), Point(1, 0, 0)]
    sort_points(points)
    keys = [(p.x * p.x + p.y * p.y, p.x, p.y) for p in points]
    assert keys == sorted(keys)
    assert points[0] == Point(-1, 0, 0)


def test_sort_unit_points_by_distance():
    rng = Dice(3, 4)
    points = UniformSpherePointsGenerator().generate(50, rng)
    sort_unit_points(points)
    norms = [p.x * p.x + p.y * p.y + p.z * p.z for p in points]
    assert norms == sorted(norms)


def test_scale_multiplies_each_coordinate():
    p = UnitPoint(0.5, -0.25, 1.0).scale(4)
    assert p == UnitPoint(2.0, -1.0, 4.0)


def test_quantize_truncates_toward_zero():
    assert UnitPoint(0.99, -0.99, 0.5).quantize(10) == Point(9, -9, 5)


def test_generate_systems_rounds_half_away_and_drops_z():
    result = generate_systems([UnitPoint(0.5, -0.5, 0.9)], 1)
    assert result == [Point(1, -1, 0)]


def test_generate_systems_sorts_input_in_place():
    samples = [UnitPoint(0.9, 0.0, 0.0), UnitPoint(0.1, 0.0, 0.0)]
    result = generate_systems(samples, 10)
    assert samples[0] == UnitPoint(0.1, 0.0, 0.0)
    assert [p.x for p in result] == [1, 9]


@pytest.mark.parametrize("generator", ALL_GENERATORS)
def test_generators_stay_in_unit_ball(generator):
    points = generator().generate(200, Dice(7, 11))
    assert len(points) == 200
    assert all(p.x * p.x + p.y * p.y + p.z * p.z <= 1 + 1e-12 for p in points)


@pytest.mark.parametrize("generator", ALL_GENERATORS)
def test_generators_empty_for_non_positive_n(generator):
    assert generator().generate(0, Dice(1, 2)) == []
    assert generator().generate(-5, Dice(1, 2)) == []


@pytest.mark.parametrize("generator", ALL_GENERATORS)
def test_generators_are_deterministic(generator):
    a = generator().generate(30, Dice(5, 6))
    b = generator().generate(30, Dice(5, 6))
    assert a == b


@pytest.mark.parametrize("generator", [NaiveDiskPointsGenerator, UniformDiskPointsGenerator])
def test_disk_generators_are_flat(generator):
    points = generator().generate(100, Dice(8, 9))
    assert all(p.z == 0 for p in points)


def test_uniform_disk_uses_two_draws_per_point():
    rng_a, rng_b = Dice(2, 3), Dice(2, 3)
    UniformDiskPointsGenerator().generate(5, rng_a)
    for _ in range(10):
        rng_b.random()
    assert rng_a.random() == rng_b.random()


def test_uniform_sphere_uses_three_draws_per_point():
    rng_a, rng_b = Dice(2, 3), Dice(2, 3)
    UniformSpherePointsGenerator().generate(4, rng_a)
    for _ in range(12):
        rng_b.random()
    assert rng_a.random() == rng_b.random()


def test_naive_disk_matches_flattened_sphere():
    sphere = UniformSpherePointsGenerator().generate(20, Dice(4, 4))
    flat = NaiveDiskPointsGenerator().generate(20, Dice(4, 4))
    assert [(p.x, p.y) for p in flat] == [(p.x, p.y) for p in sphere]