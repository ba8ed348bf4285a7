"""Integer grid points, unit-ball sample points and the samplers that make them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from drynn.dice import Dice


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Point:
    """A point on the integer galaxy grid."""

    x: int = 0
    y: int = 0
    z: int = 0

    def distance(self, other: Point) -> int:
        """Euclidean distance to ``other``, rounded up to a whole number."""
        return math.ceil(math.sqrt(self.distance_squared(other)))

    def distance_squared(self, other: Point) -> int:
        """Squared Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def less(self, other: Point) -> bool:
        """Order by x, then y, then z; equal points count as less."""
        if self.x != other.x:
            return self.x < other.x
        if self.y != other.y:
            return self.y < other.y
        return self.z <= other.z


@dataclass(frozen=True)
class UnitPoint:
    """A sample point expected to lie in the closed unit ball."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def scale(self, scale: float) -> UnitPoint:
        """This point with every coordinate multiplied by ``scale``."""
        return UnitPoint(self.x * scale, self.y * scale, self.z * scale)

    def quantize(self, scale: float) -> Point:
        """Scale, then truncate each coordinate toward zero onto the grid."""
        scaled = self.scale(scale)
        return Point(int(scaled.x), int(scaled.y), int(scaled.z))


class PointGenerator(Protocol):
    """Produces points inside the closed unit ball centred at the origin."""

    def generate(self, n: int, rng: Dice) -> list[UnitPoint]: ...


def nearest_neighbor(points: list[Point], n: int) -> int | None:
    """Index of the point closest to ``points[n]``; ties go to the lowest index.

    Returns None when there is no other point.
    """
    origin = points[n]
    best: int | None = None
    best_sq = 0
    for i, q in enumerate(points):
        if i == n:
            continue
        d = origin.distance_squared(q)
        if best is None or d < best_sq:
            best, best_sq = i, d
    return best


def no_closer_than(points: list[Point], n: int, d: int) -> bool:
    """Whether every other point lies at distance at least ``d`` from ``points[n]``.

    A non-positive ``d`` is always satisfied.
    """
    if d <= 0:
        return True
    limit = d * d
    origin = points[n]
    return all(
        origin.distance_squared(q) >= limit for i, q in enumerate(points) if i != n
    )


def sort_points(points: list[Point]) -> None:
    """Sort in place by planar distance from the origin, then x, then y."""
    points.sort(key=lambda p: (p.x * p.x + p.y * p.y, p.x, p.y))


def sort_unit_points(points: list[UnitPoint]) -> None:
    """Sort in place by distance from the origin, then x, y and z."""
    points.sort(key=lambda p: (p.x * p.x + p.y * p.y + p.z * p.z, p.x, p.y, p.z))


def generate_systems(unit_points: list[UnitPoint], radius: float) -> list[Point]:
    """Sort the sample points in place and project them onto the grid's XY plane."""
    sort_unit_points(unit_points)
    return [
        Point(_round_half_away(p.x * radius), _round_half_away(p.y * radius))
        for p in unit_points
    ]


class UniformSpherePointsGenerator:
    """Points uniform in the unit ball, three draws per point."""

    def generate(self, n: int, rng: Dice) -> list[UnitPoint]:
        points: list[UnitPoint] = []
        for _ in range(max(n, 0)):
            cos_theta = 1 - 2 * rng.random()
            sin_theta = math.sqrt(1 - cos_theta * cos_theta)
            phi = 2 * math.pi * rng.random()
            radius = rng.random() ** (1.0 / 3.0)
            points.append(
                UnitPoint(
                    radius * sin_theta * math.cos(phi),
                    radius * sin_theta * math.sin(phi),
                    radius * cos_theta,
                )
            )
        return points


class NaiveDiskPointsGenerator:
    """Ball samples flattened onto z = 0.

    The result is denser near the origin than at the rim; that bias is
    intended.
    """

    def generate(self, n: int, rng: Dice) -> list[UnitPoint]:
        return [
            UnitPoint(p.x, p.y, 0.0)
            for p in UniformSpherePointsGenerator().generate(n, rng)
        ]


class NaiveSpherePointsGenerator:
    """Points uniform in the unit ball by rejection from the enclosing cube."""

    def generate(self, n: int, rng: Dice) -> list[UnitPoint]:
        points: list[UnitPoint] = []
        while len(points) < n:
            x = 2 * rng.random() - 1
            y = 2 * rng.random() - 1
            z = 2 * rng.random() - 1
            if x * x + y * y + z * z <= 1:
                points.append(UnitPoint(x, y, z))
        return points


class UniformDiskPointsGenerator:
    """Points uniform on the unit disk at z = 0, two draws per point."""

    def generate(self, n: int, rng: Dice) -> list[UnitPoint]:
        points: list[UnitPoint] = []
        for _ in range(max(n, 0)):
            radius = math.sqrt(rng.random())
            phi = 2 * math.pi * rng.random()
            points.append(UnitPoint(radius * math.cos(phi), radius * math.sin(phi), 0.0))
        return points