"""A galaxy of stars placed on an integer grid inside a sphere or disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from drynn.cartesian.points import NaiveDiskPointsGenerator, Point, PointGenerator
from drynn.dice import Dice
from drynn.model import StarColor, StarType

STANDARD_NUMBER_OF_SPECIES = 25
STANDARD_NUMBER_OF_STAR_SYSTEMS = 90.0
STANDARD_GALACTIC_RADIUS = 20.0  # parsecs

MIN_SPECIES = 1
MAX_SPECIES = 250
MIN_STARS = 12
MAX_STARS = 1000
MIN_RADIUS = 6.0
MAX_RADIUS = 50.0
MAX_DIAMETER = 2 * MAX_RADIUS
MAX_PLANETS = 9 * MAX_STARS

DEFAULT_SEED = (10, 10)

_KIND_BY_ROLL = {
    StarType.DWARF: StarType.DWARF,
    StarType.DEGENERATE: StarType.DEGENERATE,
    StarType.GIANT: StarType.GIANT,
}


@dataclass
class GalaxyStar:
    """A star at a grid point."""

    point: Point
    kind: StarType = StarType.MAIN_SEQUENCE
    color: StarColor = StarColor.YELLOW
    size: int = 0  # 0..9
    num_planets: int = 0  # 1..9
    planets: list[object] = field(default_factory=list)
    home_system: bool = False


@dataclass
class Galaxy:
    """The radius of the galaxy and its stars, ordered by grid point."""

    radius: float
    stars: list[GalaxyStar] = field(default_factory=list)


class GalaxyGenerator(Protocol):
    def generate(
        self, num_systems: int, radius: float, rng: Dice, point_generator: PointGenerator
    ) -> Galaxy: ...


def _minimum_radius(num_systems: int) -> float:
    """Smallest whole step up from MIN_RADIUS whose cube holds the systems at standard density."""
    min_volume = (
        num_systems * STANDARD_GALACTIC_RADIUS**3 / STANDARD_NUMBER_OF_STAR_SYSTEMS
    )
    radius = MIN_RADIUS
    while radius**3 < min_volume:
        radius += 1
    return radius


def _roll_galaxy_star(rng: Dice, point: Point) -> GalaxyStar:
    star = GalaxyStar(point)
    star.kind = _KIND_BY_ROLL.get(rng.roll(1, int(StarType.GIANT) + 6), StarType.MAIN_SEQUENCE)
    star.color = StarColor(rng.roll(1, int(StarColor.RED)))
    star.size = rng.d10(1) - 1

    die = 2 + int(StarColor.RED - star.color)  # bluer stars roll a bigger die
    rolls = int(star.kind)
    if rolls > 2:
        rolls -= 1
    count = -2 + sum(rng.roll(1, die) for _ in range(rolls))
    while count < 1:
        count += rng.roll(1, 2)
    while count > 9:
        count -= rng.roll(1, 3)
    star.num_planets = count
    return star


class StandardGalaxyGenerator:
    """Places stars by quantizing sample points onto the grid."""

    def generate(
        self, num_systems: int, radius: float, rng: Dice, point_generator: PointGenerator
    ) -> Galaxy:
        """Build a galaxy of at most ``num_systems`` stars.

        A radius no larger than MIN_RADIUS is replaced by one sized for the
        standard star density. The origin always holds a star; further
        grid points come from quantized samples, and may fall short of the
        requested count.
        """
        if radius <= MIN_RADIUS:
            radius = _minimum_radius(num_systems)
        galaxy = Galaxy(radius=radius)

        grid: set[Point] = {Point()}
        for sample in point_generator.generate(num_systems * 100, rng):
            if len(grid) >= num_systems:
                break
            grid.add(sample.quantize(radius))

        for point in sorted(grid, key=lambda p: (p.x, p.y, p.z)):
            galaxy.stars.append(_roll_galaxy_star(rng, point))
        return galaxy


def generate(
    *,
    num_systems: int = 100,
    radius: float = 0.0,
    galaxy_generator: GalaxyGenerator | None = None,
    point_generator: PointGenerator | None = None,
    rng: Dice | None = None,
) -> Galaxy:
    """Generate a galaxy with the given or default generators and dice."""
    if galaxy_generator is None:
        galaxy_generator = StandardGalaxyGenerator()
    if point_generator is None:
        point_generator = NaiveDiskPointsGenerator()
    if rng is None:
        rng = Dice(*DEFAULT_SEED)
    return galaxy_generator.generate(num_systems, radius, rng, point_generator)