"""Rolling stars and the planets that orbit them."""

from __future__ import annotations

import math

from drynn.dice import Dice
from drynn.model import (
    AtmosphericGas,
    Planet,
    PlanetKind,
    Star,
    StarColor,
    StarType,
    planet_kind_from_diameter,
)

_STAR_KIND_BY_ROLL = {1: StarType.DWARF, 2: StarType.DEGENERATE, 3: StarType.GIANT}

# Planet-count die size by star colour; bluer stars roll bigger dice.
_DIE_BY_COLOR = {
    StarColor.BLUE: 8,
    StarColor.BLUE_WHITE: 7,
    StarColor.WHITE: 6,
    StarColor.YELLOW_WHITE: 5,
    StarColor.YELLOW: 4,
    StarColor.ORANGE: 3,
    StarColor.RED: 2,
}

# Number of planet-count rolls by star type.
_ROLLS_BY_KIND = {
    StarType.DWARF: 1,
    StarType.DEGENERATE: 2,
    StarType.MAIN_SEQUENCE: 2,
    StarType.GIANT: 3,
}

_SEED_DIAMETER = (0, 5, 12, 13, 7, 20, 143, 121, 51, 49)  # thousands of km
_SEED_TEMPERATURE_CLASS = (0, 29, 27, 11, 9, 8, 6, 5, 5, 3)


def roll_star(rng: Dice) -> tuple[Star, list[Planet]]:
    """Roll a fresh star and its planets.

    Only physical attributes are filled in; ids, system and orbit numbers
    are left for the caller to stamp.
    """
    star = Star()
    star.kind = _STAR_KIND_BY_ROLL.get(rng.roll(1, 10), StarType.MAIN_SEQUENCE)
    star.color = StarColor(rng.roll(1, 7))
    star.size = rng.d10(1) - 1

    die = _DIE_BY_COLOR[star.color]
    num_planets = -2 + sum(rng.roll(1, die) for _ in range(_ROLLS_BY_KIND[star.kind]))
    while num_planets < 1:
        num_planets += rng.roll(1, 2)
    while num_planets > 9:
        num_planets -= rng.roll(1, 3)
    star.num_planets = num_planets

    planets: list[Planet] = []
    previous: Planet | None = None
    for orbit in range(1, num_planets + 1):
        previous = roll_planet(rng, star, orbit, previous)
        planets.append(previous)
    return star, planets


def _randomize(rng: Dice, value: int, rolls: int) -> int:
    """Nudge ``value`` up or down ``rolls`` times by a die a quarter its size."""
    die = max(2, value // 4)
    for _ in range(rolls):
        delta = rng.roll(1, die)
        if rng.d100(1) > 50:
            value += delta
        else:
            value -= delta
    return value


def _three_d3(rng: Dice) -> int:
    return rng.roll(1, 3) + rng.roll(1, 3) + rng.roll(1, 3)


def _gas_window(temperature_class: int) -> tuple[int, int]:
    n = 100 * temperature_class // 225
    low = min(max(n, 1), 9)
    return low, low + 4


def _roll_gases(rng: Dice, temperature_class: int) -> dict[AtmosphericGas, int]:
    wanted = rng.d4(2) // 2
    low, high = _gas_window(temperature_class)
    gases: dict[AtmosphericGas, int] = {}
    first: AtmosphericGas | None = None
    while not gases:
        for gas in map(AtmosphericGas, range(low, high + 1)):
            if len(gases) == wanted:
                break
            skip_chance, max_qty = 3, 100
            if gas is AtmosphericGas.HE:
                if temperature_class > 5:  # too hot for helium
                    continue
                skip_chance, max_qty = 2, 20
            elif gas is AtmosphericGas.O2:
                max_qty = 50
            if rng.roll(1, 3) >= skip_chance:
                continue
            gases[gas] = rng.roll(1, max_qty)
            if len(gases) == 1:
                first = gas

    total = sum(gases.values())
    percents = {gas: 100 * qty // total for gas, qty in gases.items()}
    # Whatever rounding left over goes to the first gas found.
    assert first is not None
    percents[first] += 100 - sum(percents.values())
    return percents


def roll_planet(
    rng: Dice, star: Star, orbit: int, previous_planet: Planet | None
) -> Planet:
    """Roll a single planet at ``orbit`` around ``star``.

    ``previous_planet`` (the next orbit inward, or None for orbit 1) caps the
    temperature class so that outer planets are never warmer.
    """
    if star.num_planets <= 3:
        seed_index = 2 * orbit + 1
    else:
        seed_index = 9 * orbit // star.num_planets

    planet = Planet(
        diameter=_SEED_DIAMETER[seed_index],
        temperature_class=_SEED_TEMPERATURE_CLASS[seed_index],
    )

    planet.diameter = _randomize(rng, planet.diameter, 4)
    while planet.diameter < 3:
        planet.diameter += rng.d4(1)

    planet.kind = planet_kind_from_diameter(planet.diameter)
    gas_giant = planet.kind is PlanetKind.GAS_GIANT

    if gas_giant:
        planet.density = (58 + rng.roll(1, 56) + rng.roll(1, 56)) / 100
    else:
        planet.density = (368 + rng.roll(1, 101) + rng.roll(1, 101)) / 100

    # 72 is calibrated so that Earth (density 5.50, diameter 13) gives ~1.0.
    planet.gravity = planet.density * planet.diameter / 72

    tc = _randomize(rng, planet.temperature_class, _three_d3(rng))
    min_tc, max_tc = (3, 7) if gas_giant else (1, 30)
    while tc < min_tc:
        tc += rng.roll(1, 2)
    while tc > max_tc:
        tc -= rng.roll(1, 2)
    if star.num_planets < 4 and orbit < 3:
        while tc < 12:
            tc += rng.roll(1, 4)
    if previous_planet is not None and previous_planet.temperature_class < tc:
        tc = previous_planet.temperature_class
    planet.temperature_class = tc

    pc = _randomize(rng, math.floor(planet.gravity * 10), _three_d3(rng))
    min_pc, max_pc = (11, 29) if gas_giant else (0, 12)
    while pc < min_pc:
        pc += rng.roll(1, 3)
    while pc > max_pc:
        pc -= rng.roll(1, 3)
    planet.pressure_class = pc

    # A pressure class of 0 is a vacuum: no atmosphere at all.
    if pc > 0:
        planet.gases = _roll_gases(rng, tc)

    while True:
        md = (rng.roll(1, 3) + rng.roll(1, 3) - rng.roll(1, 4)) * rng.roll(
            1, planet.diameter
        ) + rng.roll(1, 30) + rng.roll(1, 30)
        if 40 <= md <= 500:
            break
    planet.mining_difficulty = float(md) * 11 / 5

    return planet