"""Per-planet natural-resource deposits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from drynn.dice import Dice
from drynn.model import Cluster, Planet, PlanetKind


class Resource(IntEnum):
    """The kind of material a deposit produces."""

    FUEL = 1
    GOLD = 2
    METAL = 3
    NON_METAL = 4

    def __str__(self) -> str:
        return {
            Resource.FUEL: "fuel",
            Resource.GOLD: "gold",
            Resource.METAL: "metal",
            Resource.NON_METAL: "non-metal",
        }[self]

    def label(self) -> str:
        """Player-facing display label."""
        return {
            Resource.FUEL: "Fuel",
            Resource.GOLD: "Gold",
            Resource.METAL: "Metals",
            Resource.NON_METAL: "Non-Metals",
        }[self]

    def unit_code(self) -> str:
        """Short production-unit code used in game output."""
        return {
            Resource.FUEL: "FUEL",
            Resource.GOLD: "GOLD",
            Resource.METAL: "METS",
            Resource.NON_METAL: "NMTS",
        }[self]


@dataclass
class Deposit:
    """A mineral deposit on a planet.

    ``id`` is ``planet_id * 100 + n`` with n the 1-based index on the planet.
    """

    id: int = 0
    planet_id: int = 0
    resource: Resource = Resource.FUEL
    quantity: int = 0
    yield_pct: float = 0.0
    mining_difficulty: float = 0.0


def generate_deposits(rng: Dice, cluster: Cluster | None) -> list[Deposit]:
    """Roll deposits for every planet, append them to the cluster and return them."""
    if cluster is None:
        return []
    added: list[Deposit] = []
    for planet in cluster.planets:
        count = _roll_num_deposits(rng, planet.kind)
        added.extend(_roll_deposit(rng, planet, n) for n in range(1, count + 1))
    cluster.deposits.extend(added)
    return added


def _roll_num_deposits(rng: Dice, kind: PlanetKind) -> int:
    if kind is PlanetKind.ASTEROID_BELT:
        return rng.d4(10)
    if kind is PlanetKind.GAS_GIANT:
        return rng.d12(3)
    if kind is PlanetKind.ROCKY:
        return max(1, rng.d8(3) - 2)
    return 0


def _triangular_quantity(rng: Dice, step: int, sides: int) -> int:
    return step * (rng.roll(1, sides) + rng.roll(1, sides))


def _roll_deposit(rng: Dice, planet: Planet, n: int) -> Deposit:
    deposit = Deposit(
        id=planet.id * 100 + n,
        planet_id=planet.id,
        mining_difficulty=planet.mining_difficulty,
    )
    roll = rng.roll(1, 100)
    if planet.kind is PlanetKind.ASTEROID_BELT:
        _asteroid_belt(rng, deposit, roll)
    elif planet.kind is PlanetKind.GAS_GIANT:
        _gas_giant(rng, deposit, roll)
    elif planet.kind is PlanetKind.ROCKY:
        _rocky(rng, deposit, roll, planet.mining_difficulty >= 500)
    return deposit


def _asteroid_belt(rng: Dice, d: Deposit, roll: int) -> None:
    if roll == 1:
        d.resource = Resource.GOLD
        d.quantity = _triangular_quantity(rng, 50_000, 50)
        d.yield_pct = rng.roll(1, 3) / 100
    elif roll <= 10:
        d.resource = Resource.FUEL
        d.quantity = _triangular_quantity(rng, 500_000, 99)
        d.yield_pct = (rng.d6(3) - 2) / 100
    else:
        d.resource = Resource.METAL
        d.quantity = _triangular_quantity(rng, 500_000, 99)
        d.yield_pct = (rng.d10(3) - 2) / 100


def _gas_giant(rng: Dice, d: Deposit, roll: int) -> None:
    if roll <= 15:
        d.resource = Resource.FUEL
        d.quantity = _triangular_quantity(rng, 500_000, 99)
        d.yield_pct = (rng.d4(10) - 2) / 100
    elif roll <= 40:
        d.resource = Resource.METAL
        d.quantity = _triangular_quantity(rng, 500_000, 99)
        d.yield_pct = rng.d6(10) / 100
    else:
        d.resource = Resource.NON_METAL
        d.quantity = _triangular_quantity(rng, 500_000, 99)
        d.yield_pct = rng.d6(10) / 100


def _rocky(rng: Dice, d: Deposit, roll: int, hard: bool) -> None:
    if roll == 1:
        d.resource = Resource.GOLD
        d.quantity = _triangular_quantity(rng, 50_000, 10)
        if hard:
            d.yield_pct = rng.roll(1, 3) / 100
        else:
            d.yield_pct = (rng.d4(3) - 3) / 100
        return
    if roll <= 15:
        d.resource = Resource.FUEL
        d.quantity = _triangular_quantity(rng, 500_000, 99)
        d.yield_pct = ((rng.d4(10) - 2) if hard else rng.d8(10)) / 100
        return
    d.resource = Resource.METAL if roll <= 45 else Resource.NON_METAL
    d.quantity = _triangular_quantity(rng, 500_000, 99)
    d.yield_pct = (rng.d6(10) if hard else rng.d8(10)) / 100