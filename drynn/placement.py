"""Placing star systems on a hexagonal disk."""

from __future__ import annotations

from dataclasses import dataclass

from drynn.dice import Dice
from drynn.hexes import Axial, disk
from drynn.model import Cluster

MAX_STARS_PER_SYSTEM = 5


@dataclass
class HexPlacement:
    """A placed system: its hex and how many stars were merged into it."""

    hex: Axial
    stars: int = 1


class PlacementError(ValueError):
    """Systems could not be placed as asked.

    ``placements`` holds whatever was placed before the failure.
    """

    def __init__(self, message: str, placements: list[HexPlacement] | None = None) -> None:
        super().__init__(message)
        self.placements: list[HexPlacement] = placements if placements is not None else []


def place_hex_systems(
    rng: Dice, radius: int, n: int, minimum_distance: int, merge: bool
) -> list[HexPlacement]:
    """Place up to ``n`` systems inside a disk of the given radius.

    Every hex of the disk is shuffled once and considered at most once. A
    candidate within ``minimum_distance`` of an existing placement is merged
    into the nearest one (ties broken at random, star count capped at 5) when
    ``merge`` is true, and discarded otherwise; any other candidate becomes a
    new one-star placement. Raises PlacementError, carrying the partial
    result, if the candidates run out before ``n`` placements exist.
    """
    if n < 0:
        raise PlacementError("number of systems must be non-negative")
    if n == 0:
        return []
    if radius < 0:
        raise PlacementError("radius must be non-negative")
    if minimum_distance < 0:
        raise PlacementError("minimumDistance must be non-negative")

    candidates = disk(radius)
    if n > len(candidates) and not merge:
        raise PlacementError(
            f"number of systems {n} exceeds disk capacity {len(candidates)}"
        )

    rng.shuffle(candidates)

    placements: list[HexPlacement] = []
    for candidate in candidates:
        idx = nearest_placement_within_distance(rng, placements, candidate, minimum_distance)
        if idx is not None:
            target = placements[idx]
            if merge and target.stars < MAX_STARS_PER_SYSTEM:
                target.stars += 1
            continue
        placements.append(HexPlacement(candidate, 1))
        if len(placements) == n:
            return placements

    raise PlacementError(
        f"could only place {len(placements)} systems in radius-{radius} disk "
        f"with minimumDistance={minimum_distance} merge={str(merge).lower()}",
        placements,
    )


def nearest_placement_within_distance(
    rng: Dice, placements: list[HexPlacement], candidate: Axial, limit: int
) -> int | None:
    """Index of the nearest placement no farther than ``limit`` from ``candidate``.

    Ties are broken uniformly at random; None if no placement is in range.
    """
    best: int | None = None
    tied: list[int] = []
    for i, placement in enumerate(placements):
        d = placement.hex.distance(candidate)
        if d > limit:
            continue
        if best is None or d < best:
            best = d
            tied = [i]
        elif d == best:
            tied.append(i)

    if not tied:
        return None
    if len(tied) == 1:
        return tied[0]
    return tied[rng.roll(0, len(tied) - 1)]


def total_stars(cluster: Cluster) -> int:
    """Total number of stars across the cluster."""
    return cluster.total_stars()


def count_multi_star(cluster: Cluster) -> int:
    """Number of systems holding more than one star."""
    return cluster.count_multi_star_systems()