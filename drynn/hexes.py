"""Axial hex coordinates and hexagonal disks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Axial:
    """A hex addressed by axial coordinates (q, r)."""

    q: int
    r: int

    @property
    def s(self) -> int:
        """The implied third cube coordinate."""
        return -self.q - self.r

    def distance(self, other: Axial) -> int:
        """Number of hex steps between this hex and another."""
        dq = self.q - other.q
        dr = self.r - other.r
        return (abs(dq) + abs(dr) + abs(dq + dr)) // 2


ORIGIN = Axial(0, 0)


def disk(radius: int) -> list[Axial]:
    """Every hex within ``radius`` steps of the origin, ordered by q then r.

    A negative radius gives an empty list.
    """
    return [
        Axial(q, r)
        for q in range(-radius, radius + 1)
        for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1)
    ]


def contains(radius: int, hex: Axial) -> bool:
    """Whether ``hex`` lies in the disk of the given radius."""
    return hex.distance(ORIGIN) <= radius