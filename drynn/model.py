"""Systems, stars, planets and the cluster that holds them."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from drynn.hexes import Axial

if TYPE_CHECKING:
    from drynn.deposits import Deposit


class PlanetKind(IntEnum):
    ROCKY = 1
    GAS_GIANT = 2
    ASTEROID_BELT = 3

    def __str__(self) -> str:
        return {
            PlanetKind.ROCKY: "rocky",
            PlanetKind.GAS_GIANT: "gas giant",
            PlanetKind.ASTEROID_BELT: "asteroid belt",
        }[self]


def planet_kind_from_diameter(diameter: int) -> PlanetKind:
    """Classify a planet from its diameter in thousands of km."""
    return PlanetKind.GAS_GIANT if diameter > 40 else PlanetKind.ROCKY


class AtmosphericGas(IntEnum):
    NONE = 0
    H2 = 1
    CH4 = 2
    HE = 3
    NH3 = 4
    N2 = 5
    CO2 = 6
    O2 = 7
    HCL = 8
    CL2 = 9
    F2 = 10
    H2O = 11
    SO2 = 12
    H2S = 13

    def __str__(self) -> str:
        return _GAS_LABELS.get(self, "?")


_GAS_LABELS = {
    AtmosphericGas.H2: "H2",
    AtmosphericGas.CH4: "CH4",
    AtmosphericGas.HE: "He",
    AtmosphericGas.NH3: "NH3",
    AtmosphericGas.N2: "N2",
    AtmosphericGas.CO2: "CO2",
    AtmosphericGas.O2: "O2",
    AtmosphericGas.HCL: "HCl",
    AtmosphericGas.CL2: "Cl2",
    AtmosphericGas.F2: "F2",
    AtmosphericGas.H2O: "H2O",
    AtmosphericGas.SO2: "SO2",
    AtmosphericGas.H2S: "H2S",
}

NUM_GASES = 13


@dataclass
class Planet:
    """A planet orbiting a star; orbit 1 is innermost."""

    id: int = 0
    star_id: int = 0
    orbit: int = 0
    kind: PlanetKind = PlanetKind.ROCKY
    diameter: int = 0  # thousands of km
    density: float = 0.0  # earth ~= 5.5
    gravity: float = 0.0  # in G's; earth = 1.0
    temperature_class: int = 0  # 1..30 (3..7 for gas giants)
    pressure_class: int = 0  # 0..29
    gases: dict[AtmosphericGas, int] = field(default_factory=dict)  # percent 0..100
    mining_difficulty: float = 0.0
    not_special: bool = False
    ideal_home_planet: bool = False
    ideal_colony: bool = False
    radioactive_hell: bool = False


class StarType(IntEnum):
    DWARF = 1
    DEGENERATE = 2
    MAIN_SEQUENCE = 3
    GIANT = 4

    def __str__(self) -> str:
        return {
            StarType.DWARF: "dwarf",
            StarType.DEGENERATE: "degenerate",
            StarType.MAIN_SEQUENCE: "main-sequence",
            StarType.GIANT: "giant",
        }[self]


class StarColor(IntEnum):
    BLUE = 1
    BLUE_WHITE = 2
    WHITE = 3
    YELLOW_WHITE = 4
    YELLOW = 5
    ORANGE = 6
    RED = 7

    def __str__(self) -> str:
        return {
            StarColor.BLUE: "blue",
            StarColor.BLUE_WHITE: "blue-white",
            StarColor.WHITE: "white",
            StarColor.YELLOW_WHITE: "yellow-white",
            StarColor.YELLOW: "yellow",
            StarColor.ORANGE: "orange",
            StarColor.RED: "red",
        }[self]


@dataclass
class Star:
    """A star inside a system; num_planets matches its planets' count."""

    id: int = 0
    system_id: int = 0
    kind: StarType = StarType.MAIN_SEQUENCE
    color: StarColor = StarColor.YELLOW
    size: int = 0  # 0..9
    num_planets: int = 0  # 1..9


@dataclass
class System:
    """A hex holding one or more stars."""

    id: int = 0
    hex: Axial = field(default_factory=lambda: Axial(0, 0))
    home_system: bool = False


@dataclass
class Cluster:
    """Generated systems, stars, planets and deposits as flat lists linked by ids.

    ``home_star_templates`` is indexed by planet count and is filled by the
    template stage.
    """

    radius: int = 0
    systems: list[System] = field(default_factory=list)
    stars: list[Star] = field(default_factory=list)
    planets: list[Planet] = field(default_factory=list)
    deposits: list[Deposit] = field(default_factory=list)
    home_star_templates: list[Any] = field(default_factory=list)

    def stars_for_system(self, sys_id: int) -> list[Star]:
        """Stars owned by the system, in generation order."""
        return [s for s in self.stars if s.system_id == sys_id]

    def planets_for_star(self, star_id: int) -> list[Planet]:
        """Planets orbiting the star, innermost first."""
        return [p for p in self.planets if p.star_id == star_id]

    def planets_for_system(self, sys_id: int) -> list[Planet]:
        """Every planet under the system, whichever star it orbits."""
        star_ids = {s.id for s in self.stars if s.system_id == sys_id}
        return [p for p in self.planets if p.star_id in star_ids]

    def deposits_for_planet(self, planet_id: int) -> list[Deposit]:
        """Deposits attached to the planet, in stamped order."""
        return [d for d in self.deposits if d.planet_id == planet_id]

    def total_stars(self) -> int:
        return len(self.stars)

    def total_planets(self) -> int:
        return len(self.planets)

    def total_deposits(self) -> int:
        return len(self.deposits)

    def count_multi_star_systems(self) -> int:
        """Number of systems holding more than one star."""
        counts = Counter(s.system_id for s in self.stars)
        return sum(1 for n in counts.values() if n > 1)