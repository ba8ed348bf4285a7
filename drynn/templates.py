"""Home-system templates: the stage that precedes cluster generation.

Template planets use integer units scaled by 100: gravity 100 is Earth
gravity and mining difficulty 250 means 2.50. They are not interchangeable
with the float-valued ``Planet`` of the cluster model.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from drynn.dice import Dice
from drynn.model import AtmosphericGas, PlanetKind, planet_kind_from_diameter
from drynn.rolling import roll_star

DEFAULT_MAX_CANDIDATE_ROLLS = 10_000
MIN_TEMPLATE_PLANETS = 3
MAX_TEMPLATE_PLANETS = 9

# Seed values by base index; index 0 is unused.
_START_DIAMETER = (0, 5, 12, 13, 7, 20, 143, 121, 51, 49)
_START_TEMP_CLASS = (0, 29, 27, 11, 9, 8, 6, 5, 5, 3)


@dataclass(frozen=True)
class TemplateGas:
    """One entry of a template planet's atmosphere."""

    gas: AtmosphericGas
    percent: int


@dataclass
class TemplatePlanet:
    """Physical properties of one planet in a home-system template."""

    kind: PlanetKind = PlanetKind.ROCKY
    diameter: int = 0
    gravity: int = 0
    temperature_class: int = 0
    pressure_class: int = 0
    mining_difficulty: int = 0
    atmosphere: list[TemplateGas] = field(default_factory=list)
    special: int = 0


@dataclass
class HomeStarTemplate:
    """The result of one template-generation attempt, viable or not."""

    num_planets: int
    planets: list[TemplatePlanet] = field(default_factory=list)
    viability_score: int = 0


@dataclass(frozen=True)
class ViabilityWindow:
    """Exclusive acceptance band for a template's viability score."""

    min: int
    max: int

    def accepts(self, score: int) -> bool:
        """Whether ``score`` lies strictly between ``min`` and ``max``."""
        return self.min < score < self.max


DEFAULT_VIABILITY_WINDOW = ViabilityWindow(53, 57)


@dataclass
class HomeStarTemplateOutcome:
    """The template stage's result for one planet count.

    ``template`` is None when the candidate budget ran out first.
    ``attempts`` counts only template attempts for this planet count and
    ``best_score`` is the highest viability score those attempts reached.
    """

    num_planets: int
    template: HomeStarTemplate | None = None
    attempts: int = 0
    best_score: int = 0


def generate_home_star_templates(
    rng: Dice,
    window: ViabilityWindow = DEFAULT_VIABILITY_WINDOW,
    max_candidate_rolls: int = DEFAULT_MAX_CANDIDATE_ROLLS,
) -> list[HomeStarTemplateOutcome | None]:
    """Roll candidate stars until every planet count 3..9 has a viable template.

    Stops when all seven slots are filled or ``max_candidate_rolls``
    candidates have been rolled (a non-positive budget means the default).
    The result always has ten entries: indexes 0..2 are None and 3..9 hold
    an outcome.
    """
    if max_candidate_rolls <= 0:
        max_candidate_rolls = DEFAULT_MAX_CANDIDATE_ROLLS

    outcomes: list[HomeStarTemplateOutcome | None] = [None] * (MAX_TEMPLATE_PLANETS + 1)
    for n in range(MIN_TEMPLATE_PLANETS, MAX_TEMPLATE_PLANETS + 1):
        outcomes[n] = HomeStarTemplateOutcome(num_planets=n)
    slots_total = MAX_TEMPLATE_PLANETS - MIN_TEMPLATE_PLANETS + 1

    filled = 0
    for _ in range(max_candidate_rolls):
        if filled >= slots_total:
            break
        candidate, _planets = roll_star(rng)
        n = candidate.num_planets
        if not MIN_TEMPLATE_PLANETS <= n <= MAX_TEMPLATE_PLANETS:
            continue
        slot = outcomes[n]
        assert slot is not None
        if slot.template is not None:
            continue
        template, score = generate_home_star_template_attempt(rng, n)
        slot.attempts += 1
        slot.best_score = max(slot.best_score, score)
        if window.accepts(score):
            slot.template = template
            filled += 1
    return outcomes


def _nudge(rng: Dice, value: int, rolls: int) -> int:
    die = max(2, value // 4)
    for _ in range(rolls):
        delta = rng.roll(1, die)
        if rng.roll(1, 100) > 50:
            value += delta
        else:
            value -= delta
    return value


def _three_d3(rng: Dice) -> int:
    return rng.roll(1, 3) + rng.roll(1, 3) + rng.roll(1, 3)


def _clamp_by_rolls(rng: Dice, value: int, low: int, high: int, step: int) -> int:
    while value < low:
        value += rng.roll(1, step)
    while value > high:
        value -= rng.roll(1, step)
    return value


def generate_home_star_template_attempt(
    rng: Dice, num_planets: int
) -> tuple[HomeStarTemplate, int]:
    """Run one template attempt for ``num_planets`` planets.

    Always returns the template with its viability score; acceptance is
    left to the caller.
    """
    template = HomeStarTemplate(num_planets=num_planets)
    earth_like_consumed = False
    previous_tc: int | None = None

    for orbit in range(1, num_planets + 1):
        tp = TemplatePlanet()

        base = 2 * orbit + 1 if num_planets <= 3 else (9 * orbit) // num_planets
        base = min(max(base, 1), len(_START_DIAMETER) - 1)

        tp.diameter = _nudge(rng, _START_DIAMETER[base], 4)
        while tp.diameter < 3:
            tp.diameter += rng.roll(1, 4)

        tp.kind = planet_kind_from_diameter(tp.diameter)
        gas_giant = tp.kind is PlanetKind.GAS_GIANT

        if gas_giant:
            density = 58 + rng.roll(1, 56) + rng.roll(1, 56)
        else:
            density = 368 + rng.roll(1, 101) + rng.roll(1, 101)
        tp.gravity = (density * tp.diameter) // 72

        tc = _nudge(rng, _START_TEMP_CLASS[base], _three_d3(rng))
        if gas_giant:
            tc = _clamp_by_rolls(rng, tc, 3, 7, 2)
        else:
            tc = _clamp_by_rolls(rng, tc, 1, 30, 3)

        if num_planets < 4 and orbit <= 2:
            while tc < 12:
                tc += rng.roll(1, 4)

        if previous_tc is not None and previous_tc < tc:
            tc = previous_tc
        tp.temperature_class = tc

        if not earth_like_consumed and tp.temperature_class <= 11:
            # The first temperate planet becomes the earth-like home world.
            tp.diameter = 11 + rng.roll(1, 3)
            tp.kind = planet_kind_from_diameter(tp.diameter)
            tp.gravity = 93 + rng.roll(1, 11) + rng.roll(1, 11) + rng.roll(1, 5)
            tp.temperature_class = 9 + rng.roll(1, 3)
            tp.pressure_class = 8 + rng.roll(1, 3)
            tp.mining_difficulty = 208 + rng.roll(1, 11) + rng.roll(1, 11)
            tp.special = 1
            tp.atmosphere = build_earth_like_atmosphere(rng)
            earth_like_consumed = True
        else:
            pc = _nudge(rng, tp.gravity // 10, _three_d3(rng))
            if gas_giant:
                pc = _clamp_by_rolls(rng, pc, 11, 29, 3)
            else:
                pc = _clamp_by_rolls(rng, pc, 0, 12, 3)
            if tp.gravity < 10 or tp.temperature_class < 2 or tp.temperature_class > 27:
                pc = 0
            tp.pressure_class = pc

            if pc > 0:
                tp.atmosphere = roll_non_earth_atmosphere(rng, tp.temperature_class)

            while True:
                value = (
                    rng.roll(1, 3) + rng.roll(1, 3) + rng.roll(1, 3) - rng.roll(1, 4)
                ) * rng.roll(1, tp.diameter)
                value += rng.roll(1, 20) + rng.roll(1, 20)
                if 30 <= value <= 1000:
                    tp.mining_difficulty = value
                    break

        template.planets.append(tp)
        previous_tc = tp.temperature_class

    score = compute_viability_score(template.planets)
    template.viability_score = score
    return template, score


def build_earth_like_atmosphere(rng: Dice) -> list[TemplateGas]:
    """Optional NH3, N2, optional CO2 and 11-30% O2; N2 takes the remainder."""
    gases: list[TemplateGas] = []
    total = 0

    if rng.roll(1, 3) == 1:
        pct = rng.roll(1, 30)
        gases.append(TemplateGas(AtmosphericGas.NH3, pct))
        total += pct

    nitrogen_index = len(gases)
    gases.append(TemplateGas(AtmosphericGas.N2, 0))

    if rng.roll(1, 3) == 1:
        pct = rng.roll(1, 30)
        gases.append(TemplateGas(AtmosphericGas.CO2, pct))
        total += pct

    o2 = rng.roll(1, 20) + 10
    gases.append(TemplateGas(AtmosphericGas.O2, o2))
    total += o2

    gases[nitrogen_index] = TemplateGas(AtmosphericGas.N2, 100 - total)
    return gases


def roll_non_earth_atmosphere(rng: Dice, tc: int) -> list[TemplateGas]:
    """Pick up to four gases from a five-wide window set by temperature class.

    Quantities are normalised to whole percentages summing to 100, with the
    rounding remainder given to the first gas picked.
    """
    first_gas = min(max((100 * tc) // 225, 1), 9)
    wanted = (rng.roll(1, 4) + rng.roll(1, 4)) // 2

    picked: list[tuple[AtmosphericGas, int]] = []
    while not picked:
        for gas in map(AtmosphericGas, range(first_gas, first_gas + 5)):
            if len(picked) == wanted:
                break
            if gas is AtmosphericGas.HE:
                if rng.roll(1, 3) > 1:
                    continue
                if tc > 5:
                    continue
                qty = rng.roll(1, 20)
            else:
                if rng.roll(1, 3) == 3:
                    continue
                qty = rng.roll(1, 50) if gas is AtmosphericGas.O2 else rng.roll(1, 100)
            picked.append((gas, qty))

    total_qty = sum(qty for _, qty in picked)
    percents = [(100 * qty) // total_qty for _, qty in picked]
    percents[0] += 100 - sum(percents)
    return [TemplateGas(gas, pct) for (gas, _), pct in zip(picked, percents)]


def compute_viability_score(planets: list[TemplatePlanet]) -> int:
    """Sum 20000 / ((3 + LSN) * (50 + MD)) over all planets.

    LSN is measured against the first planet with ``special == 1``; without
    such a planet the score is 0.
    """
    home = next((p for p in planets if p.special == 1), None)
    if home is None:
        return 0
    return sum(
        20000 // ((3 + approximate_lsn(p, home)) * (50 + p.mining_difficulty))
        for p in planets
    )


def approximate_lsn(candidate: TemplatePlanet, home: TemplatePlanet) -> int:
    """Template-time life-support estimate for an oxygen breather.

    Any gas absent from the home atmosphere is treated as poison.
    """
    lsn = 2 * abs(candidate.temperature_class - home.temperature_class)
    lsn += 2 * abs(candidate.pressure_class - home.pressure_class)
    lsn += 2  # assume no oxygen until one is found
    home_gases = {g.gas for g in home.atmosphere}
    for g in candidate.atmosphere:
        if g.gas is AtmosphericGas.O2:
            lsn -= 2
        if g.gas not in home_gases:
            lsn += 2
    return lsn