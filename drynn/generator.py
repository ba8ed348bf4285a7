"""End-to-end world generation: placement, stars, planets, templates, deposits."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count

from drynn.deposits import generate_deposits
from drynn.dice import Dice
from drynn.model import Cluster, System
from drynn.placement import PlacementError, place_hex_systems
from drynn.rolling import roll_star
from drynn.templates import (
    DEFAULT_MAX_CANDIDATE_ROLLS,
    DEFAULT_VIABILITY_WINDOW,
    ViabilityWindow,
    generate_home_star_templates,
)

DEFAULT_SEED = (10, 10)


@dataclass(frozen=True)
class ClusterOptions:
    """Settings for ``generate_cluster``."""

    radius: int = 0
    num_systems: int = 0
    minimum_distance: int = 0
    merge: bool = False


class GenerationError(Exception):
    """Generation failed part way.

    ``cluster`` holds whatever was generated before the failure.
    """

    def __init__(self, message: str, cluster: Cluster) -> None:
        super().__init__(message)
        self.cluster = cluster


def generate_cluster(rng: Dice, options: ClusterOptions) -> Cluster:
    """Place systems on the hex disk, then roll their stars and planets.

    Placement and star rolling use independent substreams split from
    ``rng``. Systems, stars and planets get sequential ids from 1, and each
    planet its 1-based orbit. Home-star templates are not attached here.

    If placement fails, GenerationError is raised carrying a cluster built
    from the systems that were placed.
    """
    rng_placement = rng.split()
    rng_stars = rng.split()

    failure: PlacementError | None = None
    try:
        placements = place_hex_systems(
            rng_placement,
            options.radius,
            options.num_systems,
            options.minimum_distance,
            options.merge,
        )
    except PlacementError as err:
        placements = err.placements
        failure = err

    cluster = Cluster(radius=options.radius)
    star_ids = count(1)
    planet_ids = count(1)
    for system_id, placement in enumerate(placements, start=1):
        system = System(id=system_id, hex=placement.hex)
        for _ in range(placement.stars):
            star, planets = roll_star(rng_stars)
            star.id = next(star_ids)
            star.system_id = system.id
            for orbit, planet in enumerate(planets, start=1):
                planet.id = next(planet_ids)
                planet.star_id = star.id
                planet.orbit = orbit
            cluster.planets.extend(planets)
            cluster.stars.append(star)
        cluster.systems.append(system)

    if failure is not None:
        raise GenerationError(f"hex gen: {failure}", cluster) from failure
    return cluster


def generate(
    *,
    num_systems: int = 100,
    radius: int = 15,
    minimum_distance: int = 2,
    merge: bool = True,
    rng: Dice | None = None,
    viability_window: ViabilityWindow = DEFAULT_VIABILITY_WINDOW,
    max_candidate_rolls: int = DEFAULT_MAX_CANDIDATE_ROLLS,
) -> Cluster:
    """Run every stage with one master dice stream.

    The master stream is split once per stage (templates, cluster,
    deposits) so that changing one stage does not shift another's rolls.
    If cluster placement fails, templates and deposits are still attached
    to the partial cluster before GenerationError is raised.
    """
    if rng is None:
        rng = Dice(*DEFAULT_SEED)

    rng_templates = rng.split()
    rng_cluster = rng.split()
    rng_deposits = rng.split()

    failure: GenerationError | None = None
    try:
        cluster = generate_cluster(
            rng_cluster,
            ClusterOptions(
                radius=radius,
                num_systems=num_systems,
                minimum_distance=minimum_distance,
                merge=merge,
            ),
        )
    except GenerationError as err:
        cluster = err.cluster
        failure = err

    cluster.home_star_templates = generate_home_star_templates(
        rng_templates, viability_window, max_candidate_rolls
    )
    generate_deposits(rng_deposits, cluster)

    if failure is not None:
        raise failure
    return cluster