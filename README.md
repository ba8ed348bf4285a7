# drynn

`drynn` generates star clusters for a turn-based space strategy game. A
single call produces a hexagonal disk of star systems, the stars in each
system, the planets orbiting each star (diameter, density, gravity,
temperature and pressure classes, atmosphere and mining difficulty), the
mineral deposits on every planet, and a library of candidate home-system
templates.

Generation is deterministic: the same seeded dice give the same cluster.
Each stage draws from its own split of the master dice, so changing one
stage's settings does not shift another stage's rolls.

## Dice

`drynn.dice.Dice(seed1, seed2)` is the seeded random source used
everywhere. It offers `roll(low, high)` (inclusive), `d4`, `d6`, `d8`,
`d10`, `d12` and `d100` (sums of n dice), `random()`, `shuffle(items)` and
`split()`, which derives an independent child stream.

## Generating a cluster

```python
from drynn.dice import Dice
from drynn.generator import generate

cluster = generate(num_systems=100, radius=15, minimum_distance=2, merge=True,
                   rng=Dice(10, 10))

print(cluster.total_stars(), "stars")
print(cluster.total_planets(), "planets")
print(cluster.total_deposits(), "deposits")
print(cluster.count_multi_star_systems(), "multi-star systems")

for system in cluster.systems:
    for star in cluster.stars_for_system(system.id):
        for planet in cluster.planets_for_star(star.id):
            deposits = cluster.deposits_for_planet(planet.id)
```

The keyword arguments shown are the defaults; without `rng` the dice are
seeded with `(10, 10)`. The home-system search can be tuned with
`viability_window=` (a `drynn.templates.ViabilityWindow`; scores strictly
between its `min` and `max` are accepted, default `(53, 57)`) and
`max_candidate_rolls=` (default 10,000; non-positive means the default).

If the disk cannot hold the requested number of systems (for example with
`merge=False`), `drynn.generator.GenerationError` is raised; its `cluster`
attribute holds the partial cluster, with templates and deposits attached.

The stages are also available on their own:

- `drynn.generator.generate_cluster(rng, ClusterOptions(...))` places
  systems and rolls their stars and planets.
- `drynn.placement.place_hex_systems(rng, radius, n, minimum_distance, merge)`
  does the hex placement alone and raises `PlacementError` (carrying the
  partial `placements`) when it runs out of candidates.
- `drynn.rolling.roll_star(rng)` rolls one star and its planets.
- `drynn.templates.generate_home_star_templates(rng, window, max_candidate_rolls)`
  returns ten entries indexed by planet count; entries 3 to 9 hold a
  `HomeStarTemplateOutcome`, whose `template` is `None` if the budget ran out.
- `drynn.deposits.generate_deposits(rng, cluster)` appends deposits to the
  cluster and returns them.

## Output

All renderers return strings.

- `drynn.jsonstate.marshal_simulation_json(SimulationOutcome(seed1, seed2, cluster))`
  gives a deterministic, pretty-printed JSON document of a run.
- `drynn.viewer.cluster_to_html(cluster, pixel_size, show_coords,
  show_planets, show_deposits)` renders an HTML page with an SVG hex map
  and, optionally, a planet report with collapsible deposit lists.
- `drynn.hexviewer.render_disk_svg`, `render_disk_html` and
  `systems_to_html` draw hex maps with systems shown as die-face dots.
- `drynn.templateviewer.template_to_html` renders one home-system template;
  `home_star_template_unavailable_html` reports a slot the search could not
  fill.

## Cartesian galaxies

`drynn.cartesian` holds an alternative generator that places stars at
integer grid points inside a ball or disk rather than on hexes:

```python
from drynn.cartesian.galaxy import generate
from drynn.cartesian.points import UniformDiskPointsGenerator

galaxy = generate(num_systems=100, point_generator=UniformDiskPointsGenerator())
print(galaxy.radius, len(galaxy.stars))
```

A radius of 6 or less is replaced by one sized for the number of systems.
The origin always holds a star, and the galaxy may end up with fewer stars
than requested. Each star gets a type, colour, size and planet count; no
planets are rolled for these stars. Four point generators are provided:
`NaiveDiskPointsGenerator` (the default), `NaiveSpherePointsGenerator`,
`UniformDiskPointsGenerator` and `UniformSpherePointsGenerator`.

## What this package does not do

It is a library only: there is no command-line tool, no web server and no
database storage. Generated clusters live in memory; saving them is left to
the caller, for example via the JSON output above.

## Tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e ".[test]"
pytest
```