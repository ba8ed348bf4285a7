"""HTML report of a whole cluster: hex map plus optional planet and deposit tables."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Mapping

from drynn.deposits import Deposit
from drynn.hexviewer import ViewerSystem, render_disk_svg
from drynn.model import AtmosphericGas, Cluster, Planet, Star
from drynn.templateviewer import CLUSTER_PAGE_CSS

_PLANET_HEADER = (
    "<table><thead><tr><th>Orbit</th><th>Kind</th><th>Diameter (km)</th>"
    "<th>Density</th><th>Gravity (g)</th><th>Temp</th><th>Pressure</th>"
    "<th>Atmosphere</th><th>Mining</th></tr></thead><tbody>\n"
)
_DEPOSIT_HEADER = (
    "<table><thead><tr><th>ID</th><th>Resource</th><th>Unit</th><th>Quantity</th>"
    "<th>Yield %</th><th>Mining</th></tr></thead><tbody>\n"
)


def cluster_to_html(
    cluster: Cluster,
    pixel_size: float = 0.0,
    show_coords: bool = False,
    show_planets: bool = False,
    show_deposits: bool = False,
) -> str:
    """A stand-alone HTML page with the cluster's hex map.

    ``show_planets`` appends a per-system planet report; ``show_deposits``
    adds a collapsible deposit list per planet inside that report. A
    non-positive ``pixel_size`` is derived to fit roughly 1280x1280.
    """
    star_counts = Counter(s.system_id for s in cluster.stars)
    systems = [ViewerSystem(s.hex, star_counts[s.id]) for s in cluster.systems]

    parts = [
        '<!DOCTYPE html>\n<html lang="en">\n<head>\n',
        '<meta charset="UTF-8">\n<title>Cluster</title>\n',
        CLUSTER_PAGE_CSS,
        "</head>\n<body>\n",
        '<div class="map">\n',
        render_disk_svg(cluster.radius, systems, pixel_size, show_coords),
        "</div>\n",
    ]
    if show_planets:
        parts.append(_planet_report(cluster, show_deposits))
    parts.append("</body>\n</html>\n")
    return "".join(parts)


def _planet_report(cluster: Cluster, show_deposits: bool) -> str:
    stars_by_system: defaultdict[int, list[Star]] = defaultdict(list)
    for star in cluster.stars:
        stars_by_system[star.system_id].append(star)
    planets_by_star: defaultdict[int, list[Planet]] = defaultdict(list)
    for planet in cluster.planets:
        planets_by_star[planet.star_id].append(planet)
    deposits_by_planet: defaultdict[int, list[Deposit]] = defaultdict(list)
    if show_deposits:
        for deposit in cluster.deposits:
            deposits_by_planet[deposit.planet_id].append(deposit)

    parts = ['<section class="report">\n', "<h1>Planet Report</h1>\n"]
    for system in cluster.systems:
        parts.append(f"<h2>System {system.hex.q},{system.hex.r}</h2>\n")
        for index, star in enumerate(stars_by_system.get(system.id, []), start=1):
            parts.append(
                f"<h3>Star {index} — {str(star.kind)} {str(star.color)}, "
                f"size {star.size}</h3>\n"
            )
            planets = planets_by_star.get(star.id, [])
            if not planets:
                parts.append('<p class="empty">No planets.</p>\n')
                continue
            parts.append(_PLANET_HEADER)
            parts.extend(_planet_row(p) for p in planets)
            parts.append("</tbody></table>\n")
            if show_deposits:
                parts.extend(
                    _deposits_details(p, deposits_by_planet.get(p.id, [])) for p in planets
                )
    parts.append("</section>\n")
    return "".join(parts)


def _planet_row(p: Planet) -> str:
    return (
        f"<tr><td>{p.orbit}</td><td>{str(p.kind)}</td><td>{p.diameter * 1000}</td>"
        f"<td>{p.density:.2f}</td><td>{p.gravity:.2f}</td>"
        f"<td>{p.temperature_class}</td><td>{p.pressure_class}</td>"
        f"<td>{gas_mix_label(p.gases)}</td><td>{p.mining_difficulty:.0f}</td></tr>\n"
    )


def _deposits_details(planet: Planet, deposits: list[Deposit]) -> str:
    kind = str(planet.kind)
    if not deposits:
        return (
            f'<details class="deposits"><summary>Orbit {planet.orbit} ({kind}) '
            f"— no deposits</summary></details>\n"
        )
    parts = [
        f'<details class="deposits"><summary>Orbit {planet.orbit} ({kind}) '
        f"— {len(deposits)} deposits</summary>\n",
        _DEPOSIT_HEADER,
    ]
    parts.extend(
        f"<tr><td>{d.id}</td><td>{d.resource.label()}</td><td>{d.resource.unit_code()}</td>"
        f"<td>{format_quantity(d.quantity)}</td><td>{d.yield_pct * 100:.0f}</td>"
        f"<td>{d.mining_difficulty:.0f}</td></tr>\n"
        for d in deposits
    )
    parts.append("</tbody></table></details>\n")
    return "".join(parts)


def format_quantity(q: int) -> str:
    """An integer with commas between groups of three digits."""
    return f"{q:,}"


def gas_mix_label(gases: Mapping[AtmosphericGas, int]) -> str:
    """Gases as "GAS n%" by percent descending then gas id, or an em dash for a vacuum."""
    if not gases:
        return "—"
    ordered = sorted(gases.items(), key=lambda item: (-item[1], item[0]))
    return ", ".join(f"{str(gas)} {percent}%" for gas, percent in ordered)