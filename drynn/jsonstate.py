"""Deterministic JSON encoding of a simulation run."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from drynn.model import AtmosphericGas, Cluster
from drynn.templates import HomeStarTemplateOutcome, TemplateGas


@dataclass
class SimulationOutcome:
    """The seeds that drove a run and the cluster it produced."""

    seed1: int
    seed2: int
    cluster: Cluster | None = None


def marshal_simulation_json(outcome: SimulationOutcome) -> str:
    """Pretty-printed, deterministic JSON for a simulation outcome.

    Planet atmospheres are emitted sorted by percent descending, then gas id
    ascending; everything else keeps its generation order.
    """
    doc = {
        "seed1": outcome.seed1,
        "seed2": outcome.seed2,
        "cluster": _cluster_doc(outcome.cluster),
    }
    return json.dumps(doc, indent=2)


def _number(value: float) -> float | int:
    """Whole floats are written without a fractional part."""
    if value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _cluster_doc(cluster: Cluster | None) -> dict[str, Any]:
    if cluster is None:
        return {
            "radius": 0,
            "systems": None,
            "stars": None,
            "planets": None,
            "deposits": None,
        }

    doc: dict[str, Any] = {
        "radius": cluster.radius,
        "systems": [
            {
                "id": s.id,
                "q": s.hex.q,
                "r": s.hex.r,
                "home_system": s.home_system,
            }
            for s in cluster.systems
        ],
        "stars": [
            {
                "id": s.id,
                "system_id": s.system_id,
                "kind": str(s.kind),
                "color": str(s.color),
                "size": s.size,
                "num_planets": s.num_planets,
            }
            for s in cluster.stars
        ],
        "planets": [
            {
                "id": p.id,
                "star_id": p.star_id,
                "orbit": p.orbit,
                "kind": str(p.kind),
                "diameter": p.diameter,
                "density": _number(p.density),
                "gravity": _number(p.gravity),
                "temperature_class": p.temperature_class,
                "pressure_class": p.pressure_class,
                "atmosphere": sort_gas_map(p.gases),
                "mining_difficulty": _number(p.mining_difficulty),
            }
            for p in cluster.planets
        ],
        "deposits": [
            {
                "id": d.id,
                "planet_id": d.planet_id,
                "resource": str(d.resource),
                "unit_code": d.resource.unit_code(),
                "quantity": d.quantity,
                "yield_pct": _number(d.yield_pct),
                "mining_difficulty": _number(d.mining_difficulty),
            }
            for d in cluster.deposits
        ],
    }

    templates = [
        _template_doc(outcome)
        for outcome in cluster.home_star_templates[3:10]
        if outcome is not None
    ]
    if templates:
        doc["home_star_templates"] = templates
    return doc


def _template_doc(outcome: HomeStarTemplateOutcome) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "num_planets": outcome.num_planets,
        "attempts": outcome.attempts,
        "best_score": outcome.best_score,
        "viable": outcome.template is not None,
    }
    template = outcome.template
    if template is None:
        return doc
    if template.viability_score:
        doc["viability_score"] = template.viability_score
    if template.planets:
        doc["planets"] = [
            {
                "kind": str(p.kind),
                "diameter": p.diameter,
                "gravity": p.gravity,
                "temperature_class": p.temperature_class,
                "pressure_class": p.pressure_class,
                "mining_difficulty": p.mining_difficulty,
                "atmosphere": _template_gases(p.atmosphere),
                "special": p.special,
            }
            for p in template.planets
        ]
    return doc


def sort_gas_map(gases: dict[AtmosphericGas, int]) -> list[dict[str, Any]]:
    """Atmosphere entries ordered by percent descending, then gas id ascending."""
    ordered = sorted(gases.items(), key=lambda item: (-item[1], item[0]))
    return [{"gas": str(gas), "percent": percent} for gas, percent in ordered]


def _template_gases(atmosphere: list[TemplateGas]) -> list[dict[str, Any]]:
    return [{"gas": str(g.gas), "percent": g.percent} for g in atmosphere]