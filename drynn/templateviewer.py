"""HTML reports for home-system templates."""

from __future__ import annotations

from drynn.templates import HomeStarTemplate, TemplateGas

CLUSTER_PAGE_CSS = """<style>
body{margin:0;background:#f6f6f7;font-family:system-ui,sans-serif;color:#222}
.map{display:flex;justify-content:center;padding:24px}
.report{max-width:960px;margin:0 auto;padding:0 24px 48px}
.report h1{font-size:22px;margin:0 0 16px}
.report h2{font-size:17px;margin:24px 0 6px;border-bottom:1px solid #ddd;padding-bottom:2px}
.report h3{font-size:14px;margin:10px 0 6px;color:#444}
.report table{width:100%;border-collapse:collapse;font-size:13px;margin:4px 0 12px}
.report th,.report td{padding:4px 8px;border-bottom:1px solid #eee;text-align:right}
.report th:first-child,.report td:first-child{text-align:left}
.report .empty{color:#888;font-style:italic;margin:4px 0 12px}
.report details.deposits{margin:0 0 6px;padding:4px 8px;background:#fafafa;border:1px solid #eee;border-radius:3px;font-size:12px}
.report details.deposits summary{cursor:pointer;color:#555;padding:2px 0}
.report details.deposits[open] summary{color:#222;font-weight:500;border-bottom:1px solid #ddd;margin-bottom:4px}
.report details.deposits table{margin:4px 0 0}
</style>
"""

_PLANET_HEADER = (
    "<table><thead><tr><th>Orbit</th><th>Diameter (km)</th><th>Gravity (g)</th>"
    "<th>Temp</th><th>Pressure</th><th>Atmosphere</th><th>Mining</th>"
    "<th>Home?</th></tr></thead><tbody>"
)


def _page_head(title: str) -> list[str]:
    return [
        '<!DOCTYPE html>\n<html lang="en">\n<head>\n',
        f'<meta charset="UTF-8">\n<title>{title}</title>\n',
        CLUSTER_PAGE_CSS,
        "</head>\n<body>\n",
    ]


def template_to_html(template: HomeStarTemplate) -> str:
    """A self-contained HTML page describing one home-system template."""
    n = template.num_planets
    parts = _page_head(f"Home System Template ({n} planets)")
    parts.append('<section class="report">\n')
    parts.append(f"<h1>Home System Template — {n} planets</h1>\n")
    parts.append("<table><tbody>\n")
    parts.append(
        f"<tr><th>Viability Score</th><td>{template.viability_score}</td></tr>\n"
    )
    parts.append("</tbody></table>\n")
    parts.append("<h2>Planets</h2>\n")
    parts.append(_PLANET_HEADER + "\n")
    for orbit, p in enumerate(template.planets, start=1):
        home = "yes" if p.special == 1 else ""
        parts.append(
            f"<tr><td>{orbit}</td><td>{p.diameter * 1000}</td>"
            f"<td>{p.gravity / 100:.2f}</td><td>{p.temperature_class}</td>"
            f"<td>{p.pressure_class}</td>"
            f"<td>{template_atmosphere_label(p.atmosphere)}</td>"
            f"<td>{p.mining_difficulty / 100:.2f}</td><td>{home}</td></tr>\n"
        )
    parts.append("</tbody></table>\n")
    parts.append("</section>\n")
    parts.append("</body>\n</html>\n")
    return "".join(parts)


def home_star_template_unavailable_html(
    num_planets: int, attempts: int, best_score: int
) -> str:
    """A page explaining that no viable template was found for a planet count."""
    parts = _page_head(f"Home System Template ({num_planets} planets) — unavailable")
    parts.append('<section class="report">\n')
    parts.append(f"<h1>Home System Template — {num_planets} planets</h1>\n")
    parts.append('<p class="empty">No viable template found.</p>\n')
    parts.append(
        f"<p>Ran {attempts} template-generation attempt(s); best viability score "
        f"seen was {best_score}. The stage-1 candidate budget was exhausted before "
        "a score landed inside the acceptance window.</p>\n"
    )
    parts.append("</section>\n")
    parts.append("</body>\n</html>\n")
    return "".join(parts)


def template_atmosphere_label(atmosphere: list[TemplateGas]) -> str:
    """Gases in their stored order as "GAS n%", or an em dash for a vacuum."""
    if not atmosphere:
        return "—"
    return ", ".join(f"{g.gas} {g.percent}%" for g in atmosphere)