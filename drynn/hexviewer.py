"""SVG and HTML hex maps of placed star systems."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from drynn.hexes import Axial, contains, disk

_MAX_DIM = 1280.0
_MARGIN = 40.0
_SQRT3 = math.sqrt(3)

_PAGE_HEAD = (
    '<!DOCTYPE html>\n<html lang="en">\n<head>\n'
    '<meta charset="UTF-8">\n<title>Hex Map</title>\n'
    "<style>body{margin:0;background:#f6f6f7;font-family:system-ui,sans-serif}"
    ".wrap{display:flex;justify-content:center;padding:24px}</style>\n"
    '</head>\n<body>\n<div class="wrap">\n'
)
_PAGE_TAIL = "</div>\n</body>\n</html>\n"


@dataclass(frozen=True)
class ViewerSystem:
    """What the map needs to know about one system: where it is and how many stars."""

    hex: Axial
    stars: int


def axial_to_pixel(q: int, r: int, size: float) -> tuple[float, float]:
    """Pixel centre of the flat-top hex (q, r) for hexes of the given size."""
    cx = size * 1.5 * q
    cy = size * _SQRT3 * (r + 0.5 * q)
    return cx, cy


def _hex_polygon(cx: float, cy: float, size: float) -> str:
    points = " ".join(
        f"{cx + size * math.cos(math.pi / 3.0 * i):.1f},"
        f"{cy + size * math.sin(math.pi / 3.0 * i):.1f}"
        for i in range(6)
    )
    return f'  <polygon points="{points}" fill="none" stroke="#cccccc" stroke-width="1"/>\n'


def _star_dots(cx: float, cy: float, size: float, count: int) -> str:
    """Circles in a die-face pattern for 1 to 5 stars."""
    radius = size * 0.15
    d = size * 0.28
    if count == 1:
        dots = [(0.0, 0.0)]
    elif count == 2:
        dots = [(-d, -d), (d, d)]
    elif count == 3:
        dots = [(-d, -d), (0.0, 0.0), (d, d)]
    elif count == 4:
        dots = [(-d, -d), (d, -d), (-d, d), (d, d)]
    else:
        dots = [(-d, -d), (d, -d), (0.0, 0.0), (-d, d), (d, d)]
    return "".join(
        f'  <circle cx="{cx + x:.1f}" cy="{cy + y:.1f}" r="{radius:.1f}" fill="#222222"/>\n'
        for x, y in dots
    )


def systems_to_html(systems: Sequence[ViewerSystem], pix_size: float = 0.0) -> str:
    """A stand-alone HTML page with a rectangular hex map of the systems.

    The map covers the systems' bounding box plus a one-hex border. A
    non-positive ``pix_size`` is derived to fit roughly 1280x1280.
    """
    if not systems:
        return _render_hex_html({}, 1, 1, pix_size)

    min_q = min(s.hex.q for s in systems)
    max_q = max(s.hex.q for s in systems)
    min_r = min(s.hex.r for s in systems)
    max_r = max(s.hex.r for s in systems)

    cells = {(s.hex.q - min_q + 1, s.hex.r - min_r + 1): s.stars for s in systems}
    return _render_hex_html(cells, max_q - min_q + 3, max_r - min_r + 3, pix_size)


def render_disk_html(
    radius: int, systems: Sequence[ViewerSystem], show_coords: bool = False
) -> str:
    """A stand-alone HTML page showing the whole hex disk with its systems.

    With ``show_coords`` each occupied hex is labelled with its axial
    coordinates. Raises ValueError for a negative radius.
    """
    if radius < 0:
        raise ValueError("radius must be non-negative")
    return _PAGE_HEAD + render_disk_svg(radius, systems, 0.0, show_coords) + _PAGE_TAIL


def render_disk_svg(
    radius: int,
    systems: Sequence[ViewerSystem],
    pix_size: float = 0.0,
    show_coords: bool = False,
) -> str:
    """The inline SVG element for a hex disk with systems drawn on it.

    Systems outside the disk are ignored. A non-positive ``pix_size`` is
    derived to fit roughly 1280x1280.
    """
    if radius < 0:
        raise ValueError("radius must be non-negative")

    star_map = {s.hex: s.stars for s in systems if contains(radius, s.hex)}

    if pix_size <= 0:
        avail = _MAX_DIM - 2 * _MARGIN
        size_from_w = avail / (3.0 * radius + 1.0)
        size_from_h = avail / (_SQRT3 * (2.0 * radius + 1.0))
        pix_size = max(min(size_from_w, size_from_h), 4.0)

    pixels = [(h, *axial_to_pixel(h.q, h.r, pix_size)) for h in disk(radius)]
    xs = [cx for _, cx, _ in pixels]
    ys = [cy for _, _, cy in pixels]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    vb_x = min_x - pix_size - _MARGIN
    vb_y = min_y - pix_size * _SQRT3 / 2 - _MARGIN
    vb_w = (max_x - min_x) + 2 * pix_size + 2 * _MARGIN
    vb_h = (max_y - min_y) + pix_size * _SQRT3 + 2 * _MARGIN
    svg_w = math.ceil(vb_w)
    svg_h = math.ceil(vb_h)

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{svg_w}" height="{svg_h}" '
        f'viewBox="{vb_x:.1f} {vb_y:.1f} {vb_w:.1f} {vb_h:.1f}">\n',
        f'  <rect x="{vb_x:.1f}" y="{vb_y:.1f}" width="{vb_w:.1f}" '
        f'height="{vb_h:.1f}" fill="white"/>\n',
    ]
    parts.extend(_hex_polygon(cx, cy, pix_size) for _, cx, cy in pixels)

    for ax, cx, cy in pixels:
        count = star_map.get(ax, 0)
        if count > 0:
            parts.append(_star_dots(cx, cy, pix_size, count))

    if show_coords:
        font_size = max(pix_size * 0.28, 8.0)
        for ax, cx, cy in pixels:
            if star_map.get(ax, 0) > 0:
                ty = cy + pix_size * _SQRT3 * 0.38
                parts.append(
                    f'  <text x="{cx:.1f}" y="{ty:.1f}" font-family="system-ui, sans-serif" '
                    f'font-size="{font_size:.1f}" fill="#888888" text-anchor="middle">'
                    f"{ax.q},{ax.r}</text>\n"
                )

    parts.append("</svg>\n")
    return "".join(parts)


def _render_hex_html(
    cells: Mapping[tuple[int, int], int], num_cols: int, num_rows: int, pix_size: float
) -> str:
    if num_cols <= 0 or num_rows <= 0:
        num_cols, num_rows = 1, 1

    if pix_size <= 0:
        avail = _MAX_DIM - 2 * _MARGIN
        size_from_w = avail / (1.5 * num_cols + 0.5)
        size_from_h = avail / (_SQRT3 * (num_rows + 0.5))
        pix_size = max(min(size_from_w, size_from_h), 4.0)

    w = math.ceil(pix_size * (1.5 * num_cols + 0.5) + 2 * _MARGIN)
    h = math.ceil(pix_size * _SQRT3 * (num_rows + 0.5) + 2 * _MARGIN)

    parts = [
        _PAGE_HEAD,
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
        f'viewBox="0 0 {w} {h}">\n',
        f'  <rect x="0" y="0" width="{w}" height="{h}" fill="white"/>\n',
    ]
    for col in range(num_cols):
        for row in range(num_rows):
            cx = _MARGIN + pix_size * (1.5 * col + 1)
            cy = _MARGIN + pix_size * _SQRT3 * (row + 0.5 * (col & 1) + 0.5)
            parts.append(_hex_polygon(cx, cy, pix_size))
            count = cells.get((col, row), 0)
            if count > 0:
                parts.append(_star_dots(cx, cy, pix_size, count))

    parts.append("</svg>\n")
    parts.append(_PAGE_TAIL)
    return "".join(parts)