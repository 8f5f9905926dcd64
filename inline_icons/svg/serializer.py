"""Write the recolored, re-framed icon SVG."""

from __future__ import annotations

from collections.abc import Iterable
from xml.sax.saxutils import quoteattr

from inline_icons.models.icon_document import PathRecord, ViewBox


def serialize_icon(
    viewbox: ViewBox,
    width: int,
    height: int,
    background: str,
    paths: Iterable[PathRecord],
    foreground: str,
) -> str:
    """Generate SVG markup: a background rect spanning the viewbox, then every path in order."""
    x, y, w, h = str(viewbox).split()
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"'
        f' viewBox="{viewbox}">',
        f'  <rect x="{x}" y="{y}" width="{w}" height="{h}" fill={quoteattr(background)} />',
    ]

    for path in paths:
        fill = path.fill if path.fill is not None else foreground
        lines.append(f"  <path d={quoteattr(path.data)} fill={quoteattr(fill)} />")

    lines.append("</svg>")
    return "\n".join(lines)
