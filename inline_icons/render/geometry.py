"""Footprint and viewbox arithmetic.

Every icon is normalized to a 2×1 glyph-cell footprint; zoom then scales the
pixel size, never the viewbox.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from inline_icons.models.icon_document import ViewBox

# Footprint in glyph cells (width, height)
FOOTPRINT_CELLS = (2, 1)


@dataclass(frozen=True)
class GlyphMetrics:
    """Pixel size of one character cell in the host."""

    width: int
    height: int


def footprint(metrics: GlyphMetrics) -> tuple[int, int]:
    return (FOOTPRINT_CELLS[0] * metrics.width, FOOTPRINT_CELLS[1] * metrics.height)


def normalize_zoom(zoom: float | None) -> int:
    """Truncate zoom to an integer, never below 1."""
    return max(1, math.trunc(zoom or 1))


def scaled_size(metrics: GlyphMetrics, zoom: float | None = None) -> tuple[int, int]:
    z = normalize_zoom(zoom)
    w, h = footprint(metrics)
    return (w * z, h * z)


def fit_viewbox(viewbox: ViewBox, target_width: float, target_height: float) -> ViewBox:
    """Grow or shrink the viewbox vertically around its center to match the target aspect.

    The horizontal extent is the reference: ratio = width / target_width.
    """
    ratio = viewbox.width / target_width
    delta = math.ceil((viewbox.height - target_height * ratio) / 2)
    return ViewBox(
        x=viewbox.x,
        y=viewbox.y - delta,
        width=viewbox.width,
        height=viewbox.height + 2 * delta,
    )
