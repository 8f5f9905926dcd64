"""SVG → PNG rasterization via cairosvg."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def render_svg_to_png(svg: str, width: int, height: int) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise
