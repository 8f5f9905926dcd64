"""Icon renderer — fetched icon → recolored SVG sized to a 2×1 glyph footprint."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass

from inline_icons.fetch.fetcher import IconFetcher
from inline_icons.models.icon_document import ViewBox
from inline_icons.render.colors import ColorSpec, Theme, resolve_color
from inline_icons.render.geometry import (
    GlyphMetrics,
    fit_viewbox,
    footprint,
    scaled_size,
)
from inline_icons.render.rasterizer import render_svg_to_png
from inline_icons.svg.serializer import serialize_icon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedIcon:
    """A ready-to-display icon image."""

    svg: str
    width: int
    height: int
    viewbox: ViewBox
    foreground: str
    background: str
    # Vertical alignment when composed inline with text
    ascent: str = "center"

    def to_png(self) -> bytes:
        return render_svg_to_png(self.svg, self.width, self.height)

    def data_url(self) -> str:
        encoded = base64.b64encode(self.svg.encode("utf-8")).decode("ascii")
        return f"data:image/svg+xml;base64,{encoded}"


class IconRenderer:
    """Renders icons of any registered collection."""

    def __init__(self, fetcher: IconFetcher, theme: Theme, metrics: GlyphMetrics) -> None:
        self.fetcher = fetcher
        self.theme = theme
        self.metrics = metrics

    def render(
        self,
        collection: str,
        name: str,
        fg: ColorSpec = None,
        bg: ColorSpec = None,
        zoom: float | None = None,
        metrics: GlyphMetrics | None = None,
        force_reload: bool = False,
    ) -> RenderedIcon:
        """Fetch an icon and render it at the glyph footprint.

        Args:
            collection: Registered collection name
            name: Icon name within the collection
            fg: Color for paths without their own fill (color value or StyleRef)
            bg: Background color (color value or StyleRef); transparent when unset
            zoom: Integer zoom factor; truncated, never below 1
            metrics: Host glyph cell size; defaults to the renderer's metrics
            force_reload: Fetch even if the icon is cached

        Returns:
            RenderedIcon sized to the zoomed footprint
        """
        document = self.fetcher.get(collection, name, force_reload=force_reload)
        viewbox = document.viewbox()

        metrics = metrics or self.metrics
        target_w, target_h = footprint(metrics)
        adjusted = fit_viewbox(viewbox, target_w, target_h)
        width, height = scaled_size(metrics, zoom)

        foreground = resolve_color(fg, "foreground", self.theme)
        background = resolve_color(bg, "background", self.theme)

        svg = serialize_icon(adjusted, width, height, background, document.paths, foreground)
        logger.debug(
            "Rendered %s/%s: %dx%d px, viewBox %s → %s",
            collection, name, width, height, viewbox, adjusted,
        )
        return RenderedIcon(
            svg=svg,
            width=width,
            height=height,
            viewbox=adjusted,
            foreground=foreground,
            background=background,
        )
