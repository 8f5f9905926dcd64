"""Remote SVG icons, cached on disk and rendered at a 2×1 glyph footprint."""

__version__ = "0.1.0"
