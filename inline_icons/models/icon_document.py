"""Parsed icon document model."""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict

from inline_icons.errors import MissingViewbox

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


class ViewBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    def __str__(self) -> str:
        return " ".join(_fmt(v) for v in (self.x, self.y, self.width, self.height))

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


class PathRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: str
    fill: str | None = None


class IconDocument(BaseModel):
    """Represents a parsed SVG icon: root viewBox plus its paths in document order."""

    model_config = ConfigDict(frozen=True)

    viewbox_raw: str | None = None
    paths: tuple[PathRecord, ...] = ()

    def viewbox(self) -> ViewBox:
        """Return the validated viewBox, raising MissingViewbox if absent or not four numbers."""
        if self.viewbox_raw is None:
            raise MissingViewbox(None)
        parts = [p for p in _VIEWBOX_SPLIT_RE.split(self.viewbox_raw.strip()) if p]
        if len(parts) != 4:
            raise MissingViewbox(self.viewbox_raw)
        try:
            x, y, w, h = (float(p) for p in parts)
        except ValueError:
            raise MissingViewbox(self.viewbox_raw) from None
        if not all(math.isfinite(v) for v in (x, y, w, h)):
            raise MissingViewbox(self.viewbox_raw)
        return ViewBox(x=x, y=y, width=w, height=h)


def _fmt(value: float) -> str:
    """Format a coordinate without a trailing .0 for whole numbers."""
    if value == int(value):
        return str(int(value))
    return repr(value)
