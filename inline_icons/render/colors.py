"""Color resolution: direct values, named colors and themed style references."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Union

from PIL import ImageColor

from inline_icons.config import Settings, StylePair

logger = logging.getLogger(__name__)

TRANSPARENT = "none"
DEFAULT_STYLE = "default"
STYLE_PREFIX = "style:"

Role = Literal["foreground", "background"]


@dataclass(frozen=True)
class StyleRef:
    """Reference to the foreground or background of a named style."""

    style: str


ColorSpec = Union[str, StyleRef, None]


class Theme:
    """Named style → (foreground, background). The default style always exists."""

    def __init__(self, styles: dict[str, StylePair] | None = None, default: StylePair | None = None) -> None:
        self.styles: dict[str, StylePair] = dict(styles or {})
        if default is not None:
            self.styles[DEFAULT_STYLE] = default
        self.styles.setdefault(DEFAULT_STYLE, StylePair(foreground="#000000"))

    @classmethod
    def from_settings(cls, settings: Settings) -> Theme:
        return cls(
            settings.styles,
            default=StylePair(foreground=settings.foreground, background=settings.background),
        )

    @property
    def default(self) -> StylePair:
        return self.styles[DEFAULT_STYLE]

    def style(self, name: str) -> StylePair:
        pair = self.styles.get(name)
        if pair is None:
            logger.debug("Unknown style %r, using default", name)
            return self.default
        return pair


def parse_color_spec(value: str | None) -> ColorSpec:
    """Turn "style:NAME" into a StyleRef; anything else is a direct color."""
    if value and value.startswith(STYLE_PREFIX):
        return StyleRef(value[len(STYLE_PREFIX):])
    return value or None


def normalize_color(value: str) -> str:
    """Normalize a color to #rrggbb (#rrggbbaa with alpha); unknown values pass through."""
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError:
        return value
    hex_value = "#" + "".join(f"{c:02x}" for c in rgb[:3])
    if len(rgb) == 4 and rgb[3] != 255:
        hex_value += f"{rgb[3]:02x}"
    return hex_value


def resolve_color(value: ColorSpec, role: Role, theme: Theme) -> str:
    if value is None:
        if role == "foreground":
            return normalize_color(theme.default.foreground)
        return TRANSPARENT
    if isinstance(value, StyleRef):
        pair = theme.style(value.style)
        value = pair.foreground if role == "foreground" else pair.background
    return normalize_color(value)
