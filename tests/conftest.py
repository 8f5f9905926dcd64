"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from inline_icons.config import StylePair
from inline_icons.fetch.cache import UrlCache
from inline_icons.fetch.fetcher import IconFetcher
from inline_icons.fetch.registry import CollectionRegistry
from inline_icons.render.colors import Theme
from inline_icons.render.geometry import GlyphMetrics
from inline_icons.render.renderer import IconRenderer


# Sample icons

HOME_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z" fill="#ff0000"/>
</svg>'''

# Bootstrap-style icon: paths nested in a group, viewBox 16x16
NESTED_SVG = b'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" fill="currentColor" viewBox="0 0 16 16">
  <g>
    <path d="M2 2h12v12H2z"/>
    <circle cx="8" cy="8" r="3"/>
    <g><path d="M4 4h8v8H4z" fill="white"/></g>
  </g>
  <path fill="none"/>
</svg>'''

# Clip square in <defs> must not be drawn
CLIPPED_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" viewBox="0 0 16 16">
  <defs>
    <clipPath id="clip0"><path d="M0 0h16v16H0z"/></clipPath>
    <symbol id="dot"><path d="M7 7h2v2H7z"/></symbol>
  </defs>
  <mask id="m"><path d="M1 1h14v14H1z" fill="white"/></mask>
  <g clip-path="url(#clip0)">
    <path d="M8 1l2 5h5l-4 3 2 5-5-3-5 3 2-5-4-3h5z"/>
  </g>
  <path d="M0 15h16v1H0z" fill="#00ff00"/>
</svg>'''

NO_VIEWBOX_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="M0 0h24v24H0z"/>
</svg>'''

BAD_VIEWBOX_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 twenty-four 24">
  <path d="M0 0h24v24H0z"/>
</svg>'''

NOT_SVG = b"<html><body>404 Not Found</body></html>"

BROKEN_SVG = b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M0 0"'

TEST_COLLECTIONS = {
    "test": "https://icons.example.com/{name}.svg",
    "other": "https://other.example.com/svg/{name}-24.svg",
}


def make_response(content: bytes, error: Exception | None = None) -> MagicMock:
    response = MagicMock()
    response.content = content
    if error is not None:
        response.raise_for_status.side_effect = error
    return response


@pytest.fixture
def session() -> MagicMock:
    """Fake requests.Session serving HOME_SVG for every URL."""
    sess = MagicMock(spec=requests.Session)
    sess.get.return_value = make_response(HOME_SVG)
    return sess


@pytest.fixture
def cache(tmp_path) -> UrlCache:
    return UrlCache(tmp_path / "cache")


@pytest.fixture
def registry() -> CollectionRegistry:
    return CollectionRegistry(dict(TEST_COLLECTIONS))


@pytest.fixture
def fetcher(registry, cache, session) -> IconFetcher:
    return IconFetcher(registry, cache, session=session)


@pytest.fixture
def theme() -> Theme:
    return Theme(
        {"warning": StylePair(foreground="orange", background="#222")},
        default=StylePair(foreground="#333333"),
    )


@pytest.fixture
def metrics() -> GlyphMetrics:
    return GlyphMetrics(10, 20)


@pytest.fixture
def renderer(fetcher, theme, metrics) -> IconRenderer:
    return IconRenderer(fetcher, theme, metrics)


def _cairo_available() -> bool:
    # cairosvg raises OSError, not ImportError, when the native cairo library is missing
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


CAIRO_AVAILABLE = _cairo_available()
