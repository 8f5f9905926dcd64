"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from inline_icons.config import settings
from inline_icons.fetch.cache import UrlCache
from inline_icons.fetch.fetcher import IconFetcher
from inline_icons.fetch.registry import CollectionRegistry
from inline_icons.render.colors import Theme
from inline_icons.render.geometry import GlyphMetrics
from inline_icons.render.renderer import IconRenderer


@lru_cache
def get_registry() -> CollectionRegistry:
    return CollectionRegistry.from_settings(settings)


@lru_cache
def get_fetcher() -> IconFetcher:
    return IconFetcher(
        get_registry(),
        UrlCache(settings.cache_dir),
        timeout=settings.fetch_timeout,
    )


@lru_cache
def get_renderer() -> IconRenderer:
    return IconRenderer(
        get_fetcher(),
        Theme.from_settings(settings),
        GlyphMetrics(settings.char_width, settings.char_height),
    )
