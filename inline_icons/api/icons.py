"""GET /api/icons/*: rendered and raw icons."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from inline_icons.dependencies import get_fetcher, get_renderer
from inline_icons.errors import (
    FetchFailure,
    IconError,
    MalformedDocument,
    MissingViewbox,
    UnknownCollection,
)
from inline_icons.fetch.fetcher import IconFetcher
from inline_icons.render.colors import parse_color_spec
from inline_icons.render.geometry import GlyphMetrics
from inline_icons.render.renderer import IconRenderer, RenderedIcon

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/icons")


def _status_for(error: IconError) -> int:
    if isinstance(error, UnknownCollection):
        return 404
    if isinstance(error, FetchFailure):
        return 502
    if isinstance(error, (MalformedDocument, MissingViewbox)):
        return 422
    return 500


def _render(
    renderer: IconRenderer,
    collection: str,
    name: str,
    fg: str | None,
    bg: str | None,
    zoom: float | None,
    reload: bool,
    char_width: int | None,
    char_height: int | None,
) -> RenderedIcon:
    metrics = None
    if char_width or char_height:
        metrics = GlyphMetrics(
            char_width or renderer.metrics.width,
            char_height or renderer.metrics.height,
        )
    try:
        return renderer.render(
            collection,
            name,
            fg=parse_color_spec(fg),
            bg=parse_color_spec(bg),
            zoom=zoom,
            metrics=metrics,
            force_reload=reload,
        )
    except IconError as e:
        logger.warning("Cannot render %s/%s: %s", collection, name, e)
        raise HTTPException(status_code=_status_for(e), detail=str(e)) from e


@router.get("/{collection}/{name}.svg")
def icon_svg(
    collection: str,
    name: str,
    fg: str | None = None,
    bg: str | None = None,
    zoom: float | None = None,
    reload: bool = False,
    char_width: int | None = Query(default=None, gt=0),
    char_height: int | None = Query(default=None, gt=0),
    renderer: IconRenderer = Depends(get_renderer),
) -> Response:
    icon = _render(renderer, collection, name, fg, bg, zoom, reload, char_width, char_height)
    return Response(content=icon.svg, media_type="image/svg+xml")


@router.get("/{collection}/{name}.png")
def icon_png(
    collection: str,
    name: str,
    fg: str | None = None,
    bg: str | None = None,
    zoom: float | None = None,
    reload: bool = False,
    char_width: int | None = Query(default=None, gt=0),
    char_height: int | None = Query(default=None, gt=0),
    renderer: IconRenderer = Depends(get_renderer),
) -> Response:
    icon = _render(renderer, collection, name, fg, bg, zoom, reload, char_width, char_height)
    return Response(content=icon.to_png(), media_type="image/png")


@router.get("/{collection}/{name}/raw")
def icon_raw(
    collection: str,
    name: str,
    reload: bool = False,
    fetcher: IconFetcher = Depends(get_fetcher),
) -> Response:
    try:
        data = fetcher.get_bytes(collection, name, force_reload=reload)
    except IconError as e:
        raise HTTPException(status_code=_status_for(e), detail=str(e)) from e
    return Response(content=data, media_type="image/svg+xml")
