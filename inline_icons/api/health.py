"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from inline_icons import __version__
from inline_icons.dependencies import get_registry
from inline_icons.fetch.registry import CollectionRegistry
from inline_icons.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(registry: CollectionRegistry = Depends(get_registry)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, collections=len(registry))
