"""GET/PUT /api/collections: the collection registry."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from inline_icons.dependencies import get_registry
from inline_icons.errors import ConfigurationError
from inline_icons.fetch.registry import CollectionRegistry
from inline_icons.models.requests import CollectionRequest
from inline_icons.models.responses import CollectionsResponse

router = APIRouter(prefix="/collections")


@router.get("", response_model=CollectionsResponse)
async def list_collections(registry: CollectionRegistry = Depends(get_registry)) -> CollectionsResponse:
    return CollectionsResponse(collections=registry.as_dict())


@router.put("/{name}", response_model=CollectionsResponse)
async def put_collection(
    name: str,
    req: CollectionRequest,
    registry: CollectionRegistry = Depends(get_registry),
) -> CollectionsResponse:
    try:
        registry.add(name, req.template)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return CollectionsResponse(collections=registry.as_dict())
