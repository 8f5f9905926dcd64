"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    collections: int = 0


class CollectionsResponse(BaseModel):
    collections: dict[str, str] = Field(default_factory=dict)
