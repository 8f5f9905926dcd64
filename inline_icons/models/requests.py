"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CollectionRequest(BaseModel):
    template: str = Field(..., description="URL template with one {name} placeholder")
