"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StylePair(BaseModel):
    """Foreground/background colors of a named style."""

    foreground: str
    background: str = "none"


class Settings(BaseSettings):
    log_level: str = "info"

    # On-disk URL cache
    cache_dir: Path = Path.home() / ".cache" / "inline-icons"
    fetch_timeout: float | None = None

    # Host glyph cell size in device pixels
    char_width: int = Field(10, gt=0)
    char_height: int = Field(20, gt=0)

    # Ambient colors
    foreground: str = "#000000"
    background: str = "none"

    # User collections, merged over the built-in ones
    collections: dict[str, str] = Field(default_factory=dict)
    # Named themed color pairs
    styles: dict[str, StylePair] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        env_prefix="ICONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
