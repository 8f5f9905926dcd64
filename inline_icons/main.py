"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from inline_icons import __version__
from inline_icons.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="inline-icons",
        description="Remote SVG icon collections, cached and rendered at glyph size",
        version=__version__,
    )

    from inline_icons.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
