"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geocoin.api.dependencies import set_session
from geocoin.api.routes import api_router
from geocoin.config import GameConfig
from geocoin.engine.session import GameSession
from geocoin.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        session = GameSession(_config)
        set_session(session)
        snap = session.snapshot()
        logger.info("API server started at cell %s (%d caches nearby).", snap.center.key, len(snap.caches))
        yield
        set_session(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Geocoin",
        description=(
            "Location-based coin collection on a procedural, persistent cache grid.\n\n"
            "## API Groups\n\n"
            "- **State**: Player position, nearby caches, inventory, event feed\n"
            "- **Transfer**: Moving coins between the player and a nearby cache\n"
            "- **Control**: Movement, position tracking, reset\n"
            "- **Config**: Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Observable game state polled by the map client."},
            {"name": "Transfer", "description": "Collect and deposit coins at a live cache. Unknown coins are no-ops."},
            {"name": "Control", "description": "Direction steps, position-feed samples, tracking start/stop, and full reset."},
            {"name": "Config", "description": "Read-only world generation parameters (tile size, neighborhood, spawn probability)."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
