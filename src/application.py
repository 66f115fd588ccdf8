"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import include_api_routes
from src.config import Settings, settings
from src.services.clients.decoder_client import DecoderClient, build_decoder_client

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    decoder: DecoderClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The decoder is built once here and shared through ``app.state`` so request
    handlers receive it explicitly instead of reading configuration.
    """

    app_settings = app_settings or settings
    app = FastAPI(
        title="Catalog Sync",
        description="Translate one product catalog into WooCommerce and Square payloads",
        version="1.0.0",
    )
    app.state.decoder = decoder or build_decoder_client(app_settings)
    if app.state.decoder is None:
        logger.info("No decoder configured; AI routes will respond with 503")

    _configure_cors(app, app_settings)
    include_api_routes(app)

    return app


def _configure_cors(app: FastAPI, app_settings: Settings) -> None:
    """Allow broad access in non-production environments."""

    if app_settings.is_production:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
