"""System-level routes such as health checks."""

from __future__ import annotations

from fastapi import APIRouter

from src.config import settings
from src.services.clients.decoder_client import DecoderDependency

router = APIRouter(tags=["system"])


@router.get("/")
async def read_root() -> dict[str, str]:
    """Hello World endpoint used by smoke tests."""

    return {"message": "Hello World"}


@router.get("/health")
async def health_check(decoder: DecoderDependency) -> dict[str, str]:
    """Health check reporting whether text generation is available."""

    return {
        "status": "healthy",
        "decoder": "configured" if decoder is not None else "disabled",
        "environment": settings.ENVIRONMENT,
    }
