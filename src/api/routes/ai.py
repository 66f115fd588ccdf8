"""Routes generating product copy and inventory insights with the decoder."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from src.models.sync import (
    DescriptionRequest,
    DescriptionResponse,
    InsightsRequest,
    InsightsResponse,
)
from src.services.clients.decoder_client import DecoderClient, DecoderDependency
from src.services.insights import (
    analyze_inventory_insights,
    generate_product_description,
)

router = APIRouter(prefix="/ai", tags=["ai"])
logger = logging.getLogger(__name__)


def _require_decoder(decoder: DecoderClient | None) -> DecoderClient:
    if decoder is None:
        logger.warning("Generation requested but decoder is not configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Decoder is not configured in this environment",
        )
    return decoder


@router.post(
    "/description",
    response_model=DescriptionResponse,
    summary="Generate a product description",
)
async def describe_product(
    payload: DescriptionRequest,
    decoder: DecoderDependency,
) -> DescriptionResponse:
    description = await generate_product_description(
        _require_decoder(decoder),
        payload.name,
        payload.category,
        payload.price,
    )
    logger.info(
        "Product description generated",
        extra={"product_name": payload.name, "description_length": len(description)},
    )
    return DescriptionResponse(description=description)


@router.post(
    "/insights",
    response_model=InsightsResponse,
    summary="Analyze inventory levels and suggest actions",
)
async def inventory_insights(
    payload: InsightsRequest,
    decoder: DecoderDependency,
) -> InsightsResponse:
    insights = await analyze_inventory_insights(
        _require_decoder(decoder), payload.products
    )
    logger.info(
        "Inventory insights generated",
        extra={"product_count": len(payload.products)},
    )
    return InsightsResponse(insights=insights)
