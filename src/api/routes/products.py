"""Routes translating canonical products into storefront payloads."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status

from src.adapters import (
    translate_for_platforms,
    translate_to_square,
    translate_to_woocommerce,
)
from src.adapters.identifiers import UuidGenerator
from src.config import settings
from src.errors import (
    IncompleteVariationError,
    OptionReferenceError,
    UnknownTermError,
)
from src.models.product import Product
from src.models.sync import (
    ProductSummary,
    TranslateResponse,
    VariationGenerationRequest,
    VariationGenerationResponse,
)
from src.services.catalog import (
    generate_variations,
    prepare_for_sync,
    price_range,
    stock_status,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def _prepare(product: Product) -> Product:
    """Apply authoring defaults and reject variations with missing axes."""

    prepared = prepare_for_sync(product)
    if prepared.has_variations:
        missing = prepared.missing_attribute_axes()
        if missing:
            error = IncompleteVariationError(missing)
            logger.warning("Rejected product %s: %s", product.id, error)
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={"message": str(error), "missing": missing},
            )
    return prepared


@router.post(
    "/translate",
    response_model=TranslateResponse,
    summary="Build payloads for every platform the product is listed on",
)
async def translate_product(payload: Product) -> TranslateResponse:
    """Prepare the product and translate it for its selected platforms."""

    product = _prepare(payload)
    try:
        payloads = translate_for_platforms(
            product, UuidGenerator(), currency=settings.DEFAULT_CURRENCY
        )
    except OptionReferenceError as error:
        logger.error("Option table integrity failure: %s", error)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(error),
        ) from error

    logger.info(
        "Translated product %s for %s",
        product.id,
        ", ".join(payloads) or "no platforms",
        extra={
            "product_id": product.id,
            "variations": len(product.variations),
        },
    )
    return TranslateResponse(
        product_id=product.id,
        stock_level=product.stock_level,
        payloads=payloads,
    )


@router.post("/woocommerce", summary="Build the WooCommerce product payload")
async def woocommerce_payload(payload: Product) -> dict[str, Any]:
    product = _prepare(payload)
    return translate_to_woocommerce(product).model_dump(mode="json", exclude_none=True)


@router.post("/square", summary="Build the Square catalog upsert request")
async def square_payload(payload: Product) -> dict[str, Any]:
    product = _prepare(payload)
    try:
        request = translate_to_square(
            product, UuidGenerator(), currency=settings.DEFAULT_CURRENCY
        )
    except OptionReferenceError as error:
        logger.error("Option table integrity failure: %s", error)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(error),
        ) from error
    return request.model_dump(mode="json", exclude_none=True)


@router.post(
    "/variations/generate",
    response_model=VariationGenerationResponse,
    summary="Generate variations from an attribute's terms",
)
async def generate_product_variations(
    payload: VariationGenerationRequest,
) -> VariationGenerationResponse:
    price = payload.price if payload.price is not None else payload.product.price
    try:
        variations = generate_variations(
            payload.product,
            payload.attribute,
            payload.terms,
            price=price,
            stock_level=payload.stock_level,
            id_generator=UuidGenerator(),
        )
    except UnknownTermError as error:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(error),
        ) from error
    return VariationGenerationResponse(variations=variations)


@router.post(
    "/summary",
    response_model=ProductSummary,
    summary="Derived stock and price figures for a product",
)
async def summarize_product(payload: Product) -> ProductSummary:
    product = prepare_for_sync(payload)
    price_min, price_max = price_range(product)
    return ProductSummary(
        stock_level=product.stock_level,
        stock_status=stock_status(product.stock_level, settings.LOW_STOCK_THRESHOLD),
        price_min=price_min,
        price_max=price_max,
    )
