"""Generated copy for product descriptions and inventory analysis."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from src.models.product import Product
from src.services.clients.decoder_client import DecoderClient

logger = logging.getLogger(__name__)

DESCRIPTION_FALLBACK = "Could not generate description."
DESCRIPTION_ERROR = "Error generating description. Please try again."
INSIGHTS_FALLBACK = "No insights available."
INSIGHTS_ERROR = "Unable to analyze inventory at this time."

INSIGHTS_SYSTEM_PROMPT = "You are an expert inventory analyst for a retail business."


def build_description_prompt(name: str, category: str, price: Decimal) -> str:
    return (
        "Write a compelling, SEO-friendly e-commerce product description for a "
        f'product named "{name}" in the category "{category}" priced at ${price}. '
        "Keep it under 50 words."
    )


def summarize_inventory(products: Iterable[Product]) -> str:
    """One line per product with its stock and price, to keep prompts short."""
    return "\n".join(
        f"{product.name} (Stock: {product.stock_level}, Price: ${product.price})"
        for product in products
    )


async def generate_product_description(
    decoder: DecoderClient,
    name: str,
    category: str,
    price: Decimal,
) -> str:
    prompt = build_description_prompt(name, category, price)
    try:
        text = await decoder.decode(prompt)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("Decoder error while generating description: %s", exc)
        return DESCRIPTION_ERROR
    return text.strip() or DESCRIPTION_FALLBACK


async def analyze_inventory_insights(
    decoder: DecoderClient,
    products: Iterable[Product],
) -> str:
    """Ask the decoder for three restocking or sales insights."""

    prompt = (
        "Analyze the following inventory list and provide 3 strategic insights or "
        "actions regarding restocking, potential sales, or inventory balance. "
        "Keep it brief and professional.\n\n"
        f"{summarize_inventory(products)}"
    )
    try:
        text = await decoder.decode(prompt, system=INSIGHTS_SYSTEM_PROMPT)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("Decoder error while analyzing inventory: %s", exc)
        return INSIGHTS_ERROR
    return text.strip() or INSIGHTS_FALLBACK
