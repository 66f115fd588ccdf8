"""Platform adapters turning canonical products into storefront payloads."""

from __future__ import annotations

from typing import Any

from src.adapters.identifiers import IdentifierGenerator
from src.adapters.square import translate_to_square
from src.adapters.woocommerce import translate_to_woocommerce
from src.models.product import Platform, Product

__all__ = ["translate_for_platforms", "translate_to_square", "translate_to_woocommerce"]


def translate_for_platforms(
    product: Product,
    id_generator: IdentifierGenerator | None = None,
    *,
    currency: str = "USD",
) -> dict[str, dict[str, Any]]:
    """Return JSON-ready payloads for each platform the product is listed on."""

    payloads: dict[str, dict[str, Any]] = {}
    if product.platforms in (Platform.WOOCOMMERCE, Platform.BOTH):
        payloads["woocommerce"] = translate_to_woocommerce(product).model_dump(
            mode="json", exclude_none=True
        )
    if product.platforms in (Platform.SQUARE, Platform.BOTH):
        payloads["square"] = translate_to_square(
            product, id_generator, currency=currency
        ).model_dump(mode="json", exclude_none=True)
    return payloads
