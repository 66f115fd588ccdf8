"""Authoring helpers applied to products before they are translated."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from decimal import Decimal

from src.adapters.identifiers import IdentifierGenerator
from src.errors import UnknownTermError
from src.models.product import (
    Attribute,
    Product,
    ProductVariation,
    StockStatus,
    VariationAttribute,
)

logger = logging.getLogger(__name__)


def default_variation_sku(parent_sku: str, variation_name: str) -> str:
    """Parent SKU suffixed with the variation name, whitespace removed."""
    suffix = re.sub(r"\s+", "", variation_name)
    return f"{parent_sku}-{suffix}"


def recompute_stock_level(product: Product) -> Product:
    """Return the product with its total stock recomputed from its variations."""

    if not product.has_variations:
        return product
    total = sum(variation.stock_level for variation in product.variations)
    return product.model_copy(update={"stock_level": total})


def price_range(product: Product) -> tuple[Decimal, Decimal]:
    """Lowest and highest selling price, as shown in the inventory list."""

    if not product.has_variations or not product.variations:
        return product.price, product.price
    prices = [variation.price for variation in product.variations]
    return min(prices), max(prices)


def stock_status(stock_level: int, low_stock_threshold: int = 10) -> StockStatus:
    if stock_level <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock_level < low_stock_threshold:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def generate_variations(
    product: Product,
    attribute: Attribute,
    terms: Iterable[str],
    *,
    price: Decimal,
    stock_level: int,
    id_generator: IdentifierGenerator,
) -> list[ProductVariation]:
    """Create one single-axis variation per selected attribute term.

    Raises:
        UnknownTermError: If a selected term is not defined on the attribute.
    """
    selected = list(terms)
    unknown = [term for term in selected if term not in attribute.terms]
    if unknown:
        raise UnknownTermError(attribute.name, unknown)

    variations = [
        ProductVariation(
            id=id_generator.next(),
            name=term,
            sku=f"{product.sku}-{term.upper()}",
            price=price,
            stock_level=stock_level,
            attributes=[VariationAttribute(name=attribute.name, option=term)],
        )
        for term in selected
    ]
    logger.info(
        "Generated %d variations for product %s from attribute %s",
        len(variations),
        product.id,
        attribute.name,
    )
    return variations


def prepare_for_sync(product: Product) -> Product:
    """Fill missing variation SKUs and recompute derived stock."""

    if product.has_variations:
        variations = [
            variation
            if variation.sku
            else variation.model_copy(
                update={"sku": default_variation_sku(product.sku, variation.name)}
            )
            for variation in product.variations
        ]
        product = product.model_copy(update={"variations": variations})
    return recompute_stock_level(product)
