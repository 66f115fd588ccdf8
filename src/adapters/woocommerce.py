"""Translate canonical products into WooCommerce product payloads.

WooCommerce declares variable-product attributes on the parent and each
variation names its attribute/option pairs directly. Variations are created
through their own endpoint after the parent, so they travel alongside the
parent payload rather than inside it.
"""

from __future__ import annotations

import logging

from src.adapters.formatting import format_decimal, format_price
from src.adapters.grouping import (
    OptionTable,
    emit_per_variation,
    group_variation_attributes,
)
from src.models.product import Product, ProductVariation
from src.models.woocommerce import (
    WooAttribute,
    WooCategory,
    WooCommerceProduct,
    WooDimensions,
    WooVariation,
    WooVariationAttribute,
)

logger = logging.getLogger(__name__)


def translate_to_woocommerce(product: Product) -> WooCommerceProduct:
    """Build the WooCommerce payload for a simple or variable product."""

    common = {
        "name": product.name,
        "description": product.description,
        "sku": product.sku,
        "weight": format_decimal(product.weight),
        "dimensions": _dimensions(product),
        "categories": [WooCategory(name=product.category)],
    }

    if not product.has_variations:
        payload = WooCommerceProduct(
            type="simple",
            regular_price=format_price(product.price),
            manage_stock=True,
            stock_quantity=product.stock_level,
            **common,
        )
        logger.debug("Built WooCommerce simple payload for product %s", product.id)
        return payload

    table = group_variation_attributes(product.variations)
    payload = WooCommerceProduct(
        type="variable",
        attributes=[
            WooAttribute(name=name, options=options) for name, options in table.items()
        ],
        variations=emit_per_variation(product.variations, table, _variation_payload),
        **common,
    )
    logger.debug(
        "Built WooCommerce variable payload for product %s (%d attributes, %d variations)",
        product.id,
        len(table),
        len(product.variations),
    )
    return payload


def _variation_payload(variation: ProductVariation, _table: OptionTable) -> WooVariation:
    # Pairs are copied as authored; WooCommerce matches them by name.
    return WooVariation(
        regular_price=format_price(variation.price),
        sku=variation.sku,
        manage_stock=True,
        stock_quantity=variation.stock_level,
        attributes=[
            WooVariationAttribute(name=attribute.name, option=attribute.option)
            for attribute in variation.attributes
        ],
    )


def _dimensions(product: Product) -> WooDimensions:
    if product.dimensions is None:
        return WooDimensions()
    return WooDimensions(
        length=format_decimal(product.dimensions.length, default="0"),
        width=format_decimal(product.dimensions.width, default="0"),
        height=format_decimal(product.dimensions.height, default="0"),
    )
