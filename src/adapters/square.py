"""Translate canonical products into Square catalog upsert requests.

Square models every item as a list of variations, even simple ones. Variable
items promote their attributes to ``ITEM_OPTION`` objects with client-assigned
``#`` references, and each variation selects option values by reference.
Prices are integer minor units.
"""

from __future__ import annotations

import logging

from src.adapters.formatting import to_minor_units
from src.adapters.grouping import (
    OptionTable,
    emit_per_variation,
    group_variation_attributes,
)
from src.adapters.identifiers import IdentifierGenerator, UuidGenerator
from src.errors import OptionReferenceError
from src.models.product import Product, ProductVariation
from src.models.square import (
    CatalogItem,
    ItemData,
    ItemOption,
    ItemOptionData,
    ItemOptionValue,
    ItemOptionValueData,
    ItemOptionValueReference,
    ItemVariation,
    ItemVariationData,
    Money,
    SquareUpsertRequest,
)

logger = logging.getLogger(__name__)

REGULAR_VARIATION_ID = "#regular"
REGULAR_VARIATION_NAME = "Regular"


def temporary_id(value: str) -> str:
    """Mark an id as a client reference the platform will replace."""
    return f"#{value}"


def option_id(name_index: int) -> str:
    return f"#opt_{name_index}"


def option_value_id(name_index: int, option_index: int) -> str:
    return f"{option_id(name_index)}_val_{option_index}"


def translate_to_square(
    product: Product,
    id_generator: IdentifierGenerator | None = None,
    *,
    currency: str = "USD",
) -> SquareUpsertRequest:
    """Build the Square upsert request for a simple or variable product."""

    generator = id_generator or UuidGenerator()
    item_id = temporary_id(product.id)

    if product.has_variations:
        table = group_variation_attributes(product.variations)
        item_options = _item_options(table)

        def emit(variation: ProductVariation, table: OptionTable) -> ItemVariation:
            return _variation(variation, table, item_id, currency)

        variations = emit_per_variation(product.variations, table, emit)
    else:
        item_options = None
        variations = [
            ItemVariation(
                id=REGULAR_VARIATION_ID,
                item_variation_data=ItemVariationData(
                    item_id=item_id,
                    name=REGULAR_VARIATION_NAME,
                    sku=product.sku,
                    price_money=Money(
                        amount=to_minor_units(product.price), currency=currency
                    ),
                ),
            )
        ]

    request = SquareUpsertRequest(
        idempotency_key=generator.next(),
        object=CatalogItem(
            id=item_id,
            item_data=ItemData(
                name=product.name,
                description=product.description,
                variations=variations,
                item_options=item_options,
            ),
        ),
    )
    logger.debug(
        "Built Square payload for product %s (%d variations, %d options)",
        product.id,
        len(variations),
        len(item_options or []),
    )
    return request


def _item_options(table: OptionTable) -> list[ItemOption]:
    return [
        ItemOption(
            id=option_id(name_index),
            item_option_data=ItemOptionData(
                name=name,
                values=[
                    ItemOptionValue(
                        id=option_value_id(name_index, option_index),
                        item_option_value_data=ItemOptionValueData(name=option),
                    )
                    for option_index, option in enumerate(options)
                ],
            ),
        )
        for name_index, (name, options) in enumerate(table.items())
    ]


def resolve_option_values(
    variation: ProductVariation,
    table: OptionTable,
) -> list[ItemOptionValueReference]:
    """Map a variation's name/option pairs to option and value references.

    Raises:
        OptionReferenceError: If a pair is absent from ``table``.
    """
    references = []
    for attribute in variation.attributes:
        name_index = table.name_index(attribute.name)
        option_index = table.option_index(attribute.name, attribute.option)
        if name_index is None or option_index is None:
            raise OptionReferenceError(variation.id, attribute.name, attribute.option)
        references.append(
            ItemOptionValueReference(
                item_option_id=option_id(name_index),
                item_option_value_id=option_value_id(name_index, option_index),
            )
        )
    return references


def _variation(
    variation: ProductVariation,
    table: OptionTable,
    item_id: str,
    currency: str,
) -> ItemVariation:
    return ItemVariation(
        id=temporary_id(variation.id),
        item_variation_data=ItemVariationData(
            item_id=item_id,
            name=variation.name,
            sku=variation.sku,
            price_money=Money(amount=to_minor_units(variation.price), currency=currency),
            item_option_values=resolve_option_values(variation, table),
        ),
    )
