"""Tests for the WooCommerce product payload adapter."""

from __future__ import annotations

import pytest

from src.adapters.woocommerce import translate_to_woocommerce
from src.models.product import Product


def _dump(product: Product) -> dict:
    return translate_to_woocommerce(product).model_dump(mode="json", exclude_none=True)


@pytest.mark.unit
def test_simple_product_payload(simple_product):
    payload = _dump(simple_product)

    assert payload["type"] == "simple"
    assert payload["name"] == "Premium Leather Satchel"
    assert payload["sku"] == "LTH-SAT-001"
    assert payload["regular_price"] == "129.99"
    assert payload["manage_stock"] is True
    assert payload["stock_quantity"] == 45
    assert payload["categories"] == [{"name": "Accessories"}]
    assert payload["weight"] == "1.2"
    assert payload["dimensions"] == {"length": "40", "width": "12", "height": "30"}
    assert "attributes" not in payload
    assert "variations" not in payload


@pytest.mark.unit
def test_simple_tshirt_price_and_stock(variable_payload):
    variable_payload.update(hasVariations=False, variations=[], stockLevel=120)
    payload = _dump(Product.model_validate(variable_payload))

    assert payload["type"] == "simple"
    assert payload["regular_price"] == "25.00"
    assert payload["stock_quantity"] == 120
    assert payload["sku"] == "APP-TS-003"


@pytest.mark.unit
def test_missing_weight_and_dimensions_use_empty_defaults(simple_payload):
    simple_payload.pop("weight")
    simple_payload.pop("dimensions")
    payload = _dump(Product.model_validate(simple_payload))

    assert payload["weight"] == ""
    assert payload["dimensions"] == {"length": "0", "width": "0", "height": "0"}


@pytest.mark.unit
def test_variable_product_groups_attribute_options(variable_product):
    payload = _dump(variable_product)

    assert payload["type"] == "variable"
    assert payload["sku"] == "APP-TS-003"
    assert payload["attributes"] == [
        {
            "name": "Size",
            "visible": True,
            "variation": True,
            "options": ["Small", "Medium", "Large"],
        },
        {
            "name": "Color",
            "visible": True,
            "variation": True,
            "options": ["White"],
        },
    ]
    assert "regular_price" not in payload
    assert "stock_quantity" not in payload


@pytest.mark.unit
def test_variable_product_variations_copy_pairs_verbatim(variable_product):
    payload = _dump(variable_product)

    variations = payload["variations"]
    assert [v["sku"] for v in variations] == [
        "APP-TS-003-S-W",
        "APP-TS-003-M-W",
        "APP-TS-003-L-W",
    ]
    assert [v["regular_price"] for v in variations] == ["25.00", "25.00", "27.00"]
    assert [v["stock_quantity"] for v in variations] == [40, 50, 30]
    assert all(v["manage_stock"] is True for v in variations)
    assert variations[2]["attributes"] == [
        {"name": "Size", "option": "Large"},
        {"name": "Color", "option": "White"},
    ]


@pytest.mark.unit
def test_variation_attribute_order_is_kept_even_when_it_differs(variable_payload):
    variable_payload["variations"][1]["attributes"].reverse()
    payload = _dump(Product.model_validate(variable_payload))

    assert [a["name"] for a in payload["attributes"]] == ["Size", "Color"]
    assert payload["variations"][1]["attributes"] == [
        {"name": "Color", "option": "White"},
        {"name": "Size", "option": "Medium"},
    ]


@pytest.mark.unit
def test_translation_is_deterministic(variable_product):
    assert _dump(variable_product) == _dump(variable_product)


@pytest.mark.unit
def test_translation_does_not_mutate_input(variable_product):
    before = variable_product.model_dump()
    translate_to_woocommerce(variable_product)
    assert variable_product.model_dump() == before
