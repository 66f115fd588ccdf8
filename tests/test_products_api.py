"""Tests for the product translation endpoints."""

import pytest


@pytest.mark.asyncio
async def test_root_and_health(client):
    root = await client.get("/")
    health = await client.get("/health")

    assert root.json() == {"message": "Hello World"}
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert health.json()["decoder"] == "configured"


@pytest.mark.asyncio
async def test_translate_returns_both_payloads(client, variable_payload):
    response = await client.post("/products/translate", json=variable_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["product_id"] == "3"
    assert data["stock_level"] == 120
    assert set(data["payloads"]) == {"woocommerce", "square"}
    assert data["payloads"]["woocommerce"]["type"] == "variable"
    square_item = data["payloads"]["square"]["object"]
    assert square_item["id"] == "#3"
    assert len(square_item["item_data"]["item_options"]) == 2


@pytest.mark.asyncio
async def test_translate_respects_platform_listing(client, simple_payload):
    simple_payload["platforms"] = "Square"

    response = await client.post("/products/translate", json=simple_payload)

    assert response.status_code == 200
    assert list(response.json()["payloads"]) == ["square"]


@pytest.mark.asyncio
async def test_translate_rejects_incomplete_attribute_axes(client, variable_payload):
    variable_payload["variations"][2]["attributes"] = [
        {"name": "Size", "option": "Large"}
    ]

    response = await client.post("/products/translate", json=variable_payload)

    assert response.status_code == 422
    assert response.json()["detail"]["missing"] == {"3-3": ["Color"]}


@pytest.mark.asyncio
async def test_translate_rejects_malformed_product(client, simple_payload):
    simple_payload.pop("sku")

    response = await client.post("/products/translate", json=simple_payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_single_platform_endpoints_ignore_listing(client, simple_payload):
    simple_payload["platforms"] = "WooCommerce"

    square = await client.post("/products/square", json=simple_payload)
    woo = await client.post("/products/woocommerce", json=simple_payload)

    assert square.status_code == 200
    variation = square.json()["object"]["item_data"]["variations"][0]
    assert variation["item_variation_data"]["price_money"]["amount"] == 12999
    assert woo.status_code == 200
    assert woo.json()["regular_price"] == "129.99"


@pytest.mark.asyncio
async def test_square_endpoint_generates_fresh_idempotency_keys(client, simple_payload):
    first = await client.post("/products/square", json=simple_payload)
    second = await client.post("/products/square", json=simple_payload)

    assert first.json()["idempotency_key"] != second.json()["idempotency_key"]


@pytest.mark.asyncio
async def test_woocommerce_endpoint_fills_default_variation_sku(client, variable_payload):
    variable_payload["variations"][0]["sku"] = ""

    response = await client.post("/products/woocommerce", json=variable_payload)

    assert response.status_code == 200
    skus = [v["sku"] for v in response.json()["variations"]]
    assert skus[0] == "APP-TS-003-Small-White"


@pytest.mark.asyncio
async def test_generate_variations(client, simple_payload):
    payload = {
        "product": simple_payload,
        "attribute": {"id": "a-1", "name": "Color", "terms": ["Tan", "Black"]},
        "terms": ["Black"],
        "stockLevel": 7,
    }

    response = await client.post("/products/variations/generate", json=payload)

    assert response.status_code == 200
    variations = response.json()["variations"]
    assert len(variations) == 1
    assert variations[0]["sku"] == "LTH-SAT-001-BLACK"
    assert variations[0]["stockLevel"] == 7
    assert variations[0]["attributes"] == [{"name": "Color", "option": "Black"}]


@pytest.mark.asyncio
async def test_generate_variations_rejects_unknown_term(client, simple_payload):
    payload = {
        "product": simple_payload,
        "attribute": {"id": "a-1", "name": "Color", "terms": ["Tan"]},
        "terms": ["Purple"],
    }

    response = await client.post("/products/variations/generate", json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_summary_reports_range_and_status(client, variable_payload):
    response = await client.post("/products/summary", json=variable_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["stock_level"] == 120
    assert data["stock_status"] == "In Stock"
    assert float(data["price_min"]) == 25.0
    assert float(data["price_max"]) == 27.0
