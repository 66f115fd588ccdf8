"""Pytest configuration and fixtures for the catalog sync service."""

import asyncio
import copy

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.adapters.identifiers import SequenceGenerator
from src.models.product import Product
from src.services.clients.decoder_client import get_decoder_client

SIMPLE_PRODUCT = {
    "id": "1",
    "name": "Premium Leather Satchel",
    "sku": "LTH-SAT-001",
    "price": 129.99,
    "stockLevel": 45,
    "category": "Accessories",
    "description": "Handcrafted genuine leather satchel with brass fittings.",
    "platforms": "Both",
    "hasVariations": False,
    "variations": [],
    "weight": 1.2,
    "dimensions": {"length": 40, "width": 12, "height": 30},
}

VARIABLE_PRODUCT = {
    "id": "3",
    "name": "Organic Cotton T-Shirt",
    "sku": "APP-TS-003",
    "price": 25.00,
    "stockLevel": 0,
    "category": "Apparel",
    "description": "Sustainably sourced 100% cotton tee.",
    "platforms": "Both",
    "hasVariations": True,
    "variations": [
        {
            "id": "3-1",
            "name": "Small - White",
            "sku": "APP-TS-003-S-W",
            "price": 25.00,
            "stockLevel": 40,
            "attributes": [
                {"name": "Size", "option": "Small"},
                {"name": "Color", "option": "White"},
            ],
        },
        {
            "id": "3-2",
            "name": "Medium - White",
            "sku": "APP-TS-003-M-W",
            "price": 25.00,
            "stockLevel": 50,
            "attributes": [
                {"name": "Size", "option": "Medium"},
                {"name": "Color", "option": "White"},
            ],
        },
        {
            "id": "3-3",
            "name": "Large - White",
            "sku": "APP-TS-003-L-W",
            "price": 27.00,
            "stockLevel": 30,
            "attributes": [
                {"name": "Size", "option": "Large"},
                {"name": "Color", "option": "White"},
            ],
        },
    ],
}


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest.fixture()
def simple_payload():
    return copy.deepcopy(SIMPLE_PRODUCT)


@pytest.fixture()
def variable_payload():
    return copy.deepcopy(VARIABLE_PRODUCT)


@pytest.fixture()
def simple_product(simple_payload):
    return Product.model_validate(simple_payload)


@pytest.fixture()
def variable_product(variable_payload):
    return Product.model_validate(variable_payload)


@pytest.fixture()
def id_generator():
    """Deterministic identifiers so payloads can be compared exactly."""
    return SequenceGenerator("key")


@pytest.fixture(autouse=True)
def decoder_stub():
    """Provide a stub decoder so tests do not call external services."""
    from src.main import app

    class _StubDecoder:
        def __init__(self):
            self.prompts = []

        async def decode(self, prompt: str, *, system: str | None = None) -> str:
            await asyncio.sleep(0)
            self.prompts.append((prompt, system))
            return f"decoded::{prompt}"

    stub = _StubDecoder()
    app.dependency_overrides[get_decoder_client] = lambda: stub
    yield stub
    app.dependency_overrides.pop(get_decoder_client, None)


@pytest_asyncio.fixture()
async def client():
    """Return an HTTPX async client pointing at the FastAPI app."""
    from src.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
