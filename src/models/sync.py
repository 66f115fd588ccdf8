"""Schemas used by the product sync and copy-generation API."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from src.models.product import (
    Attribute,
    CatalogModel,
    Product,
    ProductVariation,
    StockStatus,
)


class TranslateResponse(BaseModel):
    """Payloads for every platform the product is listed on."""

    product_id: str
    stock_level: int = Field(..., ge=0, description="Recomputed total stock")
    payloads: dict[str, dict[str, Any]] = Field(default_factory=dict)


class VariationGenerationRequest(CatalogModel):
    """Generate single-axis variations from an attribute's selected terms."""

    product: Product
    attribute: Attribute
    terms: list[str] = Field(..., min_length=1)
    price: Decimal | None = Field(
        None,
        description="Price for every generated variation; defaults to the product price",
    )
    stock_level: int = Field(10, ge=0, alias="stockLevel")


class VariationGenerationResponse(BaseModel):
    variations: list[ProductVariation]


class ProductSummary(BaseModel):
    """Derived figures shown in the inventory list."""

    stock_level: int
    stock_status: StockStatus
    price_min: Decimal
    price_max: Decimal


class DescriptionRequest(BaseModel):
    name: str = Field(..., min_length=1)
    category: str = ""
    price: Decimal = Field(Decimal("0"), ge=0)


class DescriptionResponse(BaseModel):
    description: str


class InsightsRequest(BaseModel):
    products: list[Product] = Field(..., min_length=1)


class InsightsResponse(BaseModel):
    insights: str
