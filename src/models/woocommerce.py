"""Payload schemas for the WooCommerce products API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class WooCategory(BaseModel):
    name: str


class WooDimensions(BaseModel):
    """Dimensions as decimal strings, the way the REST API expects them."""

    length: str = "0"
    width: str = "0"
    height: str = "0"


class WooAttribute(BaseModel):
    """Attribute declared on a variable parent product."""

    name: str
    visible: bool = True
    variation: bool = True
    options: list[str] = Field(default_factory=list)


class WooVariationAttribute(BaseModel):
    name: str
    option: str


class WooVariation(BaseModel):
    """Variation created under a variable parent after the parent exists."""

    regular_price: str
    sku: str
    manage_stock: bool = True
    stock_quantity: int
    attributes: list[WooVariationAttribute] = Field(default_factory=list)


class WooCommerceProduct(BaseModel):
    """Parent product payload; simple and variable products share this shape."""

    name: str
    type: Literal["simple", "variable"]
    description: str
    sku: str
    weight: str = ""
    dimensions: WooDimensions = Field(default_factory=WooDimensions)
    categories: list[WooCategory] = Field(default_factory=list)

    # Simple products
    regular_price: str | None = None
    manage_stock: bool | None = None
    stock_quantity: int | None = None

    # Variable products
    attributes: list[WooAttribute] | None = None
    variations: list[WooVariation] | None = Field(
        None,
        description="Variations to create sequentially once the parent is stored",
    )
