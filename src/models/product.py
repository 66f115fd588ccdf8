"""Canonical product models shared by the catalog helpers and the adapters."""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


class Platform(str, Enum):
    """Which storefront(s) a product is listed on."""

    WOOCOMMERCE = "WooCommerce"
    SQUARE = "Square"
    BOTH = "Both"


def _float_as_text(value: object) -> object:
    # Decimal(str(x)) keeps 24.99 as written rather than its binary expansion
    return str(value) if isinstance(value, float) else value


DecimalValue = Annotated[Decimal, BeforeValidator(_float_as_text)]


class StockStatus(str, Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


class CatalogModel(BaseModel):
    """Base model accepting both snake_case names and the UI's camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True)


class VariationAttribute(CatalogModel):
    """One axis value of a variation, e.g. Size=Small."""

    name: str
    option: str


class Dimensions(CatalogModel):
    """Package dimensions in centimetres."""

    length: DecimalValue = Decimal("0")
    width: DecimalValue = Decimal("0")
    height: DecimalValue = Decimal("0")


class ProductVariation(CatalogModel):
    """A child variation of a variable product with its own price and stock."""

    id: str = Field(..., description="Identifier unique within the parent product")
    name: str = Field(..., description='Human label such as "Small - Blue"')
    sku: str = Field(
        "",
        description="Variation SKU; filled from the parent SKU when left empty",
    )
    price: DecimalValue
    stock_level: int = Field(0, ge=0, alias="stockLevel")
    attributes: list[VariationAttribute] = Field(default_factory=list)


class Product(CatalogModel):
    """Platform-agnostic product record edited by the merchant."""

    id: str = Field(..., description="Identifier unique within the catalog")
    name: str
    sku: str = Field(..., description="Base (parent) SKU")
    price: DecimalValue = Field(..., description="Simple price, or starting price")
    stock_level: int = Field(
        0,
        ge=0,
        alias="stockLevel",
        description="Total stock; the sum of variation stock for variable products",
    )
    category: str = ""
    description: str = ""
    platforms: Platform = Platform.BOTH
    last_synced: datetime | None = Field(None, alias="lastSynced")
    image: str | None = None
    has_variations: bool = Field(False, alias="hasVariations")
    variations: list[ProductVariation] = Field(default_factory=list)
    weight: DecimalValue | None = Field(None, description="Weight in kilograms")
    dimensions: Dimensions | None = None

    def attribute_names(self) -> list[str]:
        """Return the attribute names used by the variations, first-seen order."""

        names: dict[str, None] = {}
        for variation in self.variations:
            for attribute in variation.attributes:
                names.setdefault(attribute.name, None)
        return list(names)

    def missing_attribute_axes(self) -> dict[str, list[str]]:
        """Map variation ids to the declared axes that variation does not supply."""

        declared = self.attribute_names()
        missing: dict[str, list[str]] = {}
        for variation in self.variations:
            supplied = {attribute.name for attribute in variation.attributes}
            absent = [name for name in declared if name not in supplied]
            if absent:
                missing[variation.id] = absent
        return missing


class Attribute(CatalogModel):
    """Catalog-level attribute taxonomy used while authoring variations."""

    id: str
    name: str
    slug: str = ""
    terms: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _default_slug(self) -> Attribute:
        if not self.slug:
            self.slug = re.sub(r"\s+", "-", self.name.lower())
        return self
