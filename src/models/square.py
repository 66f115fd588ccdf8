"""Payload schemas for the Square catalog upsert API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class Money(BaseModel):
    """Amount in the currency's smallest unit (cents for USD)."""

    amount: int
    currency: str = "USD"


class ItemOptionValueData(BaseModel):
    name: str


class ItemOptionValue(BaseModel):
    id: str
    item_option_value_data: ItemOptionValueData


class ItemOptionData(BaseModel):
    name: str
    values: list[ItemOptionValue] = Field(default_factory=list)


class ItemOption(BaseModel):
    type: Literal["ITEM_OPTION"] = "ITEM_OPTION"
    id: str
    item_option_data: ItemOptionData


class ItemOptionValueReference(BaseModel):
    """Selects one value of one item option for a variation."""

    item_option_id: str
    item_option_value_id: str


class ItemVariationData(BaseModel):
    item_id: str
    name: str
    sku: str
    pricing_type: Literal["FIXED_PRICING"] = "FIXED_PRICING"
    price_money: Money
    track_inventory: bool = True
    item_option_values: list[ItemOptionValueReference] | None = None


class ItemVariation(BaseModel):
    type: Literal["ITEM_VARIATION"] = "ITEM_VARIATION"
    id: str
    item_variation_data: ItemVariationData


class ItemData(BaseModel):
    name: str
    description: str
    variations: list[ItemVariation] = Field(default_factory=list)
    item_options: list[ItemOption] | None = None


class CatalogItem(BaseModel):
    type: Literal["ITEM"] = "ITEM"
    id: str = Field(..., description="Temporary '#'-prefixed client reference")
    item_data: ItemData


class SquareUpsertRequest(BaseModel):
    """Body of a catalog object upsert."""

    idempotency_key: str
    object: CatalogItem
