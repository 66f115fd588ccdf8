"""Attribute grouping shared by both platform adapters.

Both storefronts need the same two passes over a product's variations:

1. build an ordered table of attribute name -> distinct option values,
2. walk the variations again and emit one record per variation that refers
   back to that table.

Ordering is first-seen for names and for the values under each name, so the
same input always produces the same table.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from src.models.product import ProductVariation

T = TypeVar("T")


class OptionTable:
    """Ordered multimap from attribute name to its distinct option values."""

    def __init__(self) -> None:
        self._options: dict[str, dict[str, None]] = {}

    def add(self, name: str, option: str) -> None:
        self._options.setdefault(name, {}).setdefault(option, None)

    def names(self) -> list[str]:
        return list(self._options)

    def options(self, name: str) -> list[str]:
        return list(self._options.get(name, ()))

    def items(self) -> list[tuple[str, list[str]]]:
        return [(name, list(values)) for name, values in self._options.items()]

    def name_index(self, name: str) -> int | None:
        """Position of ``name`` in the table, or None when it was never seen."""
        try:
            return self.names().index(name)
        except ValueError:
            return None

    def option_index(self, name: str, option: str) -> int | None:
        """Position of ``option`` under ``name``, or None when it was never seen."""
        try:
            return self.options(name).index(option)
        except ValueError:
            return None

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        name, option = pair
        return option in self._options.get(name, {})

    def __len__(self) -> int:
        return len(self._options)

    def __bool__(self) -> bool:
        return bool(self._options)


def group_variation_attributes(variations: Iterable[ProductVariation]) -> OptionTable:
    """Collect the distinct options for every attribute name across variations."""

    table = OptionTable()
    for variation in variations:
        for attribute in variation.attributes:
            table.add(attribute.name, attribute.option)
    return table


def emit_per_variation(
    variations: Iterable[ProductVariation],
    table: OptionTable,
    emit: Callable[[ProductVariation, OptionTable], T],
) -> list[T]:
    """Second pass: build one record per variation against the grouped table."""

    return [emit(variation, table) for variation in variations]
