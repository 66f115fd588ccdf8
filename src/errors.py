"""Exceptions raised by the catalog helpers and platform adapters."""

from __future__ import annotations


class CatalogSyncError(Exception):
    """Base class for catalog synchronization errors."""


class OptionReferenceError(CatalogSyncError, LookupError):
    """A variation references an attribute option missing from the option table."""

    def __init__(self, variation_id: str, name: str, option: str):
        super().__init__(
            f"Variation {variation_id!r} references unknown option {name}={option!r}"
        )
        self.variation_id = variation_id
        self.name = name
        self.option = option


class UnknownTermError(CatalogSyncError, ValueError):
    """A term was selected that the attribute does not define."""

    def __init__(self, attribute_name: str, terms: list[str]):
        super().__init__(
            f"Attribute {attribute_name!r} has no terms: {', '.join(terms)}"
        )
        self.attribute_name = attribute_name
        self.terms = terms


class IncompleteVariationError(CatalogSyncError, ValueError):
    """One or more variations do not supply a value for every attribute axis."""

    def __init__(self, missing: dict[str, list[str]]):
        details = "; ".join(
            f"{variation_id}: {', '.join(names)}"
            for variation_id, names in missing.items()
        )
        super().__init__(f"Variations missing attribute values ({details})")
        self.missing = missing
