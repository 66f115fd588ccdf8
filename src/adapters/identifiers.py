"""Identifier generators used for client-assigned payload references."""

from __future__ import annotations

import itertools
import uuid
from abc import ABC, abstractmethod


class IdentifierGenerator(ABC):
    """Source of fresh identifiers."""

    @abstractmethod
    def next(self) -> str:
        """Return a new identifier."""


class UuidGenerator(IdentifierGenerator):
    """Random UUID4 identifiers; never repeats across calls."""

    def next(self) -> str:
        return str(uuid.uuid4())


class SequenceGenerator(IdentifierGenerator):
    """Deterministic ``prefix-1``, ``prefix-2``, ... identifiers."""

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)

    def next(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"
