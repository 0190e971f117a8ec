"""Filter configuration for product listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProductFilters:
    """Optional conditions for ``Storage.get_products``; set fields combine with AND.

    A field left as ``None`` (or ``0`` / ``""``) means "no filter". The search
    text is used as given, so whitespace is part of the substring.
    """

    collection_id: Optional[int] = None
    product_type_id: Optional[int] = None
    language: Optional[str] = None
    search: Optional[str] = None

    @property
    def search_term(self) -> str:
        return self.search or ""
