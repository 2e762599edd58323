"""Data model for a single entry of the search index item table."""

from dataclasses import dataclass, replace
from typing import Any

from rustdoc_index.item_type import ItemType


@dataclass(frozen=True)
class RawItem:
    """One row of the ``i`` table, as rustdoc wrote it."""

    kind: ItemType
    name: str
    path: str  # empty means "same path as the previous row"
    description: str
    parent: int | None  # index into the paths table
    extra: Any = None  # trailing column, not interpreted

    def with_path(self, path: str) -> "RawItem":
        """Return a copy of this item with ``path`` replaced."""
        return replace(self, path=path)
