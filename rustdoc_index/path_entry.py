"""Data model for an entry of the search index paths table."""

from dataclasses import dataclass

from rustdoc_index.item_type import ItemType


@dataclass(frozen=True)
class PathEntry:
    """A parent item referenced by position from ``RawItem.parent``."""

    kind: ItemType
    name: str
