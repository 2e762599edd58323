"""Containers for a decoded per-crate search index."""

from dataclasses import dataclass, field

from rustdoc_index.path_entry import PathEntry
from rustdoc_index.raw_item import RawItem


@dataclass
class SearchIndex:
    """The decoded item and path tables of one crate."""

    doc: str = ""  # crate-level description
    items: list[RawItem] = field(default_factory=list)
    paths: list[PathEntry] = field(default_factory=list)


@dataclass
class FetchedSearchIndex:
    """A search index together with the documentation root it was served from."""

    base_url: str
    index: SearchIndex
