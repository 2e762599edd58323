"""The resolved index: fully-qualified item path to documentation URL."""

import logging
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from rustdoc_index.backfill_paths import backfill_empty_paths
from rustdoc_index.errors import ItemResolutionError
from rustdoc_index.item_type import IGNORED_KINDS
from rustdoc_index.lookup_parent import ParentLookup, lookup_parent
from rustdoc_index.path_entry import PathEntry
from rustdoc_index.raw_item import RawItem
from rustdoc_index.resolve_item import resolve_item
from rustdoc_index.resolved_item import ResolvedItem
from rustdoc_index.search_index import FetchedSearchIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DroppedItem:
    """An item left out of the index because it could not be resolved."""

    position: int
    kind: str
    name: str
    path: str
    parent: int | None
    reason: str


class ResolvedIndex:
    """Maps ``::`` delimited item paths to their resolved documentation entries.

    When two items resolve to the same key the later one wins. Overwritten
    keys are recorded in ``collisions``.
    """

    def __init__(self) -> None:
        """Create an empty index."""
        self.doc = ""  # crate-level description
        self.items_by_path: dict[str, ResolvedItem] = {}
        self.ignored: Counter[str] = Counter()  # kind slug -> count
        self.dropped: list[DroppedItem] = []
        self.collisions: list[str] = []

    @classmethod
    def from_search_index(cls, fetched: FetchedSearchIndex) -> "ResolvedIndex":
        """Build an index from one crate's fetched search index."""
        result = cls()
        result.populate_from_search_index(fetched)
        return result

    def populate_from_search_index(self, fetched: FetchedSearchIndex) -> None:
        """Resolve every item of ``fetched`` into this index."""
        self.doc = fetched.index.doc
        self.populate(
            fetched.index.items,
            lookup_parent(fetched.index.paths),
            fetched.base_url,
        )

    def populate(
        self,
        raw_items: Sequence[RawItem],
        parent_lookup: ParentLookup,
        base_url: str,
    ) -> None:
        """Backfill paths, then resolve each item with ``parent_lookup``."""
        for position, raw in enumerate(backfill_empty_paths(raw_items)):
            try:
                resolved = resolve_item(raw, base_url, parent_lookup)
            except ItemResolutionError as e:
                logger.warning(
                    "Dropping %s '%s' (item #%s, path %r): %s",
                    raw.kind.to_url_slug(),
                    raw.name,
                    position,
                    raw.path,
                    e,
                )
                self.dropped.append(
                    DroppedItem(
                        position=position,
                        kind=raw.kind.to_url_slug(),
                        name=raw.name,
                        path=raw.path,
                        parent=raw.parent,
                        reason=str(e),
                    )
                )
                continue

            if resolved is None:
                if raw.kind in IGNORED_KINDS:
                    self.ignored[raw.kind.to_url_slug()] += 1
                continue

            key, item = resolved
            if key in self.items_by_path:
                logger.debug("Key %s resolved more than once; keeping the last", key)
                self.collisions.append(key)
            self.items_by_path[key] = item

    def add(self, key: str, item: ResolvedItem) -> None:
        """Insert an already resolved entry."""
        self.items_by_path[key] = item

    def get(self, key: str) -> ResolvedItem | None:
        """Return the entry for ``key`` if present."""
        return self.items_by_path.get(key)

    def items(self) -> Iterator[tuple[str, ResolvedItem]]:
        """Iterate over ``(key, entry)`` pairs."""
        return iter(self.items_by_path.items())

    def __len__(self) -> int:
        return len(self.items_by_path)

    def __contains__(self, key: object) -> bool:
        return key in self.items_by_path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedIndex):
            return NotImplemented
        return (self.doc, self.items_by_path) == (other.doc, other.items_by_path)

    def to_dict(self) -> dict[str, Any]:
        """Return the serializable form of the index."""
        return {
            "doc": self.doc,
            "items": {
                key: item.to_dict() for key, item in sorted(self.items_by_path.items())
            },
        }


def resolve(
    raw_items: Sequence[RawItem],
    paths: Sequence[PathEntry],
    base_url: str = "",
) -> ResolvedIndex:
    """Resolve raw items against their paths table."""
    result = ResolvedIndex()
    result.populate(raw_items, lookup_parent(paths), base_url)
    return result
