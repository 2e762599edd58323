"""Strategies for finding the parent of a raw item."""

from collections.abc import Callable, Sequence

from rustdoc_index.path_entry import PathEntry

ParentLookup = Callable[[int], PathEntry | None]


def lookup_parent(paths: Sequence[PathEntry]) -> ParentLookup:
    """Resolve parent indices against the paths table of a search index."""

    def lookup(index: int) -> PathEntry | None:
        if 0 <= index < len(paths):
            return paths[index]
        return None

    return lookup


def direct_parent(entry: PathEntry | None) -> ParentLookup:
    """Answer every parent lookup with an already known entry."""
    return lambda _index: entry
