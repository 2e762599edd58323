"""Logic for restoring item paths elided by the search index encoder."""

from collections.abc import Iterable

from rustdoc_index.raw_item import RawItem


def backfill_empty_paths(items: Iterable[RawItem]) -> list[RawItem]:
    """Give every item with an empty path the last non-empty path before it.

    Rustdoc only writes a path when it differs from the previous row, so this
    must run over the items in their original order. Items before the first
    non-empty path keep their empty path.
    """
    result: list[RawItem] = []
    last_path = ""
    for item in items:
        if item.path:
            last_path = item.path
        elif last_path:
            item = item.with_path(last_path)
        result.append(item)
    return result
