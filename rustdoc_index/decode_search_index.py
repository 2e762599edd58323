"""Logic for decoding the raw ``searchIndex`` payload into typed records.

The item table is positional: every row is a fixed-order list
``[kind_tag, name, path, description, parent, extra]``. Kind tags are the
``ItemType`` ordinals, so a tag this version does not know about fails the
whole crate rather than being guessed at.
"""

import logging
from collections.abc import Mapping
from typing import Any

from rustdoc_index.errors import SearchIndexDecodeError
from rustdoc_index.item_type import ItemType
from rustdoc_index.path_entry import PathEntry
from rustdoc_index.raw_item import RawItem
from rustdoc_index.search_index import FetchedSearchIndex, SearchIndex

logger = logging.getLogger(__name__)

ITEM_COLUMNS = ("kind_tag", "name", "path", "description", "parent", "extra")
# Older rustdoc output omits the trailing column
MIN_ITEM_COLUMNS = 5


def _expect_str(value: object, column: str, where: str) -> str:
    if not isinstance(value, str):
        msg = f"{where}: column '{column}' must be a string, got {value!r}"
        raise SearchIndexDecodeError(msg)
    return value


def decode_raw_item(row: Any, position: int = 0) -> RawItem:
    """Decode one row of the item table."""
    where = f"item #{position}"
    if not isinstance(row, (list, tuple)):
        msg = f"{where}: expected a list, got {type(row).__name__}"
        raise SearchIndexDecodeError(msg)
    if not MIN_ITEM_COLUMNS <= len(row) <= len(ITEM_COLUMNS):
        msg = (
            f"{where}: expected {len(ITEM_COLUMNS)} columns "
            f"{ITEM_COLUMNS}, got {len(row)}"
        )
        raise SearchIndexDecodeError(msg)

    tag, name, path, description, parent = row[:MIN_ITEM_COLUMNS]
    extra = row[MIN_ITEM_COLUMNS] if len(row) > MIN_ITEM_COLUMNS else None

    if parent is not None and (
        isinstance(parent, bool) or not isinstance(parent, int) or parent < 0
    ):
        msg = f"{where}: parent must be null or a non-negative integer, got {parent!r}"
        raise SearchIndexDecodeError(msg)

    try:
        kind = ItemType.from_tag(tag)
    except SearchIndexDecodeError as e:
        msg = f"{where}: {e}"
        raise SearchIndexDecodeError(msg) from e

    return RawItem(
        kind=kind,
        name=_expect_str(name, "name", where),
        path=_expect_str(path, "path", where),
        description=_expect_str(description, "description", where),
        parent=parent,
        extra=extra,
    )


def decode_path_entry(entry: Any, position: int = 0) -> PathEntry:
    """Decode one entry of the paths table.

    Accepts both the object form ``{"ty": tag, "name": ...}`` and the
    compact pair form ``[tag, name]``.
    """
    where = f"path #{position}"
    if isinstance(entry, Mapping):
        tag = entry.get("ty", entry.get("kind_tag"))
        name = entry.get("name")
    elif isinstance(entry, (list, tuple)) and len(entry) == 2:  # noqa: PLR2004
        tag, name = entry
    else:
        msg = f"{where}: expected an object or a [kind, name] pair, got {entry!r}"
        raise SearchIndexDecodeError(msg)

    try:
        kind = ItemType.from_tag(tag)
    except SearchIndexDecodeError as e:
        msg = f"{where}: {e}"
        raise SearchIndexDecodeError(msg) from e
    return PathEntry(kind=kind, name=_expect_str(name, "name", where))


def decode_search_index(payload: Any) -> SearchIndex:
    """Decode one crate's ``{"doc", "i", "p"}`` object."""
    if not isinstance(payload, Mapping):
        msg = f"Search index must be an object, got {type(payload).__name__}"
        raise SearchIndexDecodeError(msg)

    for key in ("i", "p"):
        if not isinstance(payload.get(key), list):
            msg = f"Search index is missing the '{key}' table"
            raise SearchIndexDecodeError(msg)

    doc = payload.get("doc") or ""
    items = [decode_raw_item(row, n) for n, row in enumerate(payload["i"])]
    paths = [decode_path_entry(entry, n) for n, entry in enumerate(payload["p"])]
    return SearchIndex(
        doc=_expect_str(doc, "doc", "crate"),
        items=items,
        paths=paths,
    )


def decode_search_indices(
    payload: Any,
    base_url: str,
    *,
    strict: bool = True,
    failures: dict[str, str] | None = None,
) -> dict[str, FetchedSearchIndex]:
    """Decode a ``{crate_name: index}`` mapping.

    With ``strict`` (the default) the first crate that fails to decode aborts
    the whole call. Otherwise that crate is logged, recorded in ``failures``
    and skipped.
    """
    if not isinstance(payload, Mapping):
        msg = (
            "Search index payload must map crate names to indices, "
            f"got {type(payload).__name__}"
        )
        raise SearchIndexDecodeError(msg)

    result: dict[str, FetchedSearchIndex] = {}
    for crate_name, crate_payload in payload.items():
        try:
            index = decode_search_index(crate_payload)
        except SearchIndexDecodeError as e:
            msg = f"crate '{crate_name}': {e}"
            if strict:
                raise SearchIndexDecodeError(msg) from e
            logger.error("Skipping undecodable %s", msg)
            if failures is not None:
                failures[str(crate_name)] = str(e)
            continue
        result[str(crate_name)] = FetchedSearchIndex(base_url=base_url, index=index)
    return result
