"""Tests for decoding the raw searchIndex payload."""

import pytest

from rustdoc_index.decode_search_index import (
    decode_path_entry,
    decode_raw_item,
    decode_search_index,
    decode_search_indices,
)
from rustdoc_index.errors import SearchIndexDecodeError
from rustdoc_index.item_type import ItemType
from rustdoc_index.path_entry import PathEntry


def test_decode_raw_item_columns() -> None:
    """Columns are read in rustdoc's order."""
    item = decode_raw_item([5, "spawn", "tokio", "Spawns a task.", None, {"x": 1}])
    assert item.kind is ItemType.FN
    assert item.name == "spawn"
    assert item.path == "tokio"
    assert item.description == "Spawns a task."
    assert item.parent is None
    assert item.extra == {"x": 1}


def test_decode_raw_item_without_extra_column() -> None:
    """The trailing column is optional."""
    item = decode_raw_item([11, "lock", "", "", 3])
    assert item.kind is ItemType.METHOD
    assert item.parent == 3
    assert item.extra is None


@pytest.mark.parametrize(
    ("row", "match"),
    [
        ([5, "spawn", "tokio", ""], "expected 6 columns"),
        ([5, "spawn", "tokio", "", None, None, None], "expected 6 columns"),
        ({"ty": 5}, "expected a list"),
        ([99, "spawn", "tokio", "", None, None], "Unknown item kind tag"),
        ([5, 7, "tokio", "", None, None], "'name' must be a string"),
        ([5, "spawn", None, "", None, None], "'path' must be a string"),
        ([5, "spawn", "tokio", "", "0", None], "parent must be null"),
        ([5, "spawn", "tokio", "", -1, None], "parent must be null"),
    ],
)
def test_decode_raw_item_rejects_malformed_rows(row: object, match: str) -> None:
    """Shape and type mismatches are fatal decode errors."""
    with pytest.raises(SearchIndexDecodeError, match=match):
        decode_raw_item(row, 4)


def test_decode_raw_item_error_names_position() -> None:
    """The failing row is identified in the error."""
    with pytest.raises(SearchIndexDecodeError, match="item #17"):
        decode_raw_item([42, "x", "", "", None, None], 17)


def test_decode_path_entry_forms() -> None:
    """Both the object and the pair form decode to the same entry."""
    expected = PathEntry(ItemType.STRUCT, "Mutex")
    assert decode_path_entry({"ty": 3, "name": "Mutex"}) == expected
    assert decode_path_entry({"kind_tag": 3, "name": "Mutex"}) == expected
    assert decode_path_entry([3, "Mutex"]) == expected


def test_decode_path_entry_rejects_bad_entries() -> None:
    """Unknown tags and wrong shapes fail."""
    with pytest.raises(SearchIndexDecodeError, match="path #2"):
        decode_path_entry({"ty": 77, "name": "X"}, 2)
    with pytest.raises(SearchIndexDecodeError, match="expected an object"):
        decode_path_entry([3, "Mutex", "extra"])
    with pytest.raises(SearchIndexDecodeError, match="'name' must be a string"):
        decode_path_entry({"ty": 3})


def test_decode_search_index() -> None:
    """A crate payload decodes into its two tables."""
    index = decode_search_index(
        {
            "doc": "An async runtime.",
            "i": [[3, "Mutex", "tokio::sync", "", None, None]],
            "p": [{"ty": 3, "name": "Mutex"}],
        }
    )
    assert index.doc == "An async runtime."
    assert len(index.items) == 1
    assert index.paths == [PathEntry(ItemType.STRUCT, "Mutex")]


def test_decode_search_index_requires_tables() -> None:
    """Missing item or path tables are fatal; a missing doc is not."""
    with pytest.raises(SearchIndexDecodeError, match="'p' table"):
        decode_search_index({"doc": "", "i": []})
    with pytest.raises(SearchIndexDecodeError, match="must be an object"):
        decode_search_index([])
    assert decode_search_index({"i": [], "p": []}).doc == ""


def test_unknown_kind_fails_whole_crate() -> None:
    """One unknown tag aborts decoding of the crate."""
    payload = {
        "i": [
            [5, "ok", "c", "", None, None],
            [40, "future_kind", "c", "", None, None],
        ],
        "p": [],
    }
    with pytest.raises(SearchIndexDecodeError, match="item #1"):
        decode_search_index(payload)


def test_decode_search_indices_attaches_base_url() -> None:
    """Every crate is paired with the documentation root."""
    fetched = decode_search_indices(
        {"a": {"doc": "", "i": [], "p": []}, "b": {"doc": "", "i": [], "p": []}},
        "https://docs.rs/a/1.0.0",
    )
    assert sorted(fetched) == ["a", "b"]
    assert fetched["a"].base_url == "https://docs.rs/a/1.0.0"


def test_decode_search_indices_strict_and_lenient() -> None:
    """Strict decoding aborts; lenient decoding skips and records the crate."""
    payload = {
        "good": {"i": [], "p": []},
        "bad": {"i": [[99, "x", "", "", None, None]], "p": []},
    }
    with pytest.raises(SearchIndexDecodeError, match="crate 'bad'"):
        decode_search_indices(payload, "https://x")

    failures: dict[str, str] = {}
    fetched = decode_search_indices(
        payload, "https://x", strict=False, failures=failures
    )
    assert list(fetched) == ["good"]
    assert "Unknown item kind tag" in failures["bad"]


def test_decode_search_indices_requires_mapping() -> None:
    """The top-level payload must map crate names to indices."""
    with pytest.raises(SearchIndexDecodeError, match="map crate names"):
        decode_search_indices([], "https://x")
