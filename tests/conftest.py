"""Shared fixtures: a small search index in rustdoc's wire shape."""

from typing import Any

import pytest


@pytest.fixture
def crate_payload() -> dict[str, Any]:
    """One crate's evaluated search index."""
    return {
        "doc": "A tiny crate.",
        "i": [
            [0, "sync", "tiny", "Synchronization primitives.", None, None],
            [3, "Mutex", "tiny::sync", "A mutual exclusion lock.", None, None],
            [11, "lock", "", "Locks the mutex.", 0, None],
            [11, "try_lock", "", "Tries to lock.", 0, None],
            [4, "Shape", "tiny", "Shapes.", None, None],
            [13, "Circle", "", "A circle.", 1, None],
            [12, "radius", "tiny::Shape", "The radius.", 2, None],
            [11, "is_even", "tiny", "", 3, None],
            [1, "core", "tiny", "", None, None],
            [21, "match", "tiny", "", None, None],
            [11, "orphan", "tiny", "", 9, None],
        ],
        "p": [
            {"ty": 3, "name": "Mutex"},
            {"ty": 4, "name": "Shape"},
            {"ty": 13, "name": "Circle"},
            {"ty": 15, "name": "u32"},
        ],
    }


@pytest.fixture
def payload(crate_payload: dict[str, Any]) -> dict[str, Any]:
    """A multi-crate payload keyed by crate name."""
    return {
        "tiny": crate_payload,
        "empty": {"doc": "", "i": [], "p": []},
    }
