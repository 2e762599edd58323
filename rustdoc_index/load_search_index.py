"""Logic for loading an evaluated ``searchIndex`` payload from disk."""

import json
from pathlib import Path

from rustdoc_index.decode_search_index import decode_search_indices
from rustdoc_index.errors import SearchIndexDecodeError
from rustdoc_index.search_index import FetchedSearchIndex


def load_search_index(
    path: Path,
    base_url: str,
    *,
    strict: bool = True,
    failures: dict[str, str] | None = None,
) -> dict[str, FetchedSearchIndex]:
    """Read a JSON file holding ``{crate: {"doc", "i", "p"}}`` and decode it."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        msg = f"{path} is not valid UTF-8: {e}"
        raise SearchIndexDecodeError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"{path} is not valid JSON: {e}"
        raise SearchIndexDecodeError(msg) from e
    return decode_search_indices(payload, base_url, strict=strict, failures=failures)
