"""Logic for persisting resolved indices as JSON or YAML documents."""

import json
from pathlib import Path

import yaml

from rustdoc_index.resolved_index import ResolvedIndex
from rustdoc_index.resolved_item import ResolvedItem


def dump_resolved_index(
    index: ResolvedIndex,
    fmt: str = "json",
    indent: int = 2,
    *,
    sort_keys: bool = True,
) -> str:
    """Serialize ``index`` as a human-readable document."""
    data = index.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(
            data, indent=indent, sort_keys=sort_keys, allow_unicode=True
        )
    text = json.dumps(data, indent=indent, sort_keys=sort_keys, ensure_ascii=False)
    return text + "\n"


def write_resolved_index(
    index: ResolvedIndex,
    out_file: Path,
    fmt: str = "json",
    indent: int = 2,
    *,
    sort_keys: bool = True,
) -> None:
    """Write ``index`` to ``out_file``, creating parent directories."""
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(
        dump_resolved_index(index, fmt, indent, sort_keys=sort_keys),
        encoding="utf-8",
    )


def read_resolved_index(path: Path) -> ResolvedIndex:
    """Load a document written by ``write_resolved_index``."""
    text = path.read_text(encoding="utf-8")
    if path.suffix in {".yml", ".yaml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)

    index = ResolvedIndex()
    index.doc = str(data.get("doc") or "")
    for key, entry in (data.get("items") or {}).items():
        index.add(key, ResolvedItem.from_dict(entry))
    return index
