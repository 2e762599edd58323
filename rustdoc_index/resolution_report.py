"""Logic for generating reports on search index resolution."""

import json
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any

from rustdoc_index.resolved_index import ResolvedIndex


class ResolutionReport:
    """Collects per-crate resolution outcomes and writes them as JSON."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.indices: dict[str, ResolvedIndex] = {}
        self.failed_crates: dict[str, str] = {}  # crate -> decode error
        self.start_time = time.time()

    def add_index(self, crate: str, index: ResolvedIndex) -> None:
        """Record the resolved index of one crate."""
        self.indices[crate] = index

    def add_failure(self, crate: str, error: str) -> None:
        """Record a crate that could not be decoded."""
        self.failed_crates[crate] = error

    def crate_stats(self, crate: str) -> dict[str, Any]:
        """Summarize the outcome for one crate."""
        index = self.indices[crate]
        return {
            "resolved": len(index),
            "ignored": sum(index.ignored.values()),
            "ignored_by_kind": dict(sorted(index.ignored.items())),
            "dropped": len(index.dropped),
            "collisions": len(index.collisions),
        }

    def to_dict(self) -> dict[str, Any]:
        """Build the report document."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_items": sum(len(i) for i in self.indices.values()),
            },
            "crates": {
                crate: self.crate_stats(crate) for crate in sorted(self.indices)
            },
            "failed_crates": dict(sorted(self.failed_crates.items())),
            "dropped": [
                {"crate": crate, **asdict(d)}
                for crate, index in sorted(self.indices.items())
                for d in index.dropped
            ],
            "collisions": [
                {"crate": crate, "key": key}
                for crate, index in sorted(self.indices.items())
                for key in index.collisions
            ],
        }

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
