"""Convert an evaluated rustdoc ``searchIndex`` into per-crate item/URL maps.

Each crate in the input becomes one document mapping fully-qualified item
paths (``tokio::sync::Mutex::lock``) to the item kind, the URL of its
documentation and its short description.
"""

import argparse
import logging
from pathlib import Path

from rustdoc_index.run_conversion import run_conversion

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Resolve a rustdoc search index into item -> URL documents.",
    )
    ap.add_argument(
        "input",
        type=Path,
        help="JSON file holding the evaluated searchIndex ({crate: {doc, i, p}})",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory, one document per crate",
    )
    ap.add_argument(
        "--base-url",
        default="",
        help="Documentation root the index was served from, "
        "e.g. https://docs.rs/tokio/1.0.0 (takes precedence over "
        "resolution.base_url in the config)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--format",
        choices=["json", "yaml"],
        help="Output format (overrides output.format from the config)",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON resolution report to this path",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and report without writing files",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
