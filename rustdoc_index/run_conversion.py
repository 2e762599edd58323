"""Orchestration logic for converting a rustdoc search index to resolved indices."""

import argparse
import logging
from pathlib import Path
from typing import Any

from rustdoc_index.compute_config_hash import compute_config_hash
from rustdoc_index.errors import ConfigError, SearchIndexDecodeError
from rustdoc_index.load_config import load_config, validate_config
from rustdoc_index.load_search_index import load_search_index
from rustdoc_index.output_file_for_crate import output_file_for_crate
from rustdoc_index.resolution_report import ResolutionReport
from rustdoc_index.resolved_index import ResolvedIndex
from rustdoc_index.write_resolved_index import write_resolved_index

logger = logging.getLogger(__name__)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    if not args.input.exists():
        msg = f"Search index file not found: {args.input}"
        raise SystemExit(msg)

    config = _init_config(args)
    base_url = args.base_url or config["resolution"]["base_url"]
    if not base_url:
        msg = "A documentation root is required (--base-url or resolution.base_url)"
        raise SystemExit(msg)

    failures: dict[str, str] = {}
    try:
        fetched = load_search_index(
            args.input, base_url, strict=False, failures=failures
        )
    except (OSError, SearchIndexDecodeError) as e:
        raise SystemExit(str(e)) from e

    report = ResolutionReport(compute_config_hash(config, base_url))
    for crate, error in failures.items():
        report.add_failure(crate, error)

    skip = set(config["resolution"]["skip_crates"])
    for crate in sorted(fetched):
        if crate in skip:
            logger.info("Skipping crate %s", crate)
            continue
        index = ResolvedIndex.from_search_index(fetched[crate])
        report.add_index(crate, index)
        logger.info(
            "Resolved %s items for %s (%s dropped)",
            len(index),
            crate,
            len(index.dropped),
        )

    if args.report:
        report.generate_report(args.report)

    if args.dry_run:
        print(f"Dry run complete. Resolved {len(report.indices)} crates.")
        return 1 if failures else 0

    written = _write_all(report.indices, args.out_dir.resolve(), config)
    print(f"Wrote {written} resolved indices into: {args.out_dir.resolve()}")
    return 1 if failures else 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command line overrides."""
    try:
        config = load_config(args.config)
        if args.format:
            config["output"]["format"] = args.format
        validate_config(config)
    except ConfigError as e:
        raise SystemExit(str(e)) from e
    return config


def _write_all(
    indices: dict[str, ResolvedIndex], out_root: Path, config: dict[str, Any]
) -> int:
    """Write one document per crate."""
    out_cfg = config["output"]
    out_root.mkdir(parents=True, exist_ok=True)
    written: dict[Path, str] = {}  # file -> crate
    for crate, index in indices.items():
        out_file = output_file_for_crate(
            out_root, crate, out_cfg["format"], out_cfg["file_template"]
        )
        if out_file in written:
            logger.warning(
                "Crates %s and %s both map to %s; %s overwrites it",
                written[out_file],
                crate,
                out_file,
                crate,
            )
        written[out_file] = crate
        write_resolved_index(
            index,
            out_file,
            out_cfg["format"],
            out_cfg["indent"],
            sort_keys=out_cfg["sort_keys"],
        )
        logger.debug("Wrote %s", out_file)
    return len(indices)
