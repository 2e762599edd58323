"""Logic for fingerprinting the settings that shape the resolved output."""

import hashlib
import json
from typing import Any

# section -> keys whose values change which documents are written or what they hold
OUTPUT_SETTINGS: dict[str, tuple[str, ...]] = {
    "output": ("format", "file_template"),
    "resolution": ("base_url", "skip_crates"),
}


def output_settings(config: dict[str, Any]) -> dict[str, Any]:
    """Select the settings listed in ``OUTPUT_SETTINGS`` from ``config``."""
    return {
        section: {key: config.get(section, {}).get(key) for key in keys}
        for section, keys in OUTPUT_SETTINGS.items()
    }


def compute_config_hash(config: dict[str, Any], base_url: str = "") -> str:
    """Compute a stable hash of the settings that change the converter's output.

    Formatting-only settings such as ``output.indent`` are not part of the
    hash, so two reports with the same hash describe the same documents.
    ``base_url`` is the documentation root actually used for the run.
    """
    selected = output_settings(config)
    if base_url:
        selected["resolution"]["base_url"] = base_url
    if isinstance(selected["resolution"]["skip_crates"], list):
        selected["resolution"]["skip_crates"] = sorted(
            selected["resolution"]["skip_crates"]
        )
    canonical = json.dumps(selected, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
