"""Logic for naming per-crate output files."""

import re
from pathlib import Path

# Conservative: keep letters, digits, underscore, dash.
CRATE_SAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")

EXTENSIONS = {"json": "json", "yaml": "yml"}


def output_file_for_crate(
    out_root: Path,
    crate: str,
    fmt: str = "json",
    file_template: str = "{crate}.{ext}",
) -> Path:
    """Return the file that will hold the resolved index of ``crate``."""
    safe = CRATE_SAFE_RE.sub("-", crate).strip("-") or "unknown"
    return out_root / file_template.format(crate=safe, ext=EXTENSIONS[fmt])
