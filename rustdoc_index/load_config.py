"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from rustdoc_index.deep_merge import deep_merge
from rustdoc_index.errors import ConfigError

OUTPUT_FORMATS = ("json", "yaml")

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "format": "json",
        "indent": 2,
        "sort_keys": True,
        "file_template": "{crate}.{ext}",
    },
    "resolution": {
        # Used when --base-url is not given
        "base_url": None,
        "skip_crates": [],
    },
}


def validate_config(config: dict[str, Any]) -> None:
    """Reject configuration values the converter cannot honour."""
    fmt = config["output"].get("format")
    if fmt not in OUTPUT_FORMATS:
        msg = f"Unknown output format {fmt!r}; expected one of {OUTPUT_FORMATS}"
        raise ConfigError(msg)
    template = config["output"].get("file_template")
    if not isinstance(template, str) or "{crate}" not in template:
        msg = f"output.file_template must contain '{{crate}}', got {template!r}"
        raise ConfigError(msg)
    try:
        template.format(crate="x", ext="json")
    except (KeyError, IndexError, ValueError) as e:
        msg = (
            f"output.file_template {template!r} may only use {{crate}} and "
            f"{{ext}}: {e!r}"
        )
        raise ConfigError(msg) from e
    if not isinstance(config["resolution"].get("skip_crates"), list):
        msg = "resolution.skip_crates must be a list"
        raise ConfigError(msg)


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    validate_config(config)
    return config
