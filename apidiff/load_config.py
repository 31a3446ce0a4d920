"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from apidiff.deep_merge import deep_merge
from apidiff.errors import LoadError

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "api_desc": "../../Server/Plugins/APIDump",
        "docs": "docs",
        "output": "APIDiff.yml",
    },
    # Extra "DocsName" -> "DescName" function name translations
    "function_names": {},
    # Extra description names never reported as missing
    "ignored_functions": [],
    # Extra "NativeType" -> "DocType" translations
    "type_names": {},
}

REQUIRED_PATHS = ("api_desc", "docs", "output")


def validate_config(config: dict[str, Any], source: Path | None = None) -> None:
    """Raise LoadError unless ``paths`` is a mapping holding every required path."""
    paths = config.get("paths")
    where = f" in {source}" if source else ""
    if not isinstance(paths, dict):
        msg = f"Config 'paths' must be a mapping{where}"
        raise LoadError(msg)
    for key in REQUIRED_PATHS:
        if not isinstance(paths.get(key), str) or not paths[key]:
            msg = f"Config 'paths.{key}' must be a non-empty string{where}"
            raise LoadError(msg)
    for key, kind in (
        ("function_names", dict),
        ("type_names", dict),
        ("ignored_functions", list),
    ):
        if not isinstance(config.get(key), kind):
            msg = f"Config '{key}' must be a {kind.__name__}{where}"
            raise LoadError(msg)


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {p}"
            raise LoadError(msg)
        try:
            raw = p.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"Cannot read config file {p}: {e}"
            raise LoadError(msg) from e
        try:
            user_config = yaml.safe_load(raw) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid config file {p}: {e}"
            raise LoadError(msg) from e
        if not isinstance(user_config, dict):
            msg = f"Config file {p} must contain a mapping"
            raise LoadError(msg)
        config = deep_merge(config, user_config)
        validate_config(config, p)
    return config
