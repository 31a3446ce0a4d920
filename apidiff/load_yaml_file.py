"""Logic for reading a YAML data file into memory."""

import logging
from pathlib import Path
from typing import Any

import yaml

from apidiff.errors import LoadError

logger = logging.getLogger(__name__)


def load_yaml_file(path: Path) -> Any:
    """Load and parse a YAML file, raising LoadError on any failure."""
    logger.debug("Loading %s", path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read {path}: {e}"
        raise LoadError(msg) from e
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise LoadError(msg) from e
