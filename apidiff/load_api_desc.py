"""Logic for loading the hand-written API description set."""

import logging
from pathlib import Path

from apidiff.errors import LoadError
from apidiff.load_yaml_file import load_yaml_file
from apidiff.models import ApiDesc
from apidiff.parse_records import parse_class_desc

logger = logging.getLogger(__name__)

API_DESC_FILE = "APIDesc.yml"
CLASSES_DIR = "Classes"


def load_api_desc(desc_root: Path) -> ApiDesc:
    """Load ``APIDesc.yml`` and merge in every file from the ``Classes`` folder.

    Class files are merged in sorted filename order, later files replace
    earlier definitions of the same class.
    """
    base = load_yaml_file(desc_root / API_DESC_FILE)
    if not isinstance(base, dict) or not isinstance(base.get("Classes"), dict):
        msg = f"Failed to load API descriptions from {desc_root / API_DESC_FILE}"
        raise LoadError(msg)
    raw_classes = dict(base["Classes"])

    classes_dir = desc_root / CLASSES_DIR
    if classes_dir.is_dir():
        for f in sorted(classes_dir.glob("*.yml")):
            tbls = load_yaml_file(f)
            if tbls is None:
                continue
            if not isinstance(tbls, dict):
                msg = f"Expected a mapping of classes in {f}"
                raise LoadError(msg)
            raw_classes.update(tbls)

    try:
        classes = {str(k): parse_class_desc(v) for k, v in raw_classes.items()}
    except (AttributeError, TypeError) as e:
        msg = f"Malformed API descriptions in {desc_root}: {e}"
        raise LoadError(msg) from e
    logger.info("Loaded descriptions for %d classes", len(classes))
    return ApiDesc(classes=classes)
