"""Logic for loading the documentation extracted from source comments."""

import logging
from pathlib import Path

from apidiff.errors import DuplicateDocsError, LoadError
from apidiff.load_yaml_file import load_yaml_file
from apidiff.models import ClassDocs
from apidiff.parse_records import parse_class_docs

logger = logging.getLogger(__name__)

FILE_LIST = "_files.yml"


def merge_docs(
    res: dict[str, ClassDocs],
    fragment: dict[str, ClassDocs],
    source: str,
) -> None:
    """Merge one docs fragment into ``res``; a class may only be documented once."""
    for cls_name, docs in fragment.items():
        if cls_name in res:
            msg = f"Duplicate documentation entry for {cls_name} in {source}"
            raise DuplicateDocsError(msg)
        res[cls_name] = docs


def load_api_docs(docs_root: Path) -> dict[str, ClassDocs]:
    """Load every docs fragment listed in ``_files.yml`` into one dictionary."""
    files = load_yaml_file(docs_root / FILE_LIST)
    if not isinstance(files, list):
        msg = f"Failed to load {FILE_LIST} from {docs_root}"
        raise LoadError(msg)

    res: dict[str, ClassDocs] = {}
    for fnam in files:
        raw = load_yaml_file(docs_root / str(fnam))
        if not raw:
            logger.warning("No documentation in %s, skipping", fnam)
            continue
        if not isinstance(raw, dict):
            msg = f"Expected a mapping of classes in {docs_root / str(fnam)}"
            raise LoadError(msg)
        try:
            fragment = {str(k): parse_class_docs(v) for k, v in raw.items()}
        except (AttributeError, TypeError) as e:
            msg = f"Malformed documentation in {docs_root / str(fnam)}: {e}"
            raise LoadError(msg) from e
        merge_docs(res, fragment, str(fnam))

    logger.info("Loaded documentation for %d classes", len(res))
    return res
