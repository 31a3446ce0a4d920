"""Orchestration logic for diffing extracted docs against the API descriptions."""

import logging
from pathlib import Path
from typing import Any

from apidiff.emit_diff import emit_diff, write_diff
from apidiff.find_missing import find_missing
from apidiff.load_api_desc import load_api_desc
from apidiff.load_api_docs import load_api_docs
from apidiff.models import ClassGaps
from apidiff.name_translator import build_name_translator
from apidiff.type_mapper import build_type_mapper

logger = logging.getLogger(__name__)


def _log_summary(missing: dict[str, ClassGaps]) -> None:
    n_functions = sum(len(g.functions) for g in missing.values())
    n_symbols = sum(len(g.variables) + len(g.constants) for g in missing.values())
    logger.info(
        "Missing descriptions: %d functions, %d variables/constants in %d classes",
        n_functions,
        n_symbols,
        len(missing),
    )


def run_diff(config: dict[str, Any]) -> Path:
    """Load both sets, compute the missing descriptions and write the diff file.

    Both sets are loaded before anything is computed, so a load failure
    leaves no output behind. Returns the path of the written file.
    """
    paths = config["paths"]
    translator = build_name_translator(config)
    type_mapper = build_type_mapper(config)

    api_desc = load_api_desc(Path(paths["api_desc"]))
    api_docs = load_api_docs(Path(paths["docs"]))

    missing = find_missing(api_desc, api_docs, translator)
    _log_summary(missing)

    text = emit_diff(missing, translator=translator, type_mapper=type_mapper)

    out_path = Path(paths["output"])
    write_diff(out_path, text)
    return out_path
