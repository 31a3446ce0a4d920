"""Logic for computing the sparse tree of undescribed classes and symbols."""

import logging

from apidiff.diff_functions import diff_functions
from apidiff.diff_symbols import diff_symbols
from apidiff.models import ApiDesc, ClassDesc, ClassDocs, ClassGaps, MissingTree
from apidiff.name_translator import DEFAULT_TRANSLATOR, NameTranslator

logger = logging.getLogger(__name__)


def diff_class(
    class_desc: ClassDesc,
    class_docs: ClassDocs,
    translator: NameTranslator = DEFAULT_TRANSLATOR,
) -> ClassGaps:
    """Compute the gaps of a single class."""
    return ClassGaps(
        functions=diff_functions(
            class_desc.functions, class_docs.functions, translator
        ),
        variables=diff_symbols(class_desc.variables, class_docs.variables),
        constants=diff_symbols(class_desc.constants, class_docs.constants),
    )


def find_missing(
    api_desc: ApiDesc,
    api_docs: dict[str, ClassDocs],
    translator: NameTranslator = DEFAULT_TRANSLATOR,
) -> MissingTree:
    """Return ``class name -> gaps`` for every documented class with gaps.

    Classes that exist only in the description set are never visited.
    """
    res: MissingTree = {}
    for cls_name, cls_docs in api_docs.items():
        cls_desc = api_desc.classes.get(cls_name) or ClassDesc()
        gaps = diff_class(cls_desc, cls_docs, translator)
        if not gaps.is_empty():
            res[cls_name] = gaps
    logger.info(
        "Found gaps in %d of %d documented classes", len(res), len(api_docs)
    )
    return res
