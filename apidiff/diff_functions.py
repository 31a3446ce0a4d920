"""Logic for listing documented function overloads missing from the descriptions."""

from collections.abc import Mapping, Sequence

from apidiff.models import DocRecord, OverloadRecord
from apidiff.name_translator import DEFAULT_TRANSLATOR, NameTranslator
from apidiff.overload_matcher import as_overload_list, find_unmatched


def diff_functions(
    fn_descs: Mapping[str, OverloadRecord | Sequence[OverloadRecord]] | None,
    fn_docs: Mapping[str, Sequence[DocRecord]] | None,
    translator: NameTranslator = DEFAULT_TRANSLATOR,
) -> dict[str, list[DocRecord]]:
    """Return ``docs name -> unmatched docs`` for every under-described function.

    Functions are driven by the docs; the result is keyed by the original
    (untranslated) docs name and holds only functions with gaps.
    """
    fn_descs = fn_descs or {}
    res: dict[str, list[DocRecord]] = {}
    for fn_name, docs in (fn_docs or {}).items():
        desc_name = translator.translate(fn_name)
        if translator.is_ignored(desc_name):
            continue
        descs = as_overload_list(fn_descs.get(desc_name))
        missing = find_unmatched(descs, docs)
        if missing:
            res[fn_name] = missing
    return res
