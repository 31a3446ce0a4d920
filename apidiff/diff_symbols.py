"""Logic for listing documented variables and constants lacking descriptions."""

from collections.abc import Mapping

from apidiff.models import SymbolDesc, SymbolDoc


def is_symbol_missing(desc: SymbolDesc | None, doc: SymbolDoc) -> bool:
    """Check whether a documented variable or constant lacks a description.

    A blank description only counts as missing once the docs have text to
    fill it with.
    """
    if desc is None or desc.notes is None:
        return True
    return desc.notes == "" and isinstance(doc.notes, str) and doc.notes != ""


def diff_symbols(
    sym_descs: Mapping[str, SymbolDesc] | None,
    sym_docs: Mapping[str, SymbolDoc] | None,
) -> dict[str, SymbolDoc]:
    """Return ``name -> docs`` for every variable or constant lacking a description."""
    sym_descs = sym_descs or {}
    return {
        name: doc
        for name, doc in (sym_docs or {}).items()
        if is_symbol_missing(sym_descs.get(name), doc)
    }
