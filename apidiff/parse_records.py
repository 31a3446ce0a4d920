"""Logic for converting raw YAML mappings into description and doc records."""

from typing import Any

from apidiff.as_text import as_text
from apidiff.errors import LoadError
from apidiff.models import (
    ClassDesc,
    ClassDocs,
    DocRecord,
    OverloadRecord,
    ParamDescriptor,
    SymbolDesc,
    SymbolDoc,
)


def _optional_str(v: object) -> str | None:
    return None if v is None else str(v)


def _as_mapping(raw: object, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        msg = f"Malformed {what}: expected a mapping, got {raw!r}"
        raise LoadError(msg)
    return raw


def parse_overload(raw: dict[str, Any]) -> OverloadRecord:
    """Parse a single function description (one <FnDesc> mapping)."""
    return OverloadRecord(
        params=_optional_str(raw.get("Params")),
        returns=as_text(raw.get("Return")),
        notes=_optional_str(raw.get("Notes")),
        is_static=bool(raw.get("IsStatic")),
    )


def parse_function_desc(
    raw: dict[str, Any] | list[dict[str, Any]],
) -> OverloadRecord | list[OverloadRecord]:
    """Parse a function description, keeping the single-record vs list shape."""
    if isinstance(raw, list):
        return [
            parse_overload(_as_mapping(r, "function description")) for r in raw
        ]
    return parse_overload(_as_mapping(raw, "function description"))


def parse_symbol_desc(raw: dict[str, Any] | None) -> SymbolDesc:
    """Parse a variable or constant description."""
    raw = raw or {}
    return SymbolDesc(
        notes=_optional_str(raw.get("Notes")),
        type=_optional_str(raw.get("Type")),
    )


def parse_class_desc(raw: dict[str, Any] | None) -> ClassDesc:
    """Parse one class entry of the description set."""
    raw = raw or {}
    return ClassDesc(
        functions={
            str(name): parse_function_desc(fn)
            for name, fn in (raw.get("Functions") or {}).items()
            if fn is not None
        },
        variables={
            str(name): parse_symbol_desc(v)
            for name, v in (raw.get("Variables") or {}).items()
        },
        constants={
            str(name): parse_symbol_desc(v)
            for name, v in (raw.get("Constants") or {}).items()
        },
    )


def parse_param(raw: dict[str, Any] | str) -> ParamDescriptor:
    """Parse a parameter or return descriptor; a bare string is just a type."""
    if isinstance(raw, str):
        return ParamDescriptor(type=raw)
    return ParamDescriptor(
        type=as_text(raw.get("Type")),
        name=_optional_str(raw.get("Name")),
    )


def parse_doc_record(raw: dict[str, Any]) -> DocRecord:
    """Parse one extracted function documentation entry."""
    return DocRecord(
        params=tuple(parse_param(p) for p in raw.get("Params") or []),
        returns=tuple(parse_param(r) for r in raw.get("Returns") or []),
        desc=_optional_str(raw.get("Desc")),
        is_static=bool(raw.get("IsStatic")),
    )


def parse_symbol_doc(raw: dict[str, Any] | None) -> SymbolDoc:
    """Parse extracted variable or constant docs (``Desc``, else ``Notes``)."""
    raw = raw or {}
    notes = raw.get("Desc")
    if notes is None:
        notes = raw.get("Notes")
    return SymbolDoc(notes=_optional_str(notes), type=_optional_str(raw.get("Type")))


def parse_class_docs(raw: dict[str, Any] | None) -> ClassDocs:
    """Parse one class of the extracted documentation."""
    raw = raw or {}
    functions: dict[str, list[DocRecord]] = {}
    for name, docs in (raw.get("Functions") or {}).items():
        # The extractor always enumerates overloads, tolerate a lone mapping too
        if isinstance(docs, dict):
            docs = [docs]
        functions[str(name)] = [
            parse_doc_record(_as_mapping(d, f"documentation of {name}"))
            for d in docs or []
        ]
    return ClassDocs(
        functions=functions,
        variables={
            str(name): parse_symbol_doc(v)
            for name, v in (raw.get("Variables") or {}).items()
        },
        constants={
            str(name): parse_symbol_doc(v)
            for name, v in (raw.get("Constants") or {}).items()
        },
    )
