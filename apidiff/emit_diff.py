"""Rendering of the missing-description tree as a YAML description file.

The output mirrors the layout of the hand-written description set so that
entries can be copied over directly. Classes, functions and symbols are
ordered case-insensitively and single-overload functions use the compact
inline form.
"""

from collections.abc import Collection
from pathlib import Path
from typing import Any

import yaml

from apidiff.collapse_text import collapse_text
from apidiff.format_params import class_link, format_params
from apidiff.models import ClassGaps, DocRecord, MissingTree, SymbolDoc
from apidiff.name_translator import DEFAULT_TRANSLATOR, NameTranslator
from apidiff.sorted_case_insensitive import sorted_case_insensitive
from apidiff.type_mapper import DEFAULT_TYPE_MAPPER, SCOPE_SEPARATOR, TypeMapper


class InlineRecord(dict):
    """A mapping rendered on a single line in flow style."""


class DiffDumper(yaml.SafeDumper):
    """YAML dumper that knows how to render inline records."""


def _represent_inline(dumper: DiffDumper, data: InlineRecord) -> yaml.Node:
    return dumper.represent_mapping("tag:yaml.org,2002:map", data, flow_style=True)


DiffDumper.add_representer(InlineRecord, _represent_inline)


def format_function_doc(
    doc: DocRecord,
    known_classes: Collection[str],
    type_mapper: TypeMapper = DEFAULT_TYPE_MAPPER,
) -> InlineRecord:
    """Render one function overload as a description record."""
    rec = InlineRecord(
        Params=format_params(doc.params, known_classes, type_mapper),
        Return=format_params(doc.returns, known_classes, type_mapper),
    )
    if doc.is_static:
        rec["IsStatic"] = True
    rec["Notes"] = collapse_text(doc.desc)
    return rec


def format_symbol_doc(
    doc: SymbolDoc,
    known_classes: Collection[str],
    type_mapper: TypeMapper = DEFAULT_TYPE_MAPPER,
) -> InlineRecord:
    """Render one variable or constant as a description record."""
    rec = InlineRecord()
    if doc.type:
        # Link on the type as documented, render the mapped spelling
        raw_base = doc.type.partition(SCOPE_SEPARATOR)[0]
        base_type, anchor = type_mapper.split_scoped(doc.type)
        if raw_base in known_classes:
            rec["Type"] = class_link(base_type, anchor)
        else:
            rec["Type"] = type_mapper.map_type(doc.type)
    rec["Notes"] = collapse_text(doc.notes)
    return rec


def _build_class(
    gaps: ClassGaps,
    known_classes: Collection[str],
    translator: NameTranslator,
    type_mapper: TypeMapper,
) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if gaps.functions:
        # Two docs names may share a description name ("new", "constructor")
        grouped: dict[str, list[InlineRecord]] = {}
        for fn_name in sorted_case_insensitive(gaps.functions):
            grouped.setdefault(translator.translate(fn_name), []).extend(
                format_function_doc(d, known_classes, type_mapper)
                for d in gaps.functions[fn_name]
            )
        out["Functions"] = {
            name: recs if len(recs) > 1 else recs[0]
            for name, recs in grouped.items()
        }
    slots = (("Variables", gaps.variables), ("Constants", gaps.constants))
    for header, symbols in slots:
        if symbols:
            out[header] = {
                name: format_symbol_doc(symbols[name], known_classes, type_mapper)
                for name in sorted_case_insensitive(symbols)
            }
    return out


def emit_diff(
    missing: MissingTree,
    known_classes: Collection[str] | None = None,
    translator: NameTranslator = DEFAULT_TRANSLATOR,
    type_mapper: TypeMapper = DEFAULT_TYPE_MAPPER,
) -> str:
    """Render the missing tree as YAML text.

    ``known_classes`` are the class names that parameter, return and symbol
    types are linked to; it defaults to the classes in the tree.
    """
    if known_classes is None:
        known_classes = set(missing)
    doc = {
        cls_name: _build_class(
            missing[cls_name], known_classes, translator, type_mapper
        )
        for cls_name in sorted_case_insensitive(missing)
    }
    return yaml.dump(
        doc,
        Dumper=DiffDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2,
        width=float("inf"),
    )


def write_diff(path: Path, text: str) -> None:
    """Write the rendered diff, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(text)
