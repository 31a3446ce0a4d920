"""Logic for rendering parameter and return descriptors for the diff output."""

from collections.abc import Collection, Sequence

from apidiff.models import ParamDescriptor
from apidiff.type_mapper import DEFAULT_TYPE_MAPPER, TypeMapper

ARG_NAME_PREFIX = "a_"


def class_link(class_name: str, anchor: str = "", text: str | None = None) -> str:
    """Build a cross-reference link token to a documented class."""
    if text is None:
        return f"{{{{{class_name}{anchor}}}}}"
    return f"{{{{{class_name}{anchor}|{text}}}}}"


def format_param(
    param: ParamDescriptor,
    known_classes: Collection[str],
    type_mapper: TypeMapper = DEFAULT_TYPE_MAPPER,
) -> str:
    """Render one descriptor as its name, or as a link if its type is a known class."""
    base_type, anchor = type_mapper.split_scoped(param.type)
    name = param.name or type_mapper.map_type(param.type) or "[unknown]"
    name = name.removeprefix(ARG_NAME_PREFIX)
    if base_type in known_classes:
        return class_link(base_type, anchor, name if param.name else None)
    return name


def format_params(
    params: Sequence[ParamDescriptor] | None,
    known_classes: Collection[str],
    type_mapper: TypeMapper = DEFAULT_TYPE_MAPPER,
) -> str:
    """Render a descriptor sequence as a comma-separated ``Params`` string."""
    if not params:
        return ""
    return ", ".join(format_param(p, known_classes, type_mapper) for p in params)
