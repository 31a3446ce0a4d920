"""Translation of native type spellings into documentation type names."""

from collections.abc import Mapping
from types import MappingProxyType

NATIVE_TYPE_TO_DOC_TYPE: Mapping[str, str] = MappingProxyType(
    {
        "AString": "string",
        "bool": "boolean",
        "Byte": "number",
        "char": "number",
        "double": "number",
        "float": "number",
        "ForEachChunkProvider": "cWorld",
        "int": "number",
        "size_t": "number",
        "unsigned": "number",
        "const AString": "string",
        "const char*": "string",
        "Vector3<int>": "Vector3i",
        "Vector3<float>": "Vector3f",
        "Vector3<double>": "Vector3d",
    }
)

SCOPE_SEPARATOR = "::"


class TypeMapper:
    """Read-only native -> documentation type lookup."""

    def __init__(self, extra_types: Mapping[str, str] | None = None) -> None:
        """Build the lookup from the built-in table plus optional extensions."""
        self._types = MappingProxyType(
            {**NATIVE_TYPE_TO_DOC_TYPE, **(extra_types or {})}
        )

    def map_type(self, native_type: str) -> str:
        """Return the documentation spelling of a type (identity if unknown)."""
        return self._types.get(native_type, native_type)

    def split_scoped(self, native_type: str) -> tuple[str, str]:
        """Split ``Outer::Inner`` into the mapped base type and an ``#Inner`` anchor.

        Types without a scope separator get an empty anchor.
        """
        if native_type in self._types:
            return self._types[native_type], ""
        base, sep, member = native_type.partition(SCOPE_SEPARATOR)
        if not sep:
            return self.map_type(native_type), ""
        return self.map_type(base), f"#{member}"


DEFAULT_TYPE_MAPPER = TypeMapper()


def build_type_mapper(config: Mapping) -> TypeMapper:
    """Create the type mapper from the ``type_names`` config."""
    return TypeMapper(extra_types=config.get("type_names") or {})
