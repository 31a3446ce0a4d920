"""Translation between extracted-doc function names and description names."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

# Names whose representation in the description set differs from the docs
FUNCTION_NAME_DOCS_TO_DESC: Mapping[str, str] = MappingProxyType(
    {
        "new": "constructor",
        "delete": "destructor",
        ".add": "operator_plus",
        ".div": "operator_div",
        ".eq": "operator_eq",
        ".mul": "operator_mul",
        ".sub": "operator_sub",
    }
)

# Description names that are never reported as missing
IGNORED_FUNCTIONS: frozenset[str] = frozenset({"destructor"})


class NameTranslator:
    """Read-only docs -> description name lookup with an ignore list."""

    def __init__(
        self,
        extra_names: Mapping[str, str] | None = None,
        extra_ignored: Iterable[str] | None = None,
    ) -> None:
        """Build the lookup from the built-in tables plus optional extensions."""
        self._names = MappingProxyType(
            {**FUNCTION_NAME_DOCS_TO_DESC, **(extra_names or {})}
        )
        self._ignored = IGNORED_FUNCTIONS | frozenset(extra_ignored or ())

    def translate(self, docs_name: str) -> str:
        """Return the description name for a docs name (identity if unknown)."""
        return self._names.get(docs_name, docs_name)

    def is_ignored(self, desc_name: str) -> bool:
        """Return True if the description name must never be reported."""
        return desc_name in self._ignored


DEFAULT_TRANSLATOR = NameTranslator()


def build_name_translator(config: Mapping) -> NameTranslator:
    """Create the translator from the function name and ignore list config."""
    return NameTranslator(
        extra_names=config.get("function_names") or {},
        extra_ignored=config.get("ignored_functions") or [],
    )
