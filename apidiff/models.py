"""Data models for API descriptions, extracted docs and the resulting diff."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OverloadRecord:
    """A single hand-written description of one function signature."""

    params: str | None = None  # comma-separated, e.g. "BlockX, BlockY, BlockZ"
    returns: str = ""
    notes: str | None = None
    is_static: bool = False


@dataclass(frozen=True)
class ParamDescriptor:
    """One parameter or return value as recovered from source comments."""

    type: str
    name: str | None = None


@dataclass(frozen=True)
class DocRecord:
    """One extracted documentation entry for a function overload."""

    params: tuple[ParamDescriptor, ...] = ()
    returns: tuple[ParamDescriptor, ...] = ()
    desc: str | None = None
    is_static: bool = False


@dataclass(frozen=True)
class SymbolDesc:
    """Hand-written description of a variable or constant."""

    notes: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class SymbolDoc:
    """Extracted documentation of a variable or constant."""

    notes: str | None = None
    type: str | None = None


@dataclass
class ClassDesc:
    """Hand-written description of a class.

    Function values keep the compact external shape: a bare OverloadRecord
    for single-signature functions, a list of them otherwise.
    """

    functions: dict[str, OverloadRecord | list[OverloadRecord]] = field(
        default_factory=dict
    )
    variables: dict[str, SymbolDesc] = field(default_factory=dict)
    constants: dict[str, SymbolDesc] = field(default_factory=dict)


@dataclass
class ClassDocs:
    """Extracted documentation of a class."""

    functions: dict[str, list[DocRecord]] = field(default_factory=dict)
    variables: dict[str, SymbolDoc] = field(default_factory=dict)
    constants: dict[str, SymbolDoc] = field(default_factory=dict)


@dataclass
class ApiDesc:
    """The complete authoritative description set."""

    classes: dict[str, ClassDesc] = field(default_factory=dict)


@dataclass(frozen=True)
class ClassGaps:
    """Documented symbols of one class that lack a description."""

    functions: dict[str, list[DocRecord]] = field(default_factory=dict)
    variables: dict[str, SymbolDoc] = field(default_factory=dict)
    constants: dict[str, SymbolDoc] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """Return True if no slot has any gap."""
        return not (self.functions or self.variables or self.constants)


MissingTree = dict[str, ClassGaps]
