"""Exceptions raised while loading the description and documentation sets."""


class ApiDiffError(Exception):
    """Base exception for API diff failures."""


class LoadError(ApiDiffError):
    """Raised when an input set cannot be loaded."""


class DuplicateDocsError(LoadError):
    """Raised when two documentation fragments describe the same class."""
