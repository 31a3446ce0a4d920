"""Deterministic case-insensitive ordering of names."""

from collections.abc import Iterable


def sorted_case_insensitive(names: Iterable[str]) -> list[str]:
    """Sort names ignoring case; names equal ignoring case keep a stable order."""
    return sorted(names, key=lambda n: (n.lower(), n))
