"""Matching of extracted function docs against hand-written overload descriptions.

Only the parameter count is compared. Parameter names and types are never
looked at, so two overloads with the same arity are interchangeable here.
"""

from collections.abc import Sequence

from apidiff.models import DocRecord, OverloadRecord


def desc_arity(desc: OverloadRecord) -> int:
    """Return the number of parameters in a description's ``Params`` string."""
    if not desc.params:
        return 0
    return desc.params.count(",") + 1


def doc_arity(doc: DocRecord) -> int:
    """Return the number of parameters of a documentation entry."""
    return len(doc.params)


def desc_matches_doc(desc: OverloadRecord, doc: DocRecord) -> bool:
    """Check whether a description can account for a documentation entry."""
    return desc_arity(desc) == doc_arity(doc)


def as_overload_list(
    descs: OverloadRecord | Sequence[OverloadRecord] | None,
) -> list[OverloadRecord]:
    """Normalize a missing, single or multi-overload description to a list."""
    if descs is None:
        return []
    if isinstance(descs, OverloadRecord):
        return [descs]
    return list(descs)


def find_unmatched(
    descs: Sequence[OverloadRecord],
    docs: Sequence[DocRecord],
) -> list[DocRecord]:
    """Return the docs that have no corresponding description, in input order.

    Each description can account for at most one doc. Free descriptions are
    scanned in ascending index order and the first one with equal arity is
    consumed. An empty result means the function is fully described.
    """
    free = list(range(len(descs)))
    unmatched: list[DocRecord] = []
    for doc in docs:
        for pos, idx in enumerate(free):
            if desc_matches_doc(descs[idx], doc):
                del free[pos]
                break
        else:
            unmatched.append(doc)
    return unmatched
