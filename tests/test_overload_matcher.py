"""Tests for arity-based overload matching."""

from apidiff.models import DocRecord, OverloadRecord, ParamDescriptor
from apidiff.overload_matcher import (
    as_overload_list,
    desc_arity,
    doc_arity,
    find_unmatched,
)


def make_doc(*types: str, desc: str = "") -> DocRecord:
    """Create a DocRecord with one parameter per given type."""
    return DocRecord(params=tuple(ParamDescriptor(type=t) for t in types), desc=desc)


def test_desc_arity() -> None:
    """Verify parameter counting on the Params string."""
    assert desc_arity(OverloadRecord()) == 0
    assert desc_arity(OverloadRecord(params="")) == 0
    assert desc_arity(OverloadRecord(params="int")) == 1
    val_three = 3
    assert desc_arity(OverloadRecord(params="X, Y, Z")) == val_three


def test_doc_arity() -> None:
    """Verify parameter counting on documentation entries."""
    assert doc_arity(make_doc()) == 0
    assert doc_arity(make_doc("int", "float")) == len(("int", "float"))


def test_as_overload_list() -> None:
    """Verify normalization of the three description shapes."""
    single = OverloadRecord(params="int")
    assert as_overload_list(None) == []
    assert as_overload_list(single) == [single]
    multi = [single, OverloadRecord()]
    assert as_overload_list(multi) == multi


def test_same_arity_matches_regardless_of_content() -> None:
    """Verify that only the count is compared, never names or types."""
    desc = OverloadRecord(params="BlockX, BlockY", returns="bool")
    doc = DocRecord(
        params=(
            ParamDescriptor(type="cWorld", name="a_World"),
            ParamDescriptor(type="AString", name="a_Name"),
        )
    )
    assert find_unmatched([desc], [doc]) == []


def test_empty_pool_leaves_all_docs_unmatched() -> None:
    """Verify that every doc is unmatched when there are no descriptions."""
    g1 = make_doc()
    g2 = make_doc("int")
    res = find_unmatched([], [g1, g2])
    assert res == [g1, g2]
    assert res[0] is g1
    assert res[1] is g2


def test_no_docs_means_no_gap() -> None:
    """Verify that nothing can be missing when nothing is documented."""
    assert find_unmatched([OverloadRecord(params="int")], []) == []


def test_unmatched_preserves_identity_and_order() -> None:
    """Verify that unmatched docs are the original objects in input order."""
    docs = [make_doc("a", desc="first"), make_doc(), make_doc("b", desc="second")]
    res = find_unmatched([OverloadRecord()], docs)
    assert len(res) == len(docs) - 1
    assert res[0] is docs[0]
    assert res[1] is docs[2]


def test_perfect_permutation_is_fully_described() -> None:
    """Verify full coverage when arities match one-to-one in another order."""
    descs = [
        OverloadRecord(params="a, b, c"),
        OverloadRecord(),
        OverloadRecord(params="a"),
    ]
    docs = [make_doc("x"), make_doc("x", "y", "z"), make_doc()]
    assert find_unmatched(descs, docs) == []


def test_each_description_is_consumed_once() -> None:
    """Verify that one description cannot account for two docs."""
    docs = [make_doc("int"), make_doc("float")]
    res = find_unmatched([OverloadRecord(params="Value")], docs)
    assert res == [docs[1]]


def test_overload_gap() -> None:
    """Verify that only the undescribed arity is reported."""
    zero = make_doc()
    one = make_doc("int")
    assert find_unmatched([OverloadRecord(params="")], [zero, one]) == [one]


def test_surplus_same_arity_docs_are_unmatched() -> None:
    """Verify that docs beyond the same-arity descriptions are reported."""
    descs = [OverloadRecord(params="a, b"), OverloadRecord(params="c, d")]
    docs = [make_doc("x", "y"), make_doc("x", "y"), make_doc("x", "y")]
    res = find_unmatched(descs, docs)
    assert res == [docs[2]]
    assert res[0] is docs[2]
