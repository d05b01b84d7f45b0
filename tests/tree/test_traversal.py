# topmark:header:start
#
#   project      : Quietmark
#   file         : test_traversal.py
#   file_relpath : tests/tree/test_traversal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the lazy tree walks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quietmark.tree.kinds import SUPPRESSIBLE_KINDS, NodeKind
from quietmark.tree.traversal import (
    find_parent,
    generate,
    is_whitespace_or_comment,
    leaves_backward,
    leaves_forward,
    parents,
)
from tests.conftest import make_document

if TYPE_CHECKING:
    from quietmark.bnf.psi import BnfComposite, BnfDocument


def _pin(doc: BnfDocument) -> BnfComposite:
    foo: BnfComposite | None = doc.find_rule("foo")
    assert foo is not None
    pin: BnfComposite | None = doc.find_attr("pin", foo)
    assert pin is not None
    return pin


def test_generate_stops_at_none() -> None:
    """The sequence ends at the first ``None``."""
    assert list(generate(None, lambda n: n.parent)) == []


def test_parents_include_node_and_root() -> None:
    """``parents`` starts at the node and ends at the root."""
    doc: BnfDocument = make_document("foo ::= a { pin=1 }")
    chain = list(parents(_pin(doc)))
    assert [n.kind for n in chain] == [
        NodeKind.ATTRIBUTE,
        NodeKind.OTHER,
        NodeKind.RULE,
        NodeKind.DOCUMENT,
    ]
    assert chain[-1] is doc.root


def test_leaf_walks_cover_the_document() -> None:
    """Forward and backward leaf walks visit every leaf once."""
    text = "// c\nfoo ::= a { pin=1 }\n"
    doc: BnfDocument = make_document(text)
    forward = list(leaves_forward(doc.root.first_leaf()))
    backward = list(leaves_backward(doc.root.last_leaf()))
    assert "".join(n.text for n in forward) == text
    assert backward == forward[::-1]


def test_find_parent() -> None:
    """The nearest match wins, the node itself included."""
    doc: BnfDocument = make_document("foo ::= a { pin=1 }")
    pin: BnfComposite = _pin(doc)
    assert find_parent(pin, lambda n: n.kind is NodeKind.ATTRIBUTE) is pin
    found = find_parent(pin, lambda n: n.kind is NodeKind.RULE)
    assert found is not None and found.text.startswith("foo ::=")
    assert find_parent(doc.root, lambda n: n.kind is NodeKind.RULE) is None
    assert find_parent(None, lambda n: True) is None


def test_whitespace_or_comment_predicate() -> None:
    """Only whitespace and comment leaves continue a comment run."""
    doc: BnfDocument = make_document("// c\n/* b */ foo ::= a;")
    flags = [is_whitespace_or_comment(leaf) for leaf in doc.leaves()]
    assert flags[:4] == [True, True, True, True]
    assert not any(flags[4:5])
    assert SUPPRESSIBLE_KINDS == {NodeKind.RULE, NodeKind.ATTRIBUTE, NodeKind.DOCUMENT}
