# topmark:header:start
#
#   project      : Quietmark
#   file         : test_document.py
#   file_relpath : tests/bnf/test_document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the editable BNF document and its tree navigation."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from quietmark.bnf.lexer import TokenType
from quietmark.bnf.psi import BnfComposite, BnfDocument, BnfLeaf, ElementType
from quietmark.constants import BNF_LANGUAGE_ID
from tests.conftest import make_document, parametrize

if TYPE_CHECKING:
    from pathlib import Path

SOURCE = "{\n  psiPackage='p'\n}\n// entry\nfoo ::= bar { pin=1 }\nbar ::= 'x';\n"


def _rule(doc: BnfDocument, name: str) -> BnfComposite:
    rule: BnfComposite | None = doc.find_rule(name)
    assert rule is not None
    return rule


def test_lookup_helpers() -> None:
    """Rules and attributes can be found by name; global and rule attributes are separate."""
    doc: BnfDocument = make_document(SOURCE)
    foo: BnfComposite = _rule(doc, "foo")
    assert [r.name for r in doc.rules()] == ["foo", "bar"]
    assert [a.name for a in doc.attrs()] == ["psiPackage"]
    assert [a.name for a in doc.attrs(foo)] == ["pin"]
    assert doc.find_attr("pin") is None
    assert doc.find_attr("pin", foo) is not None
    assert doc.find_rule("missing") is None
    assert [c.text for c in doc.comments()] == ["// entry"]
    assert doc.language_id == BNF_LANGUAGE_ID


def test_every_node_knows_its_document() -> None:
    """Nodes resolve their owning document through the root."""
    doc: BnfDocument = make_document(SOURCE)
    assert all(leaf.document is doc for leaf in doc.leaves())
    assert BnfLeaf(TokenType.ID, "x").document is None


def test_leaf_navigation_crosses_composites() -> None:
    """Previous and next leaf walk across composite boundaries."""
    doc: BnfDocument = make_document(SOURCE)
    foo: BnfComposite = _rule(doc, "foo")
    before = foo.prev_leaf()
    assert before is not None and before.text == "\n"
    assert before.prev_leaf() is not None
    first = foo.first_leaf()
    assert first is not None and first.text == "foo"
    last = foo.last_leaf()
    assert last is not None and last.text == "}"
    after = last.next_leaf()
    assert after is not None and after.text == "\n"
    assert doc.root.prev_leaf() is None


def test_offset_and_line() -> None:
    """Positions are derived from the leaves in front of a node."""
    doc: BnfDocument = make_document(SOURCE)
    bar: BnfComposite = _rule(doc, "bar")
    assert bar.offset == SOURCE.index("bar ::=")
    assert bar.line == 6
    assert _rule(doc, "foo").line == 5


def test_create_comment_builds_detached_leaf() -> None:
    """A valid line comment becomes a detached comment leaf."""
    doc: BnfDocument = make_document("")
    comment: BnfLeaf = doc.create_comment("// ok")
    assert comment.is_comment
    assert comment.parent is None


@parametrize(
    "text",
    ["// a\n// b", "# noinspection X", "-- noinspection X", "; noinspection X", "/* x */", ""],
)
def test_create_comment_rejects_text_that_is_not_one_line_comment(text: str) -> None:
    """Only text that lexes back as a single line comment can be inserted."""
    doc: BnfDocument = make_document("")
    with pytest.raises(ValueError, match="Not a single BNF line comment"):
        doc.create_comment(text)


def test_insert_before_root_is_rejected() -> None:
    """The root has no parent to insert into."""
    doc: BnfDocument = make_document("foo ::= a;")
    with pytest.raises(ValueError):
        doc.insert_comment_before(doc.create_comment("// x"), doc.root)


def test_replace_requires_an_attached_comment() -> None:
    """Only comments of this document can be replaced."""
    doc: BnfDocument = make_document("// a\nfoo ::= a;")
    other: BnfDocument = make_document("// a\nfoo ::= a;")
    with pytest.raises(ValueError):
        doc.replace_comment(_rule(doc, "foo"), "// b")
    with pytest.raises(ValueError):
        doc.replace_comment(other.comments()[0], "// b")
    doc.replace_comment(doc.comments()[0], "// b")
    assert doc.text == "// b\nfoo ::= a;"


def test_read_only_document_refuses_edits() -> None:
    """Edit primitives refuse to touch a read-only document."""
    doc: BnfDocument = make_document("foo ::= a;", writable=False)
    with pytest.raises(PermissionError):
        doc.insert_comment_at_start(doc.create_comment("// x"))
    assert doc.text == "foo ::= a;"


def test_undo_restores_parents() -> None:
    """Undo puts removed nodes back and detaches inserted ones."""
    doc: BnfDocument = make_document("// a\nfoo ::= a;")
    old: BnfLeaf = doc.comments()[0]
    doc.replace_comment(old, "// b")
    new: BnfLeaf = doc.comments()[0]
    assert old.parent is None
    assert doc.undo()
    assert old.parent is doc.root
    assert new.parent is None
    assert not doc.modified


def test_from_path_and_save(tmp_path: Path) -> None:
    """Documents load from and save to disk as UTF-8."""
    path: Path = tmp_path / "grammar.bnf"
    path.write_text("foo ::= 'é';\n", encoding="utf-8")

    doc: BnfDocument = BnfDocument.from_path(path)
    assert doc.name == str(path)
    assert doc.writable is os.access(path, os.W_OK)
    doc.insert_comment_at_start(doc.create_comment("// top"))
    assert doc.modified
    doc.save()

    assert path.read_text(encoding="utf-8") == "// top\nfoo ::= 'é';\n"


def test_save_without_path_fails() -> None:
    """In-memory documents need an explicit target."""
    with pytest.raises(ValueError):
        make_document("foo ::= a;").save()


def test_composite_repr_and_children() -> None:
    """Composites expose their type and children."""
    doc: BnfDocument = make_document("foo ::= a;")
    foo: BnfComposite = _rule(doc, "foo")
    assert foo.element_type is ElementType.RULE
    assert "foo ::= a;" in repr(foo)
    with pytest.raises(ValueError):
        foo.index_of(doc.root)
