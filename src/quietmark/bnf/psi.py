# topmark:header:start
#
#   project      : Quietmark
#   file         : psi.py
#   file_relpath : src/quietmark/bnf/psi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax tree and editable document for BNF grammar files.

The tree is lossless: the document text is the concatenation of all leaf
texts. Composites own their children; whitespace and comments between items
are children of the enclosing composite, never of the item that follows.

[`BnfElement`][quietmark.bnf.psi.BnfElement] implements the
[`Node`][quietmark.tree.protocols.Node] protocol and
[`BnfDocument`][quietmark.bnf.psi.BnfDocument] implements
[`Document`][quietmark.tree.protocols.Document].
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from quietmark.bnf.lexer import TokenType, tokenize
from quietmark.config.logging import get_logger
from quietmark.constants import BNF_LANGUAGE_ID
from quietmark.tree.kinds import NodeKind
from quietmark.tree.traversal import leaves_backward

if TYPE_CHECKING:
    from collections.abc import Iterator

    from quietmark.bnf.lexer import Token
    from quietmark.config.logging import QuietmarkLogger

logger: QuietmarkLogger = get_logger(__name__)


class ElementType(Enum):
    """Composite element types of the BNF tree."""

    FILE = "file"
    RULE = "rule"
    MODIFIERS = "modifiers"
    EXPRESSION = "expression"
    ATTRS = "attrs"
    ATTR = "attr"
    ATTR_PATTERN = "attr-pattern"
    VALUE = "value"


_KIND_BY_TYPE: dict[ElementType, NodeKind] = {
    ElementType.FILE: NodeKind.DOCUMENT,
    ElementType.RULE: NodeKind.RULE,
    ElementType.ATTR: NodeKind.ATTRIBUTE,
}


class BnfElement:
    """Base class of BNF tree nodes."""

    def __init__(self) -> None:
        self.parent: BnfComposite | None = None

    # ---- Node protocol -------------------------------------------------------

    @property
    def kind(self) -> NodeKind:
        return NodeKind.OTHER

    @property
    def text(self) -> str:
        raise NotImplementedError

    @property
    def document(self) -> BnfDocument | None:
        root: BnfElement = self
        while root.parent is not None:
            root = root.parent
        return root.owner if isinstance(root, BnfFile) else None

    @property
    def is_leaf(self) -> bool:
        return False

    @property
    def is_whitespace(self) -> bool:
        return False

    @property
    def is_comment(self) -> bool:
        return False

    def first_leaf(self) -> BnfLeaf | None:
        raise NotImplementedError

    def last_leaf(self) -> BnfLeaf | None:
        raise NotImplementedError

    def prev_leaf(self) -> BnfLeaf | None:
        cur: BnfElement = self
        while cur.parent is not None:
            siblings: list[BnfElement] = cur.parent.children
            for sibling in reversed(siblings[: cur.parent.index_of(cur)]):
                leaf: BnfLeaf | None = sibling.last_leaf()
                if leaf is not None:
                    return leaf
            cur = cur.parent
        return None

    def next_leaf(self) -> BnfLeaf | None:
        cur: BnfElement = self
        while cur.parent is not None:
            siblings: list[BnfElement] = cur.parent.children
            for sibling in siblings[cur.parent.index_of(cur) + 1 :]:
                leaf: BnfLeaf | None = sibling.first_leaf()
                if leaf is not None:
                    return leaf
            cur = cur.parent
        return None

    # ---- Positions -----------------------------------------------------------

    @property
    def offset(self) -> int:
        """Start offset of this element in the document text."""
        first: BnfLeaf | None = self.first_leaf()
        anchor: BnfLeaf | None = first.prev_leaf() if first is not None else self.prev_leaf()
        return sum(len(leaf.text) for leaf in leaves_backward(anchor))

    @property
    def line(self) -> int:
        """1-based line number of this element."""
        document: BnfDocument | None = self.document
        if document is None:
            return 1
        return document.text.count("\n", 0, self.offset) + 1


class BnfLeaf(BnfElement):
    """A token in the tree."""

    def __init__(self, token_type: TokenType, text: str) -> None:
        super().__init__()
        self.token_type: TokenType = token_type
        self._text: str = text

    def __repr__(self) -> str:
        return f"BnfLeaf({self.token_type.value}, {self._text!r})"

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_leaf(self) -> bool:
        return True

    @property
    def is_whitespace(self) -> bool:
        return self.token_type is TokenType.WHITESPACE

    @property
    def is_comment(self) -> bool:
        return self.token_type.is_comment

    def first_leaf(self) -> BnfLeaf | None:
        return self

    def last_leaf(self) -> BnfLeaf | None:
        return self


class BnfComposite(BnfElement):
    """An element with children."""

    def __init__(self, element_type: ElementType, children: list[BnfElement] | None = None) -> None:
        super().__init__()
        self.element_type: ElementType = element_type
        self.children: list[BnfElement] = []
        for child in children or []:
            self.append(child)

    def __repr__(self) -> str:
        return f"BnfComposite({self.element_type.value}, {self.text!r})"

    @property
    def kind(self) -> NodeKind:
        return _KIND_BY_TYPE.get(self.element_type, NodeKind.OTHER)

    @property
    def text(self) -> str:
        return "".join(child.text for child in self.children)

    @property
    def name(self) -> str | None:
        """Name of a rule or attribute (its own identifier leaf)."""
        for child in self.children:
            if isinstance(child, BnfLeaf) and child.token_type is TokenType.ID:
                return child.text
        return None

    def append(self, child: BnfElement) -> None:
        child.parent = self
        self.children.append(child)

    def index_of(self, child: BnfElement) -> int:
        for i, candidate in enumerate(self.children):
            if candidate is child:
                return i
        raise ValueError(f"{child!r} is not a child of {self!r}")

    def first_leaf(self) -> BnfLeaf | None:
        for child in self.children:
            leaf: BnfLeaf | None = child.first_leaf()
            if leaf is not None:
                return leaf
        return None

    def last_leaf(self) -> BnfLeaf | None:
        for child in reversed(self.children):
            leaf: BnfLeaf | None = child.last_leaf()
            if leaf is not None:
                return leaf
        return None

    def walk(self) -> Iterator[BnfElement]:
        """Yield this element and all descendants in document order."""
        yield self
        for child in self.children:
            if isinstance(child, BnfComposite):
                yield from child.walk()
            else:
                yield child

    def composites(self, element_type: ElementType) -> Iterator[BnfComposite]:
        """Yield descendant composites of the given type in document order."""
        for element in self.walk():
            if isinstance(element, BnfComposite) and element.element_type is element_type:
                yield element


class BnfFile(BnfComposite):
    """Root of a BNF tree; knows its owning document."""

    def __init__(self, children: list[BnfElement] | None = None) -> None:
        super().__init__(ElementType.FILE, children)
        self.owner: BnfDocument | None = None


@dataclass
class _Edit:
    """Children of ``parent`` at ``index``: ``removed`` were replaced by ``inserted``."""

    parent: BnfComposite
    index: int
    removed: list[BnfElement]
    inserted: list[BnfElement]


class BnfDocument:
    """An editable BNF document.

    Edits are applied to the tree in place; each edit primitive records one
    undo step.

    Args:
        text (str): Document text.
        name (str): Display name (usually the file path).
        writable (bool): Whether edits are allowed.
        path (Path | None): Backing file, if any.
    """

    language_id: str = BNF_LANGUAGE_ID

    def __init__(
        self,
        text: str,
        *,
        name: str = "<memory>",
        writable: bool = True,
        path: Path | None = None,
    ) -> None:
        from quietmark.bnf.parser import parse

        self.name: str = name
        self.writable: bool = writable
        self.path: Path | None = path
        self.original_text: str = text
        self._history: list[_Edit] = []
        self.root: BnfFile = parse(text)
        self.root.owner = self

    @classmethod
    def from_path(cls, path: Path) -> BnfDocument:
        """Read a document from disk.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        text: str = path.read_text(encoding="utf-8")
        writable: bool = os.access(path, os.W_OK)
        logger.debug("Loaded %s (%d chars, writable=%s)", path, len(text), writable)
        return cls(text, name=str(path), writable=writable, path=path)

    def save(self, path: Path | None = None) -> Path:
        """Write the current text to ``path`` (defaults to the backing file)."""
        target: Path | None = path or self.path
        if target is None:
            raise ValueError(f"No path to save {self.name} to")
        target.write_text(self.text, encoding="utf-8")
        logger.info("Wrote %s", target)
        return target

    # ---- Read helpers --------------------------------------------------------

    @property
    def text(self) -> str:
        return self.root.text

    @property
    def modified(self) -> bool:
        return self.text != self.original_text

    def leaves(self) -> Iterator[BnfLeaf]:
        for element in self.root.walk():
            if isinstance(element, BnfLeaf):
                yield element

    def leaf_count(self) -> int:
        return sum(1 for _ in self.leaves())

    def comments(self) -> list[BnfLeaf]:
        return [leaf for leaf in self.leaves() if leaf.is_comment]

    def rules(self) -> list[BnfComposite]:
        return list(self.root.composites(ElementType.RULE))

    def attrs(self, rule: BnfComposite | None = None) -> list[BnfComposite]:
        """Attributes of ``rule``, or of the global attribute blocks when ``None``."""
        if rule is not None:
            return list(rule.composites(ElementType.ATTR))
        return [
            attr
            for block in self.root.children
            if isinstance(block, BnfComposite) and block.element_type is ElementType.ATTRS
            for attr in block.composites(ElementType.ATTR)
        ]

    def find_rule(self, name: str) -> BnfComposite | None:
        return next((rule for rule in self.rules() if rule.name == name), None)

    def find_attr(self, name: str, rule: BnfComposite | None = None) -> BnfComposite | None:
        return next((attr for attr in self.attrs(rule) if attr.name == name), None)

    # ---- Document protocol: edits --------------------------------------------

    def create_comment(self, text: str) -> BnfLeaf:
        """Build a detached line comment leaf.

        Raises:
            ValueError: If ``text`` does not lex as exactly one line comment.
        """
        tokens: list[Token] = list(tokenize(text))
        if len(tokens) != 1 or tokens[0].type is not TokenType.LINE_COMMENT:
            raise ValueError(f"Not a single BNF line comment: {text!r}")
        return BnfLeaf(TokenType.LINE_COMMENT, text)

    def insert_comment_before(self, comment: BnfElement, anchor: BnfElement) -> None:
        """Insert ``comment`` and a line break before ``anchor``, keeping its indentation."""
        parent: BnfComposite | None = anchor.parent
        if parent is None:
            raise ValueError(f"Cannot insert before the document root of {self.name}")
        newline = BnfLeaf(TokenType.WHITESPACE, "\n" + self._indent_of(anchor))
        self._splice(parent, parent.index_of(anchor), [], [comment, newline])

    def insert_comment_at_start(self, comment: BnfElement) -> None:
        """Insert ``comment`` and a line break at offset 0."""
        self._splice(self.root, 0, [], [comment, BnfLeaf(TokenType.WHITESPACE, "\n")])

    def replace_comment(self, comment: BnfElement, text: str) -> None:
        """Replace an attached comment leaf with a new line comment."""
        parent: BnfComposite | None = comment.parent
        if parent is None or comment.document is not self or not comment.is_comment:
            raise ValueError(f"{comment!r} is not a comment of {self.name}")
        self._splice(parent, parent.index_of(comment), [comment], [self.create_comment(text)])

    def undo(self) -> bool:
        if not self._history:
            return False
        edit: _Edit = self._history.pop()
        end: int = edit.index + len(edit.inserted)
        for child in edit.inserted:
            child.parent = None
        for child in edit.removed:
            child.parent = edit.parent
        edit.parent.children[edit.index : end] = edit.removed
        logger.debug("Undid edit in %s", self.name)
        return True

    def _splice(
        self,
        parent: BnfComposite,
        index: int,
        removed: list[BnfElement],
        inserted: list[BnfElement],
    ) -> None:
        if not self.writable:
            # Raised by callers as DocumentNotWritableError; this guards direct use.
            raise PermissionError(f"Document is not writable: {self.name}")
        for child in removed:
            child.parent = None
        for child in inserted:
            child.parent = parent
        parent.children[index : index + len(removed)] = inserted
        self._history.append(_Edit(parent, index, list(removed), list(inserted)))
        logger.trace("Edit in %s at %d: -%d +%d", self.name, index, len(removed), len(inserted))

    @staticmethod
    def _indent_of(anchor: BnfElement) -> str:
        """Whitespace between the start of ``anchor``'s line and ``anchor``."""
        prefix: list[str] = []
        for leaf in leaves_backward(anchor.prev_leaf()):
            text: str = leaf.text
            if "\n" in text:
                prefix.insert(0, text.rsplit("\n", 1)[1])
                break
            prefix.insert(0, text)
        indent: str = "".join(prefix)
        return indent if indent.strip() == "" else ""
