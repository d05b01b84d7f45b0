# topmark:header:start
#
#   project      : Quietmark
#   file         : protocols.py
#   file_relpath : src/quietmark/tree/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural protocols for syntax tree backends.

These protocols describe the narrow surface the suppression core consumes.
Nodes are read views over a live document and are only valid for the duration
of one resolution or write call; the document may be re-parsed afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from quietmark.tree.kinds import NodeKind


class Node(Protocol):
    """A syntax tree element (composite or leaf)."""

    @property
    def parent(self) -> Node | None:
        """Enclosing node, or ``None`` for the document root."""
        ...

    @property
    def kind(self) -> NodeKind:
        """Suppression classification of this node."""
        ...

    @property
    def text(self) -> str:
        """Source text spanned by this node."""
        ...

    @property
    def document(self) -> Document | None:
        """Document owning this node, or ``None`` for detached nodes."""
        ...

    @property
    def is_leaf(self) -> bool:
        """True for tokens (including whitespace and comments)."""
        ...

    @property
    def is_whitespace(self) -> bool:
        """True for whitespace leaves."""
        ...

    @property
    def is_comment(self) -> bool:
        """True for comment leaves (line or block)."""
        ...

    def first_leaf(self) -> Node | None:
        """Deepest first leaf of this subtree (the node itself for leaves)."""
        ...

    def prev_leaf(self) -> Node | None:
        """Leaf immediately before this node in document order."""
        ...

    def next_leaf(self) -> Node | None:
        """Leaf immediately after this node in document order."""
        ...


class Document(Protocol):
    """Editable document owning a syntax tree.

    Every mutating primitive is a single undoable edit.
    """

    @property
    def name(self) -> str:
        """Display name (usually the file path)."""
        ...

    @property
    def root(self) -> Node:
        """Document root node (kind `DOCUMENT`)."""
        ...

    @property
    def writable(self) -> bool:
        """Whether edits are allowed."""
        ...

    @property
    def language_id(self) -> str:
        """Language of the document, used to build comments."""
        ...

    def create_comment(self, text: str) -> Node:
        """Build a detached line comment leaf for insertion."""
        ...

    def insert_comment_before(self, comment: Node, anchor: Node) -> None:
        """Insert ``comment`` followed by a line break directly before ``anchor``."""
        ...

    def insert_comment_at_start(self, comment: Node) -> None:
        """Insert ``comment`` followed by a line break at offset 0."""
        ...

    def replace_comment(self, comment: Node, text: str) -> None:
        """Replace the text of an attached comment leaf."""
        ...

    def undo(self) -> bool:
        """Revert the last edit; return False when there is nothing to undo."""
        ...
