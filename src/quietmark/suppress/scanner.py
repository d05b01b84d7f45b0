# topmark:header:start
#
#   project      : Quietmark
#   file         : scanner.py
#   file_relpath : src/quietmark/suppress/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leading comment scanner.

Produces the run of comments that "belongs" to a node: either the comments at
the very top of a document, or the comments immediately in front of a node.
A run is the contiguous sequence of whitespace and comment leaves; the first
leaf that is neither ends it.
"""

from __future__ import annotations

from enum import Enum
from itertools import takewhile
from typing import TYPE_CHECKING

from quietmark.tree.traversal import is_whitespace_or_comment, leaves_backward, leaves_forward

if TYPE_CHECKING:
    from collections.abc import Iterator

    from quietmark.tree.protocols import Node


class ScanMode(Enum):
    """Where a leading comment run starts."""

    DOCUMENT_START = "document-start"
    BEFORE_NODE = "before-node"


def leading_comments(anchor: Node, mode: ScanMode) -> Iterator[Node]:
    """Yield the comment leaves leading ``anchor``.

    Args:
        anchor (Node): The document root (``DOCUMENT_START``) or any node
            (``BEFORE_NODE``).
        mode (ScanMode): Scan direction and starting point.

    Returns:
        Iterator[Node]: A lazy, single-pass sequence of comment leaves: in
            document order for ``DOCUMENT_START``, nearest first for
            ``BEFORE_NODE``.
    """
    if mode is ScanMode.DOCUMENT_START:
        leaves: Iterator[Node] = leaves_forward(anchor.first_leaf())
    else:
        leaves = leaves_backward(anchor.prev_leaf())
    return (leaf for leaf in takewhile(is_whitespace_or_comment, leaves) if leaf.is_comment)
