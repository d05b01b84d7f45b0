# topmark:header:start
#
#   project      : Quietmark
#   file         : traversal.py
#   file_relpath : src/quietmark/tree/traversal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lazy tree walks over [`Node`][quietmark.tree.protocols.Node].

All walks are generators: they re-read the tree on every call and stop when
the backend returns ``None``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from quietmark.tree.protocols import Node


def generate(seed: Node | None, step: Callable[[Node], Node | None]) -> Iterator[Node]:
    """Yield ``seed``, ``step(seed)``, ``step(step(seed))`` ... until ``None``."""
    cur: Node | None = seed
    while cur is not None:
        yield cur
        cur = step(cur)


def parents(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its ancestors up to and including the root."""
    return generate(node, lambda n: n.parent)


def leaves_forward(start: Node | None) -> Iterator[Node]:
    """Yield ``start`` and every following leaf in document order."""
    return generate(start, lambda n: n.next_leaf())


def leaves_backward(start: Node | None) -> Iterator[Node]:
    """Yield ``start`` and every preceding leaf in reverse document order."""
    return generate(start, lambda n: n.prev_leaf())


def find_parent(node: Node | None, predicate: Callable[[Node], bool]) -> Node | None:
    """Return the first node in ``parents(node)`` matching ``predicate``."""
    if node is None:
        return None
    for candidate in parents(node):
        if predicate(candidate):
            return candidate
    return None


def is_whitespace_or_comment(node: Node) -> bool:
    """True for leaves that do not interrupt a leading comment run."""
    return node.is_whitespace or node.is_comment
