# topmark:header:start
#
#   project      : Quietmark
#   file         : __init__.py
#   file_relpath : src/quietmark/tree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree capability interface used by the suppression core.

The resolver and writer only see [`Node`][quietmark.tree.protocols.Node] and
[`Document`][quietmark.tree.protocols.Document]; any syntax tree backend that
implements these protocols can be suppressed.
"""

from __future__ import annotations

from quietmark.tree.kinds import SUPPRESSIBLE_KINDS, NodeKind
from quietmark.tree.protocols import Document, Node

__all__: list[str] = ["SUPPRESSIBLE_KINDS", "Document", "Node", "NodeKind"]
