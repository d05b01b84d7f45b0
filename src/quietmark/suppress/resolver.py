# topmark:header:start
#
#   project      : Quietmark
#   file         : resolver.py
#   file_relpath : src/quietmark/suppress/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Suppression resolver.

Decides whether a check is suppressed for a node by reading directive comments
at two scopes:

1. **File scope**: the comments at the very top of the document. Here the
   directive must list the file-scope id (``<check>ForFile``). A match wins
   outright, regardless of any narrower directive.
2. **Ancestor scope**: for the node and each enclosing node below the document
   root, the comments immediately in front of it. Here the directive must list
   the plain check id. The first match while ascending wins.

Either scope also honors the all-checks id (``ALL``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quietmark.config.logging import get_logger
from quietmark.config.model import Config
from quietmark.suppress.directive import is_id_mentioned
from quietmark.suppress.scanner import ScanMode, leading_comments
from quietmark.tree.kinds import SUPPRESSIBLE_KINDS
from quietmark.tree.traversal import parents

if TYPE_CHECKING:
    from quietmark.config.logging import QuietmarkLogger
    from quietmark.tree.protocols import Document, Node

logger: QuietmarkLogger = get_logger(__name__)


class SuppressionResolver:
    """Read-only suppression lookups against a live document."""

    def __init__(self, config: Config | None = None) -> None:
        self.config: Config = config or Config.defaults()

    def is_suppressed(self, node: Node, check_id: str) -> bool:
        """Return True if a directive suppresses ``check_id`` for ``node``.

        Args:
            node (Node): The flagged node. Only rule, attribute and document nodes
                are suppressible; any other node yields False.
            check_id (str): Identifier of the check that flagged the node.

        Returns:
            bool: True if a file-scope or ancestor-scope directive applies.
        """
        if node.kind not in SUPPRESSIBLE_KINDS:
            logger.trace("Node kind %s is not suppressible", node.kind.value)
            return False

        document: Document | None = node.document
        root: Node | None = document.root if document is not None else None

        if root is not None and self.is_suppressed_in_comment(
            root, self.config.file_scope_id(check_id), ScanMode.DOCUMENT_START
        ):
            logger.debug("'%s' suppressed for the whole document", check_id)
            return True

        for ancestor in parents(node):
            if ancestor is root:
                break
            if self.is_suppressed_in_comment(ancestor, check_id, ScanMode.BEFORE_NODE):
                logger.debug("'%s' suppressed by comment before %s", check_id, ancestor.kind.value)
                return True
        return False

    def is_suppressed_in_comment(self, anchor: Node, check_id: str, mode: ScanMode) -> bool:
        """Return True if a comment in the leading run of ``anchor`` lists ``check_id``."""
        for comment in leading_comments(anchor, mode):
            logger.trace("Inspecting comment %r for '%s'", comment.text, check_id)
            if is_id_mentioned(comment.text, self.config.verb, check_id, self.config.all_checks_id):
                return True
        return False
