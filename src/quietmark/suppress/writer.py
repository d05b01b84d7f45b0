# topmark:header:start
#
#   project      : Quietmark
#   file         : writer.py
#   file_relpath : src/quietmark/suppress/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Suppression writer.

Builds the "Suppress for rule / attribute / file" actions and performs the
single document edit each of them stands for:

* rule and attribute containers: merge the check id into a directive comment
  already leading the container, or insert a new directive right before it;
* the document container: insert a file-scope directive at offset 0.

Actions are plain data plus a callback; presenting them (menus, quick-fix
lists) is up to the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from quietmark.config.logging import get_logger
from quietmark.config.model import Config
from quietmark.errors import DocumentNotWritableError
from quietmark.suppress.directive import SuppressionTag, parse_directive
from quietmark.suppress.scanner import ScanMode, leading_comments
from quietmark.tree.kinds import NodeKind
from quietmark.tree.traversal import find_parent

if TYPE_CHECKING:
    from quietmark.config.logging import QuietmarkLogger
    from quietmark.tree.protocols import Document, Node

logger: QuietmarkLogger = get_logger(__name__)

# Order in which actions are offered.
ACTION_SCOPES: Final[tuple[NodeKind, ...]] = (
    NodeKind.RULE,
    NodeKind.ATTRIBUTE,
    NodeKind.DOCUMENT,
)


@dataclass(frozen=True)
class SuppressionAction:
    """One way of suppressing a check: a label, a scope and an apply callback.

    Attributes:
        check_id (str): The check to suppress.
        scope (NodeKind): Kind of container the directive is attached to.
        config (Config): Directive verb, suffix and comment prefix.

    Raises:
        AssertionError: If ``scope`` is not rule, attribute or document.
    """

    check_id: str
    scope: NodeKind
    config: Config

    def __post_init__(self) -> None:
        if self.scope not in ACTION_SCOPES:
            raise AssertionError(f"No suppression container for node kind {self.scope!r}")

    @property
    def label(self) -> str:
        """Human label, e.g. ``Suppress for rule``."""
        return f"Suppress for {self.scope.value}"

    @property
    def suppression_id(self) -> str:
        """Id written into the directive (file-scope variant for documents)."""
        if self.scope is NodeKind.DOCUMENT:
            return self.config.file_scope_id(self.check_id)
        return self.check_id

    def find_container(self, node: Node | None) -> Node | None:
        """Return the nearest node (``node`` included) of this action's scope."""
        return find_parent(node, lambda n: n.kind is self.scope)

    def is_available(self, node: Node | None) -> bool:
        """Return True if ``node`` has a container of this scope in a writable document."""
        container: Node | None = self.find_container(node)
        if container is None:
            return False
        document: Document | None = container.document
        return document is not None and document.writable

    def apply(self, node: Node) -> None:
        """Write the suppression for ``node`` into its document.

        Does nothing when ``node`` has no container of this scope.

        Raises:
            DocumentNotWritableError: If the owning document is read-only.
        """
        container: Node | None = self.find_container(node)
        if container is None:
            logger.info("%s: no %s encloses the node; nothing to do", self.label, self.scope.value)
            return
        document: Document | None = container.document
        if document is None:
            logger.warning("%s: container is detached from any document", self.label)
            return
        if not document.writable:
            raise DocumentNotWritableError(document.name)

        if self.scope is NodeKind.DOCUMENT:
            self._insert_file_directive(document)
        else:
            self._merge_or_insert(document, container)

    def _insert_file_directive(self, document: Document) -> None:
        text: str = SuppressionTag(self.config.verb, (self.suppression_id,)).render(
            self.config.comment_prefix
        )
        logger.debug("Inserting file directive %r into %s", text, document.name)
        document.insert_comment_at_start(document.create_comment(text))

    def _merge_or_insert(self, document: Document, container: Node) -> None:
        for comment in leading_comments(container, ScanMode.BEFORE_NODE):
            tag: SuppressionTag | None = parse_directive(comment.text, self.config.verb)
            if tag is None:
                continue
            merged: SuppressionTag = tag.with_id(self.suppression_id)
            if merged is tag:
                logger.debug("'%s' already listed in %r", self.suppression_id, comment.text)
                return
            text: str = merged.render(self.config.comment_prefix)
            logger.debug("Merging %r -> %r in %s", comment.text, text, document.name)
            document.replace_comment(comment, text)
            return

        text = SuppressionTag(self.config.verb, (self.suppression_id,)).render(
            self.config.comment_prefix
        )
        logger.debug(
            "Inserting directive %r before %s in %s", text, self.scope.value, document.name
        )
        document.insert_comment_before(document.create_comment(text), container)


def list_suppression_actions(
    node: Node | None,
    check_id: str,
    config: Config | None = None,
) -> list[SuppressionAction]:
    """Return the rule, attribute and file actions for ``check_id``.

    ``node`` is accepted for symmetry with hosts that enumerate actions for a
    concrete element; the list is the same for every node. Use
    [`SuppressionAction.is_available`][quietmark.suppress.writer.SuppressionAction.is_available]
    to filter.
    """
    cfg: Config = config or Config.defaults()
    logger.trace("Listing suppression actions for %r (node: %r)", check_id, node)
    return [SuppressionAction(check_id, scope, cfg) for scope in ACTION_SCOPES]
