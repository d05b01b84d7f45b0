# topmark:header:start
#
#   project      : Quietmark
#   file         : suppressor.py
#   file_relpath : src/quietmark/suppress/suppressor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host-facing suppressor.

Bundles the resolver and the writer behind the two calls an inspection host
makes: "is this finding suppressed?" and "how can the user suppress it?".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quietmark.config.logging import get_logger
from quietmark.config.model import Config
from quietmark.suppress.resolver import SuppressionResolver
from quietmark.suppress.writer import list_suppression_actions

if TYPE_CHECKING:
    from quietmark.config.logging import QuietmarkLogger
    from quietmark.suppress.writer import SuppressionAction
    from quietmark.tree.protocols import Node

logger: QuietmarkLogger = get_logger(__name__)


class CommentSuppressor:
    """Comment-based suppressor for one configuration."""

    def __init__(self, config: Config | None = None) -> None:
        self.config: Config = config or Config.defaults()
        self.resolver: SuppressionResolver = SuppressionResolver(self.config)

    def get_suppress_actions(self, node: Node | None, check_id: str) -> list[SuppressionAction]:
        """Return the rule, attribute and file suppression actions for ``check_id``."""
        actions: list[SuppressionAction] = list_suppression_actions(node, check_id, self.config)
        logger.trace("Offering %d suppression actions for '%s'", len(actions), check_id)
        return actions

    def is_suppressed_for(self, node: Node, check_id: str) -> bool:
        """Return True if ``check_id`` is suppressed for ``node``."""
        suppressed: bool = self.resolver.is_suppressed(node, check_id)
        logger.debug(
            "'%s' is %s for %s", check_id, "suppressed" if suppressed else "active", node.kind.value
        )
        return suppressed
