# topmark:header:start
#
#   project      : Quietmark
#   file         : kinds.py
#   file_relpath : src/quietmark/tree/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed classification of syntax nodes for suppression purposes."""

from __future__ import annotations

from enum import Enum
from typing import Final


class NodeKind(str, Enum):
    """How a node takes part in suppression.

    Attributes:
        RULE: A rule-like declaration; a comment in front of it suppresses
            checks for the rule and everything nested in it.
        ATTRIBUTE: An attribute-like entry, typically inside an attribute block.
        DOCUMENT: The document root; hosts file-scope directives.
        OTHER: Anything else (plain composites, tokens, whitespace, comments).
    """

    RULE = "rule"
    ATTRIBUTE = "attribute"
    DOCUMENT = "file"
    OTHER = "other"


SUPPRESSIBLE_KINDS: Final[frozenset[NodeKind]] = frozenset(
    {NodeKind.RULE, NodeKind.ATTRIBUTE, NodeKind.DOCUMENT}
)
