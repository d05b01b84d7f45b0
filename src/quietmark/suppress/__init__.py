# topmark:header:start
#
#   project      : Quietmark
#   file         : __init__.py
#   file_relpath : src/quietmark/suppress/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment-based check suppression.

* [`quietmark.suppress.directive`][]: directive grammar (pure string functions).
* [`quietmark.suppress.scanner`][]: leading comment runs.
* [`quietmark.suppress.resolver`][]: "is this check suppressed here?".
* [`quietmark.suppress.writer`][]: "suppress for rule / attribute / file" actions.
* [`quietmark.suppress.suppressor`][]: the host-facing facade.
"""

from __future__ import annotations

from quietmark.suppress.resolver import SuppressionResolver
from quietmark.suppress.suppressor import CommentSuppressor
from quietmark.suppress.writer import SuppressionAction, list_suppression_actions

__all__: list[str] = [
    "CommentSuppressor",
    "SuppressionAction",
    "SuppressionResolver",
    "list_suppression_actions",
]
