# topmark:header:start
#
#   project      : Quietmark
#   file         : __init__.py
#   file_relpath : src/quietmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quietmark package.

Quietmark resolves and writes comment-based suppressions for checks that run
over BNF grammar documents. A check flags a node; Quietmark decides whether a
`// noinspection <id>` comment in front of the node, one of its enclosing
declarations, or the top of the document silences it, and offers actions that
create such comments.
"""

from __future__ import annotations
