# topmark:header:start
#
#   project      : Quietmark
#   file         : directive.py
#   file_relpath : src/quietmark/suppress/directive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Suppression directive grammar.

A directive is a single line comment of the form::

    // noinspection BnfUnusedRule, BnfSuspiciousToken

This module parses and renders that text. It works on plain strings and knows
nothing about syntax trees, so it can be tested without a document.

Grammar:
    * the comment must start with a line comment marker (``//``, ``#``, ``--``
      or ``;``), optionally followed by whitespace;
    * then the verb (configurable, ``noinspection`` by default), then at least
      one whitespace character;
    * then one or more ids (``[A-Za-z0-9_.-]+``) separated by commas, whitespace
      or both;
    * trailing whitespace is allowed, anything else is not.

The **whole** comment text must match; otherwise the comment is not a
directive. Malformed text never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from quietmark.constants import LINE_COMMENT_MARKERS

_ID: Final[str] = r"[A-Za-z0-9_.\-]+"
_ID_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"[,\s]+")


@lru_cache(maxsize=16)
def _directive_pattern(verb: str) -> re.Pattern[str]:
    markers: str = "|".join(re.escape(m) for m in LINE_COMMENT_MARKERS)
    return re.compile(
        rf"(?:{markers})\s*{re.escape(verb)}\s+(?P<ids>{_ID}(?:(?:\s*,\s*|\s+){_ID})*)\s*"
    )


@dataclass(frozen=True)
class SuppressionTag:
    """Parsed form of a directive.

    Attributes:
        verb (str): The directive keyword.
        ids (tuple[str, ...]): Unique check ids in source order.
    """

    verb: str
    ids: tuple[str, ...]

    def mentions(self, check_id: str, all_checks_id: str | None = None) -> bool:
        """Return True if ``check_id`` (or the all-checks id) is listed."""
        return check_id in self.ids or (all_checks_id is not None and all_checks_id in self.ids)

    def with_id(self, check_id: str) -> SuppressionTag:
        """Return a tag with ``check_id`` appended unless already present."""
        if check_id in self.ids:
            return self
        return SuppressionTag(verb=self.verb, ids=(*self.ids, check_id))

    def render(self, comment_prefix: str) -> str:
        """Render the directive as comment text (``// verb a, b``)."""
        return f"{comment_prefix} {self.verb} {', '.join(self.ids)}"


def split_ids(id_list: str) -> tuple[str, ...]:
    """Split a raw id list on commas/whitespace, dropping empties and duplicates."""
    seen: dict[str, None] = {}
    for token in _ID_SEPARATOR.split(id_list):
        if token:
            seen.setdefault(token, None)
    return tuple(seen)


def parse_directive(text: str, verb: str) -> SuppressionTag | None:
    """Parse ``text`` as a directive with the given verb.

    Args:
        text (str): Full comment text, including the comment marker.
        verb (str): Expected directive keyword.

    Returns:
        SuppressionTag | None: The parsed tag, or ``None`` if ``text`` is not a
            well-formed directive.
    """
    match: re.Match[str] | None = _directive_pattern(verb).fullmatch(text)
    if match is None:
        return None
    return SuppressionTag(verb=verb, ids=split_ids(match.group("ids")))


def is_id_mentioned(text: str, verb: str, check_id: str, all_checks_id: str | None) -> bool:
    """Return True if ``text`` is a directive listing ``check_id`` (or the all-checks id)."""
    tag: SuppressionTag | None = parse_directive(text, verb)
    return tag is not None and tag.mentions(check_id, all_checks_id)
