# topmark:header:start
#
#   project      : Quietmark
#   file         : lexer.py
#   file_relpath : src/quietmark/bnf/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lossless lexer for BNF grammar files.

Every character of the input ends up in exactly one token, so joining the
token texts reproduces the input. Unknown characters become ``BAD_CHARACTER``
tokens instead of raising; unterminated block comments and strings run to the
end of the file or line respectively.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator


class TokenType(Enum):
    """BNF token types."""

    WHITESPACE = "whitespace"
    LINE_COMMENT = "line-comment"
    BLOCK_COMMENT = "block-comment"
    STRING = "string"
    ID = "id"
    NUMBER = "number"
    OP = "op"
    BAD_CHARACTER = "bad-character"

    @property
    def is_comment(self) -> bool:
        """True for line and block comments."""
        return self in (TokenType.LINE_COMMENT, TokenType.BLOCK_COMMENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed token with its start offset."""

    type: TokenType
    text: str
    offset: int


# Alternatives are tried in order; longer operators come first.
_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    (?P<WHITESPACE>\s+)
  | (?P<LINE_COMMENT>//[^\r\n]*)
  | (?P<BLOCK_COMMENT>/\*.*?(?:\*/|\Z))
  | (?P<STRING>'(?:[^'\\\r\n]|\\.)*'?|"(?:[^"\\\r\n]|\\.)*"?)
  | (?P<ID>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<NUMBER>\d+)
  | (?P<OP>::=|<<|>>|[=;{}()\[\]|*+?,.&!<>:])
    """,
    re.VERBOSE | re.DOTALL,
)


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text`` in order.

    Args:
        text (str): BNF source text.

    Returns:
        Iterator[Token]: Tokens covering ``text`` without gaps.
    """
    pos: int = 0
    end: int = len(text)
    while pos < end:
        match: re.Match[str] | None = _TOKEN_RE.match(text, pos)
        if match is None or match.end() == pos:
            yield Token(TokenType.BAD_CHARACTER, text[pos], pos)
            pos += 1
            continue
        kind: str = match.lastgroup or TokenType.BAD_CHARACTER.name
        yield Token(TokenType[kind], match.group(), pos)
        pos = match.end()
