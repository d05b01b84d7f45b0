# topmark:header:start
#
#   project      : Quietmark
#   file         : parser.py
#   file_relpath : src/quietmark/bnf/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error tolerant parser for BNF grammar files.

Recognized structure::

    file       ::= (attrs | rule | <any token>)*
    attrs      ::= '{' (attr | <any token>)* '}'
    attr       ::= ID ['(' ... ')'] ['=' value] [';']
    rule       ::= modifiers? ID '::=' expression [attrs] [';']
    modifiers  ::= MODIFIER+      (on the same line as the rule name)

A rule starts at an identifier run followed by ``::=``; identifiers before the
rule name count as modifiers only when they are keywords from
``RULE_MODIFIERS`` on the same line as the name (``private foo ::= ...``).
An expression runs until ``;``, ``{``, the end of the file or the start of the
next rule. Attribute values run until ``;``, ``}`` or the start of the next
attribute, with ``[...]`` lists kept whole.

Tokens that fit nowhere stay as leaves of the enclosing composite. Trailing
whitespace and comments are never absorbed into the item before them.
"""

from __future__ import annotations

from typing import Final

from quietmark.bnf.lexer import Token, TokenType, tokenize
from quietmark.bnf.psi import BnfComposite, BnfElement, BnfFile, BnfLeaf, ElementType
from quietmark.config.logging import get_logger

logger = get_logger(__name__)

# Grammar-Kit rule modifiers, plus the `rule` keyword some grammars put in front of names.
RULE_MODIFIERS: Final[frozenset[str]] = frozenset(
    {"private", "external", "meta", "inner", "left", "upper", "fake", "rule"}
)


def parse(text: str) -> BnfFile:
    """Parse BNF ``text`` into a lossless tree."""
    parser = _Parser(list(tokenize(text)))
    root: BnfFile = parser.parse_file()
    logger.trace(
        "Parsed %d tokens into %d top-level children", len(parser.tokens), len(root.children)
    )
    return root


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens: list[Token] = tokens
        self.pos: int = 0

    # ---- Token helpers -------------------------------------------------------

    def _at(self, index: int) -> Token | None:
        return self.tokens[index] if index < len(self.tokens) else None

    def _is_op(self, index: int, *ops: str) -> bool:
        tok: Token | None = self._at(index)
        return tok is not None and tok.type is TokenType.OP and tok.text in ops

    def _is_trivia(self, index: int) -> bool:
        tok: Token | None = self._at(index)
        return tok is not None and (tok.type is TokenType.WHITESPACE or tok.type.is_comment)

    def _skip_trivia(self, index: int) -> int:
        while self._is_trivia(index):
            index += 1
        return index

    def _leaf(self) -> BnfLeaf:
        tok: Token = self.tokens[self.pos]
        self.pos += 1
        return BnfLeaf(tok.type, tok.text)

    def _take_trivia(self, into: BnfComposite) -> None:
        while self._is_trivia(self.pos):
            into.append(self._leaf())

    def _take_inline_whitespace(self, into: BnfComposite) -> None:
        tok: Token | None = self._at(self.pos)
        if tok is not None and tok.type is TokenType.WHITESPACE and "\n" not in tok.text:
            into.append(self._leaf())

    # ---- Lookahead -----------------------------------------------------------

    def _rule_start(self, index: int) -> int | None:
        """Return the index of the rule name if a rule starts at ``index``."""
        tok: Token | None = self._at(index)
        if tok is None or tok.type is not TokenType.ID:
            return None
        name: int = index
        while True:
            nxt: int = self._skip_trivia(name + 1)
            if self._is_op(nxt, "::="):
                return name
            candidate: Token | None = self._at(nxt)
            if candidate is None or candidate.type is not TokenType.ID:
                return None
            between: list[Token] = self.tokens[name + 1 : nxt]
            if len(between) != 1 or between[0].type is not TokenType.WHITESPACE:
                return None
            if "\n" in between[0].text:
                return None
            if self.tokens[name].text not in RULE_MODIFIERS:
                return None
            name = nxt

    def _attr_start(self, index: int) -> bool:
        tok: Token | None = self._at(index)
        if tok is None or tok.type is not TokenType.ID:
            return False
        return self._is_op(self._skip_trivia(index + 1), "=", "(")

    # ---- Productions ---------------------------------------------------------

    def parse_file(self) -> BnfFile:
        root = BnfFile()
        while self.pos < len(self.tokens):
            if self._is_op(self.pos, "{"):
                root.append(self._parse_attrs())
            elif self._rule_start(self.pos) is not None:
                root.append(self._parse_rule())
            else:
                root.append(self._leaf())
        return root

    def _parse_rule(self) -> BnfComposite:
        name_index: int | None = self._rule_start(self.pos)
        assert name_index is not None
        rule = BnfComposite(ElementType.RULE)

        if name_index > self.pos:
            modifiers = BnfComposite(ElementType.MODIFIERS)
            while self.pos < name_index:
                modifiers.append(self._leaf())
            # The last whitespace belongs between modifiers and the name.
            if modifiers.children and modifiers.children[-1].is_whitespace:
                last: BnfElement = modifiers.children.pop()
                rule.append(modifiers)
                rule.append(last)
            else:
                rule.append(modifiers)

        rule.append(self._leaf())  # name
        self._take_trivia(rule)
        rule.append(self._leaf())  # ::=
        self._take_inline_whitespace(rule)

        rule.append(self._parse_expression())

        attrs_at: int = self._skip_trivia(self.pos)
        if self._is_op(attrs_at, "{"):
            self._take_trivia(rule)
            rule.append(self._parse_attrs())

        semicolon_at: int = self._skip_trivia(self.pos)
        if self._is_op(semicolon_at, ";") and all(
            tok.type is TokenType.WHITESPACE for tok in self.tokens[self.pos : semicolon_at]
        ):
            self._take_trivia(rule)
            rule.append(self._leaf())
        return rule

    def _parse_expression(self) -> BnfComposite:
        expression = BnfComposite(ElementType.EXPRESSION)
        end: int = self.pos
        index: int = self.pos
        while index < len(self.tokens):
            if self._is_trivia(index):
                index += 1
                continue
            if self._is_op(index, ";", "{", "}") or self._rule_start(index) is not None:
                break
            index += 1
            end = index
        while self.pos < end:
            expression.append(self._leaf())
        return expression

    def _parse_attrs(self) -> BnfComposite:
        attrs = BnfComposite(ElementType.ATTRS)
        attrs.append(self._leaf())  # {
        while self.pos < len(self.tokens):
            if self._is_op(self.pos, "}"):
                attrs.append(self._leaf())
                break
            if self._attr_start(self.pos):
                attrs.append(self._parse_attr())
            else:
                attrs.append(self._leaf())
        return attrs

    def _parse_attr(self) -> BnfComposite:
        attr = BnfComposite(ElementType.ATTR)
        attr.append(self._leaf())  # name

        if self._is_op(self._skip_trivia(self.pos), "("):
            self._take_trivia(attr)
            pattern = BnfComposite(ElementType.ATTR_PATTERN)
            while self.pos < len(self.tokens):
                closing: bool = self._is_op(self.pos, ")")
                pattern.append(self._leaf())
                if closing or self._is_op(self.pos, "}"):
                    break
            attr.append(pattern)

        if self._is_op(self._skip_trivia(self.pos), "="):
            self._take_trivia(attr)
            attr.append(self._leaf())  # =
            self._take_inline_whitespace(attr)
            attr.append(self._parse_value())

        semicolon_at: int = self._skip_trivia(self.pos)
        if self._is_op(semicolon_at, ";") and all(
            tok.type is TokenType.WHITESPACE and "\n" not in tok.text
            for tok in self.tokens[self.pos : semicolon_at]
        ):
            self._take_trivia(attr)
            attr.append(self._leaf())
        return attr

    def _parse_value(self) -> BnfComposite:
        value = BnfComposite(ElementType.VALUE)
        depth: int = 0
        end: int = self.pos
        index: int = self.pos
        while index < len(self.tokens):
            if self._is_trivia(index):
                index += 1
                continue
            if self._is_op(index, "}") or (
                depth == 0
                and (self._is_op(index, ";") or (index > self.pos and self._attr_start(index)))
            ):
                break
            if self._is_op(index, "["):
                depth += 1
            elif self._is_op(index, "]"):
                depth = max(depth - 1, 0)
            index += 1
            end = index
        while self.pos < end:
            value.append(self._leaf())
        return value
