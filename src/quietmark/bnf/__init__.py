# topmark:header:start
#
#   project      : Quietmark
#   file         : __init__.py
#   file_relpath : src/quietmark/bnf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BNF grammar backend.

A lossless lexer, an error tolerant parser and an editable document for
Grammar-Kit style ``.bnf`` files. The document implements the tree protocols
of [`quietmark.tree`][] so the suppression core can run against it.
"""

from __future__ import annotations

from quietmark.bnf.parser import parse
from quietmark.bnf.psi import BnfComposite, BnfDocument, BnfElement, BnfLeaf, ElementType

__all__: list[str] = [
    "BnfComposite",
    "BnfDocument",
    "BnfElement",
    "BnfLeaf",
    "ElementType",
    "parse",
]
