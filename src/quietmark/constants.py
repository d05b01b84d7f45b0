# topmark:header:start
#
#   project      : Quietmark
#   file         : constants.py
#   file_relpath : src/quietmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quietmark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    QUIETMARK_VERSION: str = get_version("quietmark")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    QUIETMARK_VERSION = "0.0.0"

# Config discovery
QUIETMARK_TOML_NAME: Final[str] = "quietmark.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Directive defaults (the `[suppress]` table overrides them)
DEFAULT_SUPPRESS_VERB: Final[str] = "noinspection"
DEFAULT_FILE_SCOPE_SUFFIX: Final[str] = "ForFile"
DEFAULT_ALL_CHECKS_ID: Final[str] = "ALL"
DEFAULT_COMMENT_PREFIX: Final[str] = "//"

# Line comment markers recognized when reading a directive.
LINE_COMMENT_MARKERS: Final[tuple[str, ...]] = ("//", "#", "--", ";")

# Markers the BNF lexer reads back as line comments; only these may be written.
WRITABLE_COMMENT_PREFIXES: Final[tuple[str, ...]] = ("//",)

BNF_LANGUAGE_ID: Final[str] = "BNF"
