# topmark:header:start
#
#   project      : Quietmark
#   file         : keys.py
#   file_relpath : src/quietmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Centralized TOML keys for Quietmark configuration.

Keys defined here represent the *external configuration API* as it appears in
`quietmark.toml` and in `[tool.quietmark]` inside `pyproject.toml`. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Quietmark configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_QUIETMARK: Final[str] = "quietmark"

    # [suppress]
    SECTION_SUPPRESS: Final[str] = "suppress"

    KEY_VERB: Final[str] = "verb"
    KEY_FILE_SCOPE_SUFFIX: Final[str] = "file_scope_suffix"
    KEY_ALL_CHECKS_ID: Final[str] = "all_checks_id"
    KEY_COMMENT_PREFIX: Final[str] = "comment_prefix"
