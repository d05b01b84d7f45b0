# topmark:header:start
#
#   project      : Quietmark
#   file         : __init__.py
#   file_relpath : src/quietmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration package for Quietmark.

Re-exports the frozen [`Config`][quietmark.config.model.Config] snapshot and its
[`MutableConfig`][quietmark.config.model.MutableConfig] builder. Logging lives in
[`quietmark.config.logging`][] and is imported first so every module logger is a
`QuietmarkLogger`.
"""

from __future__ import annotations

from quietmark.config import logging
from quietmark.config.model import Config, MutableConfig

__all__: list[str] = ["Config", "MutableConfig", "logging"]
