# topmark:header:start
#
#   project      : Quietmark
#   file         : errors.py
#   file_relpath : src/quietmark/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core exceptions for Quietmark.

These are framework-agnostic; the CLI maps them onto
[`quietmark.cli.errors`][] with sysexits-aligned exit codes.
"""

from __future__ import annotations


class QuietmarkError(Exception):
    """Base class for all recoverable Quietmark errors."""


class DocumentNotWritableError(QuietmarkError):
    """Raised when a suppression is written into a read-only document."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Document is not writable: {name}")
        self.name = name


class ConfigLoadError(QuietmarkError):
    """Raised when a TOML configuration source cannot be read or parsed."""
