# topmark:header:start
#
#   project      : Quietmark
#   file         : diff.py
#   file_relpath : src/quietmark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview.

Used by ``quietmark suppress --diff`` to show the edit a suppression action
makes before (or after) it is written.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from quietmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from quietmark.config.logging import QuietmarkLogger

logger: QuietmarkLogger = get_logger(__name__)


def compute_patch(before: str, after: str, name: str) -> list[str]:
    """Return a unified diff between two document texts.

    Args:
        before (str): Original text.
        after (str): Updated text.
        name (str): File name shown in the diff headers.

    Returns:
        list[str]: Diff lines (with line endings); empty when the texts are equal.
    """
    patch: list[str] = list(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"{name} (original)",
            tofile=f"{name} (suppressed)",
            n=3,
        )
    )
    logger.debug("Patch for %s has %d lines", name, len(patch))
    return patch


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
