# topmark:header:start
#
#   project      : Quietmark
#   file         : exit_codes.py
#   file_relpath : src/quietmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for Quietmark CLI.

Quietmark aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `WOULD_CHANGE=2`, which signals that a dry run would
have edited the document. Click also uses 2 for its own usage errors, so
callers that need to tell the two apart should look at the output.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for Quietmark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Dry run: the suppression would edit the document.
        USAGE_ERROR: Invalid invocation, e.g. an unknown rule. Mirrors ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding error. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        INTERNAL_ERROR: Programming error. Mirrors ``EX_SOFTWARE (70)``.
        IO_ERROR: Error reading or writing a file. Mirrors ``EX_IOERR (74)``.
        PERMISSION_DENIED: Document is read-only. Mirrors ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    INTERNAL_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
