"""Where: src/blackd_client/config/settings.py
What: Protocol constants, exit codes and user-facing messages.
Why: Keep blackd's wire contract and the CLI's outward behaviour in one place.
"""

from __future__ import annotations

from typing import Final

# Candidate files ------------------------------------------------------------

SOURCE_SUFFIX: Final[str] = ".py"


# blackd wire contract -------------------------------------------------------

# Request header asking blackd for a unified diff instead of full content.
DIFF_HEADER: Final[str] = "X-Diff"

# blackd labels the two sides of its diff with these names; the client
# substitutes the real path into the first and second header line.
DIFF_PLACEHOLDERS: Final[tuple[bytes, bytes]] = (b"In", b"Out")

STATUS_CHANGED: Final[int] = 200
STATUS_UNCHANGED: Final[int] = 204
STATUS_SYNTAX_ERROR: Final[int] = 400
STATUS_INTERNAL_ERROR: Final[int] = 500


# Process exit codes ---------------------------------------------------------

EXIT_OK: Final[int] = 0
EXIT_WOULD_REFORMAT: Final[int] = 1
EXIT_FATAL: Final[int] = 1
EXIT_USAGE: Final[int] = 2
EXIT_INTERNAL_ERROR: Final[int] = 123
EXIT_INTERRUPTED: Final[int] = 130


# Messages -------------------------------------------------------------------

NOTHING_TO_DO_MESSAGE: Final[str] = (
    "No Python files are present to be formatted. Nothing to do 😴"
)


__all__ = [
    "DIFF_HEADER",
    "DIFF_PLACEHOLDERS",
    "EXIT_FATAL",
    "EXIT_INTERNAL_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_OK",
    "EXIT_USAGE",
    "EXIT_WOULD_REFORMAT",
    "NOTHING_TO_DO_MESSAGE",
    "SOURCE_SUFFIX",
    "STATUS_CHANGED",
    "STATUS_INTERNAL_ERROR",
    "STATUS_SYNTAX_ERROR",
    "STATUS_UNCHANGED",
]
