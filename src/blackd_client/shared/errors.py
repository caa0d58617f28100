"""Where: src/blackd_client/shared/errors.py
What: Exception hierarchy shared by the traversal, transport and worker layers.
Why: Separate run-aborting failures from per-path failures at the type level.
"""

from __future__ import annotations

import os


class FatalRunError(RuntimeError):
    """Base class for failures that abort the whole run without draining work."""


class TraversalError(FatalRunError):
    """Raised when a root path given on the command line cannot be traversed."""

    def __init__(self, root: str | os.PathLike[str], cause: OSError) -> None:
        super().__init__(f"error traversing {os.fspath(root)}: {cause}")
        self.root: str = os.fspath(root)
        self.cause: OSError = cause


class ProtocolViolationError(FatalRunError):
    """Raised when blackd answers with a status outside its documented contract."""

    def __init__(self, status: int, endpoint: str) -> None:
        super().__init__(f"unsupported HTTP status from {endpoint}: {status}")
        self.status: int = status
        self.endpoint: str = endpoint


class TransportError(Exception):
    """Raised when a request to blackd fails at the network level."""


__all__ = [
    "FatalRunError",
    "ProtocolViolationError",
    "TransportError",
    "TraversalError",
]
