"""
Summary: Ports the formatting use cases depend on.
Why: Keep network and filesystem adapters swappable for tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import BinaryIO, Protocol


class DaemonResponse(Protocol):
    """Unread reply from blackd."""

    status: int
    body: BinaryIO

    def close(self) -> None:
        """Discard the unread body and release the connection."""
        ...


class DaemonTransport(Protocol):
    """Something able to post a source file to a blackd endpoint."""

    def post(
        self,
        url: str,
        body: BinaryIO,
        headers: Mapping[str, str],
    ) -> DaemonResponse:
        """Send ``body`` and return the reply; raise ``TransportError`` on failure."""
        ...

    def close(self) -> None:
        ...


class FileRewriterPort(Protocol):
    """Callable replacing a file's content durably."""

    def __call__(self, path: str, content: bytes) -> None:
        ...


__all__ = ["DaemonResponse", "DaemonTransport", "FileRewriterPort"]
