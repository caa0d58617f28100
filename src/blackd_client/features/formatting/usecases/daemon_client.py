"""
Summary: Send one file to blackd and translate the status code into a result.
Why: Pin down blackd's status contract in a single place.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from blackd_client.config.settings import (
    DIFF_HEADER,
    STATUS_CHANGED,
    STATUS_INTERNAL_ERROR,
    STATUS_SYNTAX_ERROR,
    STATUS_UNCHANGED,
)
from blackd_client.shared.errors import ProtocolViolationError

from ..domain.models import DaemonError, DaemonResult
from .ports import DaemonResponse, DaemonTransport


class DaemonClient:
    """Query blackd endpoints through an injected transport."""

    def __init__(self, transport: DaemonTransport) -> None:
        self._transport: DaemonTransport = transport

    @contextmanager
    def query(self, endpoint: str, path: str, *, diff: bool = False) -> Iterator[DaemonResult]:
        """Post the content of ``path`` to ``endpoint``.

        The yielded result's body stays readable until the context exits,
        at which point any unread remainder is discarded.

        Raises:
            OSError: If ``path`` cannot be opened.
            TransportError: If blackd cannot be reached.
            ProtocolViolationError: If blackd answers with an unknown status.
        """
        headers = {DIFF_HEADER: "1"} if diff else {}
        with open(path, "rb") as source:
            response = self._transport.post(endpoint, source, headers)

        try:
            yield self._interpret(endpoint, response)
        finally:
            response.close()

    @staticmethod
    def _interpret(endpoint: str, response: DaemonResponse) -> DaemonResult:
        status = response.status
        if status == STATUS_UNCHANGED:
            return DaemonResult(changed=False)
        if status == STATUS_CHANGED:
            return DaemonResult(changed=True, body=response.body)
        if status == STATUS_SYNTAX_ERROR:
            return DaemonResult(error=DaemonError(syntax=True, message=_read_message(response)))
        if status == STATUS_INTERNAL_ERROR:
            return DaemonResult(error=DaemonError(syntax=False, message=_read_message(response)))
        raise ProtocolViolationError(status, endpoint)


def _read_message(response: DaemonResponse) -> str:
    return response.body.read().decode("utf-8", errors="replace").strip()


__all__ = ["DaemonClient"]
