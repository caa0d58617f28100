"""Where: src/blackd_client/platform/blackd/http_client.py
What: HTTP adapter posting source files to blackd over a pooled session.
Why: Decouple network concerns from response classification.
"""

from __future__ import annotations

import io
from collections.abc import Iterator, Mapping
from typing import BinaryIO, Final, override

import requests
from requests.adapters import HTTPAdapter

from blackd_client.config.config import POOL_MAXSIZE_DEFAULT, REQUEST_TIMEOUT_DEFAULT
from blackd_client.platform.logging import logger
from blackd_client.shared.errors import TransportError

_CHUNK_SIZE: Final[int] = 64 * 1024


class _ResponseStream(io.RawIOBase):
    """Raw reader over a streamed response that reports failures as ``TransportError``."""

    def __init__(self, response: requests.Response) -> None:
        super().__init__()
        self._chunks: Iterator[bytes] = response.iter_content(chunk_size=_CHUNK_SIZE)
        self._pending: bytes = b""

    @override
    def readable(self) -> bool:
        return True

    @override
    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        while not self._pending:
            try:
                chunk = next(self._chunks, None)
            except requests.RequestException as exc:
                raise TransportError(f"couldn't read blackd response: {exc}") from exc
            if chunk is None:
                return 0
            self._pending = chunk

        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size


class HTTPDaemonResponse:
    """Status and streamed body of one blackd reply."""

    status: int
    body: BinaryIO

    def __init__(self, response: requests.Response) -> None:
        self._response: requests.Response = response
        self.status = int(response.status_code)
        self.body = io.BufferedReader(_ResponseStream(response), buffer_size=_CHUNK_SIZE)

    def close(self) -> None:
        """Discard any unread body so the connection returns to the pool."""

        try:
            while self.body.read(_CHUNK_SIZE):
                pass
        except TransportError as exc:
            logger.debug("Dropping blackd connection after failed drain: %s", exc)
        finally:
            self._response.close()


class BlackdHTTPClient:
    """Perform POST requests against blackd with a shared connection pool."""

    def __init__(
        self,
        *,
        timeout: float = REQUEST_TIMEOUT_DEFAULT,
        pool_maxsize: int = POOL_MAXSIZE_DEFAULT,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout: float = timeout
        self._session: requests.Session = session or requests.Session()
        adapter = HTTPAdapter(pool_connections=pool_maxsize, pool_maxsize=pool_maxsize)
        self._session.mount("http://", adapter)

    def post(
        self,
        url: str,
        body: BinaryIO,
        headers: Mapping[str, str],
    ) -> HTTPDaemonResponse:
        """Stream ``body`` to ``url`` and return the unread response.

        Raises:
            TransportError: If blackd cannot be reached or does not answer
                within the configured timeout.
        """
        try:
            response = self._session.post(
                url,
                data=body,
                headers=dict(headers),
                timeout=self.timeout,
                stream=True,
            )
        except requests.RequestException as exc:
            raise TransportError(f"couldn't reach blackd at {url}: {exc}") from exc
        return HTTPDaemonResponse(response)

    def close(self) -> None:
        """Release pooled connections."""

        self._session.close()


__all__ = ["BlackdHTTPClient", "HTTPDaemonResponse"]
