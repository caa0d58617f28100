"""Application service for formatting source trees through blackd.

This layer centralizes construction of the transport, daemon client and
worker pool so the CLI only deals with parsed arguments and presentation.
"""

from __future__ import annotations

import functools
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import BinaryIO, Callable, final

from blackd_client.config.config import (
    MAX_CONCURRENCY_DEFAULT,
    POOL_MAXSIZE_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
)
from blackd_client.features.formatting import (
    Action,
    DaemonClient,
    FormatOptions,
    RunReport,
    WorkerPool,
    process_path,
)
from blackd_client.features.formatting.usecases.ports import DaemonTransport, FileRewriterPort
from blackd_client.platform.blackd import BlackdHTTPClient
from blackd_client.platform.filesystem import StrPath, iter_source_files, overwrite_file
from blackd_client.platform.logging import logger


@dataclass(frozen=True)
class FormatRequest:
    """Input parameters for one formatting run.

    Attributes:
        roots: Files and directories to scan for Python sources.
        endpoints: blackd base URLs, e.g. ``http://127.0.0.1:45484``.
        check: Report pending changes without writing.
        diff: Print a diff for each changed file instead of writing.
        max_concurrency: Workers issuing requests against each endpoint.
        request_timeout: Seconds allowed for a single request.
        pool_maxsize: Pooled connections kept per endpoint.
    """

    roots: tuple[StrPath, ...]
    endpoints: tuple[str, ...]
    check: bool = False
    diff: bool = False
    max_concurrency: int = MAX_CONCURRENCY_DEFAULT
    request_timeout: float = REQUEST_TIMEOUT_DEFAULT
    pool_maxsize: int = POOL_MAXSIZE_DEFAULT

    @property
    def options(self) -> FormatOptions:
        """Mode flags handed to the classifier and the report."""

        return FormatOptions(check=self.check, diff=self.diff)


def _default_transport(request: FormatRequest) -> DaemonTransport:
    # Never fewer pooled connections than workers hitting the same endpoint.
    return BlackdHTTPClient(
        timeout=request.request_timeout,
        pool_maxsize=max(request.pool_maxsize, request.max_concurrency),
    )


@final
class FormatService:
    """Application service that runs a formatting pass over the requested roots."""

    def __init__(
        self,
        *,
        transport_factory: Callable[[FormatRequest], DaemonTransport] | None = None,
        path_source: Callable[[Iterable[StrPath]], Iterator[str]] | None = None,
        rewriter: FileRewriterPort | None = None,
        diff_output: BinaryIO | None = None,
    ) -> None:
        """Create a service with overridable infrastructure collaborators.

        Tests can inject a fake transport and in-memory streams while
        production code relies on the HTTP client, the filesystem and stdout.
        """

        self._transport_factory: Callable[[FormatRequest], DaemonTransport] = (
            transport_factory or _default_transport
        )
        self._path_source: Callable[[Iterable[StrPath]], Iterator[str]] = (
            path_source or iter_source_files
        )
        self._rewriter: FileRewriterPort = rewriter or overwrite_file
        self._diff_output: BinaryIO | None = diff_output

    def run(self, request: FormatRequest) -> RunReport:
        """Format every candidate file below ``request.roots``.

        Args:
            request: Formatting run parameters.

        Returns:
            RunReport: Tally of outcomes for all processed files.

        Raises:
            FatalRunError: If traversal fails at a root or blackd violates
                its status contract.
        """
        report = RunReport(options=request.options)
        transport = self._transport_factory(request)
        try:
            client = DaemonClient(transport)
            handler = functools.partial(
                self._process,
                client,
                options=request.options,
                diff_output=self._diff_output or sys.stdout.buffer,
            )
            pool = WorkerPool(
                request.endpoints,
                handler,
                workers_per_endpoint=request.max_concurrency,
            )
            logger.debug(
                "Formatting run started [endpoints=%d, workers=%d, check=%s, diff=%s]",
                len(request.endpoints),
                pool.size,
                request.check,
                request.diff,
            )
            return pool.run(self._path_source(request.roots), report)
        finally:
            transport.close()

    def _process(
        self,
        client: DaemonClient,
        endpoint: str,
        path: str,
        *,
        options: FormatOptions,
        diff_output: BinaryIO,
    ) -> Action:
        return process_path(
            client,
            endpoint,
            path,
            options,
            rewriter=self._rewriter,
            diff_output=diff_output,
        )
