"""Tests for the formatting application service."""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from blackd_client.application.services import FormatRequest, FormatService
from blackd_client.application.services.format_service import _default_transport  # pyright: ignore[reportPrivateUsage]
from blackd_client.platform.blackd import BlackdHTTPClient
from blackd_client.shared.errors import ProtocolViolationError

if TYPE_CHECKING:
    from conftest import FakeDaemon

ENDPOINTS = ("http://127.0.0.1:1", "http://127.0.0.1:2")


class _Rewrites:
    def __init__(self) -> None:
        self.calls: dict[str, bytes] = {}

    def __call__(self, path: str, content: bytes) -> None:
        self.calls[path] = content


def _service(daemon: FakeDaemon, **kwargs: object) -> FormatService:
    return FormatService(transport_factory=lambda _request: daemon, **kwargs)  # pyright: ignore[reportArgumentType]


def _sources(tmp_path: Path, count: int) -> list[str]:
    paths: list[str] = []
    for index in range(count):
        path = tmp_path / f"m{index}.py"
        _ = path.write_text(f"value = {index}\n")
        paths.append(str(path))
    return paths


def test_run_uses_every_endpoint_and_counts_each_file(
    tmp_path: Path, fake_daemon: FakeDaemon
) -> None:
    paths = _sources(tmp_path, 12)
    fake_daemon.replies["m3.py"] = (200, b"value = 3  # formatted\n")
    rewrites = _Rewrites()

    report = _service(fake_daemon, rewriter=rewrites).run(
        FormatRequest(roots=(str(tmp_path),), endpoints=ENDPOINTS, max_concurrency=2)
    )

    assert report.total == 12
    assert report.reformatted == 1
    assert report.unchanged == 11
    assert rewrites.calls == {paths[3]: b"value = 3  # formatted\n"}
    assert sorted(request.path for request in fake_daemon.requests) == sorted(paths)
    assert fake_daemon.closed


def test_run_uses_injected_path_source(tmp_path: Path, fake_daemon: FakeDaemon) -> None:
    paths = _sources(tmp_path, 3)
    seen_roots: list[object] = []

    def path_source(roots):
        seen_roots.extend(roots)
        return iter(paths[:2])

    report = _service(fake_daemon, path_source=path_source).run(
        FormatRequest(roots=("anything",), endpoints=ENDPOINTS[:1])
    )

    assert seen_roots == ["anything"]
    assert report.total == 2


def test_diff_requests_go_to_injected_stream(tmp_path: Path, fake_daemon: FakeDaemon) -> None:
    (path,) = _sources(tmp_path, 1)
    fake_daemon.replies["m0.py"] = (200, b"--- In\n+++ Out\n-value = 0\n+value = 0  # x\n")
    output = io.BytesIO()

    report = _service(fake_daemon, diff_output=output).run(
        FormatRequest(roots=(path,), endpoints=ENDPOINTS[:1], diff=True)
    )

    assert fake_daemon.requests[0].headers == {"X-Diff": "1"}
    assert output.getvalue().startswith(f"--- {path}\n+++ {path}\n".encode())
    assert report.exit_code == 0


def test_transport_is_closed_after_fatal_error(tmp_path: Path, fake_daemon: FakeDaemon) -> None:
    (path,) = _sources(tmp_path, 1)
    fake_daemon.default = (302, b"")

    with pytest.raises(ProtocolViolationError):
        _ = _service(fake_daemon).run(FormatRequest(roots=(path,), endpoints=ENDPOINTS[:1]))

    assert fake_daemon.closed


def test_default_transport_pools_at_least_one_connection_per_worker() -> None:
    transport = _default_transport(
        FormatRequest(roots=(), endpoints=ENDPOINTS, max_concurrency=250, pool_maxsize=10, request_timeout=3.0)
    )
    try:
        assert isinstance(transport, BlackdHTTPClient)
        assert transport.timeout == 3.0
    finally:
        transport.close()


def test_request_options_follow_flags() -> None:
    options = FormatRequest(roots=(), endpoints=ENDPOINTS, check=True).options

    assert options.check is True
    assert options.diff is False
    assert options.writes_back is False
