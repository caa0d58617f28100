"""Shared pytest fixtures: an in-memory blackd double and config isolation."""

from __future__ import annotations

import io
import os
import threading
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

import pytest

Reply = tuple[int, bytes] | Exception | Callable[[bytes, Mapping[str, str]], tuple[int, bytes]]


@dataclass
class FakeResponse:
    """Scripted blackd reply that remembers whether it was closed."""

    status: int
    body: BinaryIO
    closed: bool = False

    def close(self) -> None:
        self.closed = True


@dataclass
class RecordedRequest:
    url: str
    path: str
    content: bytes
    headers: dict[str, str]


@dataclass
class FakeDaemon:
    """Transport double answering per file name, ``204`` by default."""

    replies: dict[str, Reply] = field(default_factory=dict)
    default: Reply = (204, b"")
    requests: list[RecordedRequest] = field(default_factory=list)
    responses: list[FakeResponse] = field(default_factory=list)
    closed: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def post(self, url: str, body: BinaryIO, headers: Mapping[str, str]) -> FakeResponse:
        path = str(getattr(body, "name", ""))
        content = body.read()
        with self._lock:
            self.requests.append(RecordedRequest(url, path, content, dict(headers)))

        reply = self.replies.get(os.path.basename(path), self.default)
        if isinstance(reply, Exception):
            raise reply
        status, payload = reply(content, headers) if callable(reply) else reply

        response = FakeResponse(status, io.BytesIO(payload))
        with self._lock:
            self.responses.append(response)
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_daemon() -> FakeDaemon:
    """Provide a fresh in-memory blackd double."""

    return FakeDaemon()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration lookups at a missing file and reset the cache."""

    import blackd_client.config.config as config_module

    config_path = tmp_path / "blackd-client" / "config.toml"
    monkeypatch.setenv("BLACKD_CLIENT_CONFIG", str(config_path))
    monkeypatch.setattr(config_module.Config, "_instance", None)
    monkeypatch.setattr(config_module.Config, "_loaded_from", None)
    yield config_path
