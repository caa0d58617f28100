"""Tests for command line argument handling."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from blackd_client.ui.cli.args import ArgumentParser


@pytest.fixture
def setup_logger_mock(mocker: MockerFixture):
    return mocker.patch("blackd_client.ui.cli.args.parser.setup_logger")


def test_create_parser_accepts_all_flags() -> None:
    parser = ArgumentParser.create_parser()

    args = parser.parse_args(
        ["--port", "1", "--port", "2", "--check", "--diff", "-j", "3", "--timeout", "1.5", "src"]
    )

    assert args.port == [1, 2]
    assert args.check is True
    assert args.diff is True
    assert args.jobs == 3
    assert args.timeout == 1.5
    assert args.files == ["src"]


@pytest.mark.parametrize("port", ["0", "65536", "http"])
def test_invalid_port_is_rejected(port: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.create_parser().parse_args(["--port", port])

    assert excinfo.value.code == 2


def test_verbose_and_quiet_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["-v", "-q"])


def test_process_args_builds_endpoints(setup_logger_mock) -> None:
    args = ArgumentParser.process_args(["--port", "45484", "--port", "45485", "a.py", "pkg"])

    assert args.endpoints == ["http://127.0.0.1:45484", "http://127.0.0.1:45485"]
    assert args.files == ["a.py", "pkg"]
    assert args.jobs == 1
    assert args.check is False
    setup_logger_mock.assert_called_once_with(log_file=None, console_level=logging.INFO)


@pytest.mark.parametrize(
    ("flag", "level"),
    [("-v", logging.DEBUG), ("-q", logging.ERROR)],
)
def test_verbosity_sets_console_level(flag: str, level: int, setup_logger_mock) -> None:
    _ = ArgumentParser.process_args(["--port", "1", flag])

    assert setup_logger_mock.call_args.kwargs["console_level"] == level


def test_config_file_supplies_defaults(tmp_path: Path, setup_logger_mock) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text(
        'host = "localhost"\nports = [7000]\nmax_concurrency = 4\nrequest_timeout = 9\n'
    )

    args = ArgumentParser.process_args(["--config", str(config_file)])

    assert args.endpoints == ["http://localhost:7000"]
    assert args.jobs == 4
    assert args.timeout == 9.0


def test_command_line_overrides_config(tmp_path: Path, setup_logger_mock) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text("ports = [7000]\nmax_concurrency = 4\n")

    args = ArgumentParser.process_args(
        ["--config", str(config_file), "--port", "8000", "-j", "2", "--host", "blackd.local"]
    )

    assert args.endpoints == ["http://blackd.local:8000"]
    assert args.jobs == 2


def test_missing_port_is_a_usage_error(
    setup_logger_mock, caplog: pytest.LogCaptureFixture
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["src"])

    assert excinfo.value.code == 2
    assert "No blackd port given" in caplog.text


@pytest.mark.parametrize("extra", [["-j", "0"], ["--timeout", "0"], ["--timeout", "-1"]])
def test_non_positive_limits_are_usage_errors(extra: list[str], setup_logger_mock) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["--port", "1", *extra])

    assert excinfo.value.code == 2
