"""
Summary: Turn blackd replies into per-file actions, printing diffs and rewriting files.
Why: Every per-path failure must end as an ``Action.ERROR`` at this boundary.
"""

from __future__ import annotations

import os
from typing import BinaryIO

from blackd_client.config.settings import DIFF_PLACEHOLDERS
from blackd_client.platform.logging import logger
from blackd_client.shared.errors import TransportError

from ..domain.models import Action, DaemonResult, FormatOptions
from .daemon_client import DaemonClient
from .ports import FileRewriterPort


def process_path(
    client: DaemonClient,
    endpoint: str,
    path: str,
    options: FormatOptions,
    *,
    rewriter: FileRewriterPort,
    diff_output: BinaryIO,
) -> Action:
    """Format ``path`` through ``endpoint`` and report the outcome.

    Transport, daemon and I/O failures are logged against the path and
    returned as ``Action.ERROR``. ``ProtocolViolationError`` propagates.
    """
    extra = {"source_path": path}
    try:
        with client.query(endpoint, path, diff=options.diff) as result:
            return classify(
                path,
                result,
                options,
                rewriter=rewriter,
                diff_output=diff_output,
            )
    except TransportError as exc:
        logger.error("error: cannot format %s: %s", path, exc, extra=extra)
    except OSError as exc:
        logger.error("cannot format %s: %s", path, exc, extra=extra)
    return Action.ERROR


def classify(
    path: str,
    result: DaemonResult,
    options: FormatOptions,
    *,
    rewriter: FileRewriterPort,
    diff_output: BinaryIO,
) -> Action:
    """Map a daemon result to an action, applying check and diff semantics.

    Args:
        path: File the result belongs to.
        result: Reply obtained from ``DaemonClient.query``.
        options: Check and diff flags for the run.
        rewriter: Called with the new content when the file is written back.
        diff_output: Binary stream receiving rendered diffs.

    Returns:
        Action: Outcome for ``path``.

    Raises:
        TransportError: If the body cannot be read from blackd.
        OSError: If the diff cannot be written to ``diff_output``.
    """
    extra = {"source_path": path}

    if result.error is not None:
        if result.error.syntax:
            logger.error("%s: %s", path, result.error.message, extra=extra)
        else:
            logger.error("cannot format %s: %s", path, result.error.message, extra=extra)
        return Action.ERROR

    if not result.changed:
        logger.debug("%s already well formatted", path, extra=extra)
        return Action.UNCHANGED

    if result.body is None:
        logger.error("%s: internal error: blackd returned no content", path, extra=extra)
        return Action.ERROR

    if options.diff:
        rendered = render_diff(path, result.body)
        if rendered is None:
            logger.error(
                "%s: internal error: blackd returned an invalid diff", path, extra=extra
            )
            return Action.ERROR
        # One write per diff keeps concurrent workers from interleaving output.
        _ = diff_output.write(rendered)
        diff_output.flush()

    if not options.writes_back:
        logger.info("would reformat %s", path, extra=extra)
        return Action.WOULD_BE_REFORMATTED

    content = result.body.read()
    try:
        rewriter(path, content)
    except OSError as exc:
        logger.error("%s: formatting failed: %s", path, exc, extra=extra)
        return Action.ERROR

    logger.info("reformatted %s", path, extra=extra)
    return Action.REFORMATTED


def render_diff(path: str, diff: BinaryIO) -> bytes | None:
    """Substitute ``path`` into blackd's diff header.

    blackd names the two sides of its diff ``In`` and ``Out``. The first
    occurrence of each placeholder in the first and second line is replaced;
    the rest of the diff is returned untouched.

    Returns:
        The rewritten diff, or ``None`` when a header line is missing or does
        not carry its placeholder.
    """
    encoded_path = os.fsencode(path)
    headers: list[bytes] = []
    for placeholder in DIFF_PLACEHOLDERS:
        line = diff.readline()
        if not line.endswith(b"\n") or placeholder not in line:
            return None
        headers.append(line.replace(placeholder, encoded_path, 1))
    return b"".join(headers) + diff.read()


__all__ = ["classify", "process_path", "render_diff"]
