"""Filesystem helpers: candidate discovery and in-place rewriting."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable, Iterator

from blackd_client.config.settings import SOURCE_SUFFIX
from blackd_client.platform.logging import logger
from blackd_client.shared.errors import TraversalError

StrPath = str | os.PathLike[str]


def iter_source_files(roots: Iterable[StrPath], suffix: str = SOURCE_SUFFIX) -> Iterator[str]:
    """Yield candidate source files found beneath ``roots``.

    Directories are walked recursively and symbolic links are followed. A
    candidate is any entry whose name ends with ``suffix`` and which resolves
    to a regular file. Entries that cannot be inspected are logged and
    skipped.

    Args:
        roots: Files or directories given by the user.
        suffix: File name suffix identifying candidates.

    Yields:
        str: Candidate paths, in no particular order.

    Raises:
        TraversalError: If a root itself cannot be inspected.
    """
    for root in roots:
        root_path = os.fspath(root)
        try:
            root_stat = os.stat(root_path)
        except OSError as exc:
            raise TraversalError(root_path, exc) from exc

        if stat.S_ISDIR(root_stat.st_mode):
            yield from _walk(root_path, frozenset({_identity(root_stat)}), suffix)
        elif stat.S_ISREG(root_stat.st_mode) and root_path.endswith(suffix):
            yield root_path


def _walk(directory: str, ancestors: frozenset[tuple[int, int]], suffix: str) -> Iterator[str]:
    # ``ancestors`` holds the directories on the current descent chain only,
    # so the same tree reached through two different links is walked twice.
    try:
        with os.scandir(directory) as scanner:
            entries = list(scanner)
    except OSError as exc:
        _log_skip(directory, exc)
        return

    for entry in entries:
        try:
            if entry.is_dir():
                entry_stat = entry.stat()
                identity = _identity(entry_stat)
                if identity in ancestors:
                    logger.warning(
                        "skipping %s: symbolic link loop",
                        entry.path,
                        extra={"source_path": entry.path},
                    )
                    continue
                yield from _walk(entry.path, ancestors | {identity}, suffix)
            elif entry.name.endswith(suffix):
                # Follows the link; dangling links raise here.
                if stat.S_ISREG(entry.stat().st_mode):
                    yield entry.path
        except OSError as exc:
            _log_skip(entry.path, exc)


def _identity(entry_stat: os.stat_result) -> tuple[int, int]:
    return entry_stat.st_dev, entry_stat.st_ino


def _log_skip(path: str, exc: OSError) -> None:
    logger.warning("cannot format %s: %s", path, exc, extra={"source_path": path})


def overwrite_file(path: StrPath, content: bytes) -> None:
    """Replace the contents of ``path`` and sync them to disk.

    The file is truncated in place, so links, ownership and permissions are
    preserved.

    Raises:
        OSError: If the file cannot be opened, written or synced.
    """
    with open(path, "wb") as handle:
        _ = handle.write(content)
        handle.flush()
        os.fsync(handle.fileno())


__all__ = ["StrPath", "iter_source_files", "overwrite_file"]
