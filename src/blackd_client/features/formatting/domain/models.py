"""
Summary: Value types describing blackd replies and per-file outcomes.
Why: Give the classifier, worker pool and report one shared vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import BinaryIO


class Action(StrEnum):
    """Terminal outcome of formatting one path."""

    UNCHANGED = "unchanged"
    REFORMATTED = "reformatted"
    WOULD_BE_REFORMATTED = "would_be_reformatted"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class DaemonError:
    """blackd rejected the file, either as invalid Python or by failing itself."""

    syntax: bool
    message: str


@dataclass(slots=True)
class DaemonResult:
    """Classified reply for one request.

    ``body`` holds the reformatted source or the diff when ``changed`` is set.
    It is only readable while the query that produced it is open.
    """

    changed: bool = False
    body: BinaryIO | None = None
    error: DaemonError | None = None


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Mode flags applied to every file of a run."""

    check: bool = False
    diff: bool = False

    @property
    def writes_back(self) -> bool:
        """Whether reformatted content replaces the file on disk."""

        return not (self.check or self.diff)


__all__ = ["Action", "DaemonError", "DaemonResult", "FormatOptions"]
