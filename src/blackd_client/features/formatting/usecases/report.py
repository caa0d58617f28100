"""
Summary: Count per-file actions and derive the summary line and exit code.
Why: A single consumer owns the counters, so no locking is needed on them.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from queue import Queue, ShutDown

from blackd_client.config.settings import (
    EXIT_INTERNAL_ERROR,
    EXIT_OK,
    EXIT_WOULD_REFORMAT,
)

from ..domain.models import Action, FormatOptions


@dataclass(slots=True)
class RunReport:
    """Mutable tally of a formatting run."""

    options: FormatOptions = field(default_factory=FormatOptions)
    counts: Counter[Action] = field(default_factory=Counter)

    def record(self, action: Action) -> None:
        """Count one classified path."""

        self.counts[action] += 1

    def consume(self, actions: Queue[Action]) -> None:
        """Record actions until ``actions`` is shut down and drained."""

        while True:
            try:
                action = actions.get()
            except ShutDown:
                return
            self.record(action)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def reformatted(self) -> int:
        return self.counts[Action.REFORMATTED] + self.counts[Action.WOULD_BE_REFORMATTED]

    @property
    def unchanged(self) -> int:
        return self.counts[Action.UNCHANGED]

    @property
    def failed(self) -> int:
        return self.counts[Action.ERROR]

    @property
    def exit_code(self) -> int:
        """Errors outrank pending changes; pending changes only count in check mode."""

        if self.failed:
            return EXIT_INTERNAL_ERROR
        if self.options.check and self.counts[Action.WOULD_BE_REFORMATTED]:
            return EXIT_WOULD_REFORMAT
        return EXIT_OK

    def summary(self) -> str | None:
        """Render e.g. ``2 files reformatted, 1 file left unchanged.``

        Counts read as ``would be ...`` whenever files are not written back,
        in diff mode as well as in check mode, as Black words them.

        Returns:
            The summary sentence, or ``None`` when nothing was processed.
        """
        if self.total == 0:
            return None

        tentative = not self.options.writes_back
        parts: list[str] = []
        if self.reformatted:
            parts.append(
                _count_phrase(self.reformatted, "would be reformatted" if tentative else "reformatted")
            )
        if self.unchanged:
            parts.append(
                _count_phrase(self.unchanged, "would be left unchanged" if tentative else "left unchanged")
            )
        if self.failed:
            parts.append(
                _count_phrase(self.failed, "would fail to reformat" if tentative else "failed to reformat")
            )
        return ", ".join(parts) + "."


def _count_phrase(count: int, status: str) -> str:
    noun = "file" if count == 1 else "files"
    return f"{count} {noun} {status}"


__all__ = ["RunReport"]
