"""src/blackd_client/ui/cli/display/result.py
What: Render the end-of-run report for formatting runs.
Why: The summary must be the last line a run emits, after all per-file logs.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from blackd_client.config.settings import NOTHING_TO_DO_MESSAGE
from blackd_client.features.formatting import RunReport
from blackd_client.platform.logging import logger


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display.

        Args:
            console: Console for stdout messages; a default one is created
                when omitted.
        """
        self.console = console or Console()

    def show_report(self, report: RunReport, quiet: bool = False) -> None:
        """Display the run summary.

        Args:
            report: Completed run report.
            quiet: Whether to suppress non-error output.
        """
        summary = report.summary()
        if summary is None:
            if not quiet:
                self.console.print(NOTHING_TO_DO_MESSAGE, markup=False, highlight=False)
            return

        # Errors in the summary stay visible even in quiet mode.
        if report.failed:
            logger.error(summary)
        else:
            logger.info(summary)
