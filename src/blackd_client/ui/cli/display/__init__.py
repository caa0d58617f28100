"""Display management for CLI interface."""

from blackd_client.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
