"""Command execution package for CLI."""

from blackd_client.ui.cli.commands.format import FormatCommand

__all__ = ["FormatCommand"]
