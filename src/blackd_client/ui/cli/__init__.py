"""Command line interface package."""

from blackd_client.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
