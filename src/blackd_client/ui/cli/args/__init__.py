"""Command line argument handling package."""

from blackd_client.ui.cli.args.parser import ArgumentParser
from blackd_client.ui.cli.args.options import FormatArgs

__all__ = ["ArgumentParser", "FormatArgs"]
