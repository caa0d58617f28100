"""Command line interface for blackd-client."""

import sys
from typing import final

from blackd_client.config.settings import EXIT_FATAL, EXIT_INTERRUPTED
from blackd_client.platform.logging import logger
from blackd_client.shared.errors import FatalRunError
from blackd_client.ui.cli.args import ArgumentParser, FormatArgs
from blackd_client.ui.cli.commands import FormatCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Exit code derived from the run report (0, 1 or 123).
        """
        try:
            args: FormatArgs = ArgumentParser.process_args(args_list)
            report = FormatCommand(args).execute()
            return report.exit_code

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except FatalRunError as e:
            logger.error("%s", e)
            sys.exit(EXIT_FATAL)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(EXIT_FATAL)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code. Fatal errors and interrupts exit directly
        through ``sys.exit`` instead of returning.
    """
    return CommandProcessor.process_command()
