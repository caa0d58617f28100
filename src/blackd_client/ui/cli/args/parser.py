"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from blackd_client.config.config import Config
from blackd_client.config.settings import EXIT_USAGE
from blackd_client.platform.logging import logger, setup_logger
from blackd_client.ui.cli.args.options import FormatArgs

_PORT_HELP = "TCP port blackd listens on. Repeat to spread files over several daemons."
_DIFF_HELP = "Don't write the files back, just output a diff for each file on stdout."
_CHECK_HELP = (
    "Don't write the files back, just return the status. "
    "Return code 0 means nothing would change. "
    "Return code 1 means some files would be reformatted. "
    "Return code 123 means there was an internal error."
)


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="blackd-client",
            description="Format Python files by sending them to running blackd daemons.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "files",
            nargs="*",
            help="Files and directories to format",
            metavar="FILES",
        )
        _ = parser.add_argument(
            "--port",
            action="append",
            type=_port,
            help=_PORT_HELP,
        )
        _ = parser.add_argument(
            "--host",
            type=str,
            help="Address blackd listens on (default: from config, else 127.0.0.1)",
        )
        _ = parser.add_argument(
            "--diff",
            action="store_true",
            help=_DIFF_HELP,
        )
        _ = parser.add_argument(
            "--check",
            action="store_true",
            help=_CHECK_HELP,
        )
        _ = parser.add_argument(
            "-j",
            "--jobs",
            type=int,
            help="Concurrent requests per blackd port (default: from config, else 1)",
            metavar="N",
        )
        _ = parser.add_argument(
            "--timeout",
            type=float,
            help="Seconds to wait for blackd on each file (default: from config, else 5)",
            metavar="SECONDS",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Configuration file to read instead of the default location",
            metavar="PATH",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> FormatArgs:
        """Process command line arguments.

        Command line values take precedence over the configuration file.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            FormatArgs: Processed command line arguments.

        Raises:
            SystemExit: If no port is configured or a numeric option is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load(Path(parsed_args.config) if parsed_args.config else None)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        ports: list[int] = parsed_args.port or configuration.ports
        if not ports:
            logger.error("No blackd port given; pass --port or set 'ports' in the config file")
            sys.exit(EXIT_USAGE)

        jobs: int = parsed_args.jobs if parsed_args.jobs is not None else configuration.max_concurrency
        if jobs <= 0:
            logger.error("Jobs must be a positive integer; received %s", jobs)
            sys.exit(EXIT_USAGE)

        timeout: float = (
            parsed_args.timeout if parsed_args.timeout is not None else configuration.request_timeout
        )
        if timeout <= 0:
            logger.error("Timeout must be positive; received %s", timeout)
            sys.exit(EXIT_USAGE)

        host: str = parsed_args.host or configuration.host

        return FormatArgs(
            files=list(parsed_args.files),
            endpoints=[f"http://{host}:{port}" for port in ports],
            check=parsed_args.check,
            diff=parsed_args.diff,
            jobs=jobs,
            timeout=timeout,
            pool_maxsize=configuration.pool_maxsize,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
