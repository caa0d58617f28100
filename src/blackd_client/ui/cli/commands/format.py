"""src/blackd_client/ui/cli/commands/format.py
What: Execute formatting runs via the CLI.
Why: Bridge parsed arguments with the application service and result display.
"""

from blackd_client.application.services import FormatRequest, FormatService
from blackd_client.features.formatting import RunReport
from blackd_client.ui.cli.args.options import FormatArgs
from blackd_client.ui.cli.display.result import ResultDisplay


class FormatCommand:
    """Command for formatting files and directories."""

    args: FormatArgs
    app: FormatService
    request: FormatRequest
    result_display: ResultDisplay

    def __init__(self, args: FormatArgs) -> None:
        """Initialize command.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.app = FormatService()
        self.request = FormatRequest(
            roots=tuple(args.files),
            endpoints=tuple(args.endpoints),
            check=args.check,
            diff=args.diff,
            max_concurrency=args.jobs,
            request_timeout=args.timeout,
            pool_maxsize=args.pool_maxsize,
        )
        self.result_display = ResultDisplay()

    def execute(self) -> RunReport:
        """Execute the formatting run.

        Returns:
            Completed run report.
        """
        report = self.app.run(self.request)
        self.result_display.show_report(report, quiet=self.args.quiet)
        return report
