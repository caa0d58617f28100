"""
Summary: Formatting feature: query blackd, classify replies and tally outcomes.
Why: Re-export domain types and use cases for services and tests.
"""

from .domain import Action, DaemonError, DaemonResult, FormatOptions
from .usecases import DaemonClient, RunReport, WorkerPool, classify, process_path, render_diff

__all__ = [
    "Action",
    "DaemonClient",
    "DaemonError",
    "DaemonResult",
    "FormatOptions",
    "RunReport",
    "WorkerPool",
    "classify",
    "process_path",
    "render_diff",
]
