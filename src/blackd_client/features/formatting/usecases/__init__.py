"""
Summary: Public surface for the formatting use cases.
Why: Give the application layer one stable import path.
"""

from .daemon_client import DaemonClient
from .processing import classify, process_path, render_diff
from .report import RunReport
from .worker_pool import PathHandler, WorkerPool

__all__ = [
    "DaemonClient",
    "PathHandler",
    "RunReport",
    "WorkerPool",
    "classify",
    "process_path",
    "render_diff",
]
