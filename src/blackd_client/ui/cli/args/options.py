"""Command line argument options."""

from dataclasses import dataclass
from typing import final


@final
@dataclass(slots=True)
class FormatArgs:
    """Validated command line arguments for a formatting run."""

    files: list[str]
    endpoints: list[str]
    check: bool
    diff: bool
    jobs: int
    timeout: float
    pool_maxsize: int
    verbose: bool
    quiet: bool


__all__ = ["FormatArgs"]
