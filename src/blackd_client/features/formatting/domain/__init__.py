"""
Summary: Domain types for the formatting feature.
Why: Keep value types importable without pulling in use cases.
"""

from .models import Action, DaemonError, DaemonResult, FormatOptions

__all__ = ["Action", "DaemonError", "DaemonResult", "FormatOptions"]
