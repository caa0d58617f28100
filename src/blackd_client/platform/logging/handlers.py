"""Rich console handler used for diagnostic output.

Where: platform/logging/handlers.py
What: RichHandler variant that emphasises the file a record is about.
Why: Per-file errors scroll by quickly during parallel runs; the path is the
     part users scan for.
"""

from __future__ import annotations

import logging
import os
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class PathRichHandler(RichHandler):
    """Render records compactly and highlight their ``source_path`` extra."""

    PATH_STYLE: ClassVar[str] = "bold white"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        _ = kwargs.setdefault("show_time", False)
        _ = kwargs.setdefault("show_path", False)
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = super().render_message(record, message)
        source_path = getattr(record, "source_path", None)
        if source_path is None or not isinstance(rendered, Text):
            return rendered

        _ = rendered.highlight_words([os.fspath(source_path)], style=self.PATH_STYLE)
        return rendered


__all__ = ["PathRichHandler"]
