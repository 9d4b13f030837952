"""
Log formatter rendering messages followed by structured extra fields.

Output shape:

    [12:34:56,789] [I] built enum constants     [count:3] [/memberdoc/builder]
"""

import logging
import re
from typing import Any

from .config import LogConfig
from .constants import LogConstants

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def _visual_len(text: str) -> int:
    """Calculate visual width of text, excluding ANSI escape codes."""
    if "\x1b" not in text:
        return len(text)
    return len(_ANSI_PATTERN.sub("", text))


def _format_value(value: Any) -> str:
    """Format a single extra field value."""
    if isinstance(value, BaseException):
        return value.__class__.__name__
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


class LogFormatter(logging.Formatter):
    """
    Formatter for memberdoc loggers.

    Renders the timestamp, level initial and message, pads the message to a
    fixed rule width, then appends extra fields (sorted by key) and the
    logger name. Colors are applied per level when enabled in the config.
    """

    def __init__(self, config: LogConfig):
        """
        Initialize the formatter.

        Args:
            config: Logger configuration (colors, micros)
        """
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp with optional sub-second precision."""
        s = super().formatTime(record, "%H:%M:%S")
        if self._config.micros:
            s += f",{int(record.msecs):03d}{int((record.created % 1) * 1e6) % 1000:03d}"
        else:
            s += f",{int(record.msecs):03d}"
        return s

    def _format_fields(self, record: logging.LogRecord) -> str:
        extra = getattr(record, "memberdoc_extra", None) or {}
        parts = [f"[{k}:{_format_value(extra[k])}]" for k in sorted(extra)]
        parts.append(f"[{record.name}]")
        return " ".join(parts)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record."""
        head = super().format(record)
        lines = head.split("\n", 1)
        first = lines[0]
        pad = " " * max(1, LogConstants.DEFAULT_RULE_WIDTH - _visual_len(first))
        fields = self._format_fields(record)
        if self._config.colors:
            col = LogConstants.COLORS.get(record.levelno, "\x1b[38") + "m"
            first = f"{col}{first}{LogConstants.RESET}"
            fields = f"{LogConstants.FIELD_COLOR}m{fields}{LogConstants.RESET}"
        out = f"{first}{pad}{fields}"
        if len(lines) > 1:
            out += "\n" + lines[1]
        return out
