"""
Logging for memberdoc.

Extends Python's standard logging with:
- A custom TRACE level for per-element build tracing
- Structured extra fields rendered as [key:value]
- Optional colored console output
- A factory producing "/" named logger hierarchies
"""

import logging

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

logging.addLevelName(LogConstants.TRACE, "TRACE")

__all__ = [
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
]
