"""
Factory for creating and configuring loggers.

Loggers are named with "/" separated paths ("/", "/builder", "/cli") and
created through the standard logging manager so repeated lookups return the
same instance.
"""

import logging
import sys
from typing import Any, TextIO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig, stream: TextIO | None = None) -> Logger:
        """
        Create the root memberdoc logger with a console handler.

        Args:
            config: Logger configuration
            stream: Output stream for the handler (defaults to stderr)

        Returns:
            Configured root logger

        Example:
            >>> lg = LoggerFactory.create_root(LogConfig.from_params("debug"))
            >>> lg.info("rendering", extra={"types": 2})
            [12:34:56,789] [I] rendering          [types:2] [/]
        """
        lg = LoggerFactory.create("/", config)
        lg.handlers.clear()
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        return lg

    @staticmethod
    def create(
        name: str, config: LogConfig, extra: dict[str, Any] | None = None
    ) -> Logger:
        """
        Create (or reconfigure) a logger with the specified configuration.

        Args:
            name: Logger name
            config: Logger configuration
            extra: Pre-populated extra fields

        Returns:
            Configured logger instance
        """
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            existing._config = config
            existing._logging_disabled = config.level is False
            existing.setLevel(logging.CRITICAL + 1 if config.level is False else config.level)
            if extra:
                existing._extra.update(extra)
            return existing

        lg = Logger(name, config, extra)
        logging.root.manager.loggerDict[name] = lg
        return lg

    @staticmethod
    def create_child(
        parent: Logger, name: str, extra: dict[str, Any] | None = None
    ) -> Logger:
        """
        Create a child logger that shares the parent's handlers.

        Args:
            parent: Parent logger
            name: Child name, appended to the parent's path
            extra: Extra fields added on top of the parent's

        Returns:
            Child logger
        """
        base = parent.name.rstrip("/")
        full = f"{base}/{name.strip('/')}"
        child = LoggerFactory.create(full, parent.config, {**parent.extra, **(extra or {})})
        child.parent = parent
        child.propagate = True
        return child
