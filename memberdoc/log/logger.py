"""
Logger class for the memberdoc logging layer.

Extends the standard logger with a TRACE level and with structured extra
fields that are kept together on the record for the formatter.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants


class Logger(logging.Logger):
    """
    Logger with TRACE support and structured extra fields.

    Extra fields passed as ``extra={...}`` are merged with the fields the
    logger was created with and attached to the record as ``memberdoc_extra``
    so formatters can render them as ``[key:value]`` pairs.
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name ("/" separated path)
            config: Logger configuration, defaults to INFO
            extra: Pre-populated extra fields included in all records
        """
        if config is None:
            config = LogConfig()
        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False
        self._config = config
        self._extra = dict(extra or {})

    @property
    def config(self) -> LogConfig:
        """Get logger configuration."""
        return self._config

    @property
    def disabled(self) -> bool:
        """Check if logging is disabled."""
        return self._logging_disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._logging_disabled = value

    @property
    def extra(self) -> dict[str, Any]:
        """Get pre-populated extra fields."""
        return self._extra

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record with merged extra fields."""
        merged = {**self._extra, **(extra or {})}
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        record.memberdoc_extra = merged
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a TRACE level message.

        Args:
            msg: Log message
            *args: Message format arguments
            **kwargs: Additional keyword arguments including 'extra'
        """
        if self._logging_disabled:
            return
        if self.isEnabledFor(LogConstants.TRACE):
            self._log(LogConstants.TRACE, msg, args, **kwargs)

    def is_logged(self, level: int) -> bool:
        """Check if a level would be logged."""
        if self._logging_disabled:
            return False
        return level >= self.level
