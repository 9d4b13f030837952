"""
Immutable logger configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for loggers created by LoggerFactory.

    Attributes:
        level: Numeric log level, or False to disable logging entirely
        colors: Whether console output uses ANSI colors
        micros: Whether timestamps carry sub-second precision
    """

    level: int | bool = logging.INFO
    colors: bool = False
    micros: bool = False

    @staticmethod
    def resolve_level(level: str | int | bool) -> int | bool:
        """Resolve a level given as name, number or bool to an int or False."""
        if isinstance(level, bool):
            return logging.INFO if level else False
        if isinstance(level, str):
            name = level.strip().lower()
            if name.isnumeric():
                return int(name)
            if name in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[name]
            raise InvalidLogLevelError(level)
        if isinstance(level, int):
            return level
        raise InvalidLogLevelError(level)

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        colors: bool = False,
        micros: bool = False,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable)
            colors: Whether to enable colored output
            micros: Whether to show sub-second timestamps

        Returns:
            LogConfig instance
        """
        return cls(level=cls.resolve_level(level), colors=colors, micros=micros)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LogConfig:
        """Create LogConfig from a ``logging`` configuration section."""
        return cls.from_params(
            data.get("level", "info"),
            colors=bool(data.get("colors", False)),
            micros=bool(data.get("micros", False)),
        )
