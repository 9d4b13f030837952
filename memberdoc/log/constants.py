"""
Constants for the memberdoc logging layer.

Format strings, the custom TRACE level and the level name table used when
resolving levels given as strings in configuration files or on the CLI.
"""

import logging


class LogConstants:
    """Constants for the logging layer."""

    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Messages are padded to this width before extra fields are appended
    DEFAULT_RULE_WIDTH: int = 60

    TRACE: int = 5

    LEVEL_NAMES: dict[str, int | bool] = {
        "trace": TRACE,
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
        "false": False,  # disables logging
    }

    RESET: str = "\x1b[0m"

    # ANSI color per level; a trailing "m" is appended when used
    COLORS: dict[int, str] = {
        TRACE: "\x1b[38;5;240",
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: "\x1b[36",
        logging.WARNING: "\x1b[33",
        logging.ERROR: "\x1b[31",
        logging.CRITICAL: "\x1b[35",
    }
    FIELD_COLOR: str = "\x1b[38;5;244"
