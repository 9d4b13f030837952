"""
Configuration management package.

Provides:
- load_config() for YAML configuration with ${var} references and
  environment variable overrides
- Pydantic schemas validating the logging and build option sections
"""

from .config import apply_env_overrides, load_config, resolve_variables
from .constants import DEFAULT_ENV_PREFIX, MAX_CONFIG_SIZE_BYTES
from .schemas import (
    AccessLevel,
    BuildOptions,
    DocConfig,
    LoggingConfig,
    validate_config,
)

__all__ = [
    "AccessLevel",
    "BuildOptions",
    "DEFAULT_ENV_PREFIX",
    "DocConfig",
    "LoggingConfig",
    "MAX_CONFIG_SIZE_BYTES",
    "apply_env_overrides",
    "load_config",
    "resolve_variables",
    "validate_config",
]
