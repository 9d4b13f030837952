"""
Configuration loading for memberdoc.

Reads a YAML file, resolves ${section.key} references against the loaded
document, applies MEMBERDOC_* environment overrides and validates the result
against the DocConfig schema.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from .constants import DEFAULT_ENV_PREFIX, MAX_CONFIG_SIZE_BYTES
from .schemas import DocConfig, validate_config

_VAR_PATTERN = re.compile(r"\$\{([a-zA-Z0-9_.]+)\}")


def _check_file_size(path: Path) -> None:
    """Check file size limit."""
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"Configuration file is {file_size} bytes, exceeding maximum size "
            f"of {MAX_CONFIG_SIZE_BYTES} bytes",
            path=path,
        )


def _read_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from path."""
    if not path.is_file():
        raise ConfigError("Configuration file not found", path=path)
    _check_file_size(path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", path=path) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping", path=path)
    return data


def _lookup(data: dict[str, Any], dotted: str) -> Any:
    """Look up a dotted path in nested mappings."""
    current: Any = data
    for part in dotted.split("."):
        if not isinstance(current, dict) or part not in current:
            raise ConfigError("Undefined configuration variable", variable=dotted)
        current = current[part]
    return current


def _resolve_reference(root: dict[str, Any], dotted: str, chain: tuple[str, ...]) -> Any:
    """Resolve one reference, following references in the referenced value."""
    if dotted in chain:
        raise ConfigError(
            "Circular configuration variable", variable=dotted, chain=" -> ".join(chain)
        )
    return resolve_variables(_lookup(root, dotted), root, _chain=(*chain, dotted))


def resolve_variables(content: Any, root: dict[str, Any], *, _chain: tuple[str, ...] = ()) -> Any:
    """
    Recursively resolve ${variable} substitutions.

    A string that is exactly one reference keeps the referenced value's type;
    references embedded in longer strings are substituted as text. References
    inside a referenced value are resolved too.

    Args:
        content: Configuration content (dict, list, str, or other)
        root: Document the references are resolved against

    Returns:
        Resolved content

    Raises:
        ConfigError: If a reference is undefined or circular
    """
    if isinstance(content, dict):
        return {k: resolve_variables(v, root, _chain=_chain) for k, v in content.items()}
    if isinstance(content, list):
        return [resolve_variables(v, root, _chain=_chain) for v in content]
    if isinstance(content, str):
        whole = _VAR_PATTERN.fullmatch(content)
        if whole:
            return _resolve_reference(root, whole.group(1), _chain)
        return _VAR_PATTERN.sub(
            lambda m: str(_resolve_reference(root, m.group(1), _chain)), content
        )
    return content


def _parse_env_value(value: str) -> Any:
    """Convert an environment string to a YAML scalar (bool, int, str)."""
    try:
        return yaml.safe_load(value)
    except yaml.YAMLError:
        return value


def _set_nested_value(data: dict[str, Any], path: list[str], value: Any) -> None:
    """Set a nested value, creating intermediate mappings."""
    current = data
    for part in path[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[path[-1]] = value


def _env_key_to_path(env_key: str, prefix: str) -> list[str]:
    """
    Convert an environment variable key to a configuration path.

    The first component after the prefix names the section; the rest is the
    key within it, so MEMBERDOC_OPTIONS_NO_COMMENT maps to
    ['options', 'no_comment'].
    """
    rest = env_key[len(prefix) :].lower()
    section, _, key = rest.partition("_")
    return [section, key] if key else [section]


def apply_env_overrides(
    data: dict[str, Any],
    env_prefix: str = DEFAULT_ENV_PREFIX,
    environ: dict[str, str] | None = None,
) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration data.

    Args:
        data: Configuration data dictionary (modified in place)
        env_prefix: Prefix of the variables to apply
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Configuration data with overrides applied
    """
    env = os.environ if environ is None else environ
    for key in sorted(env):
        if not key.startswith(env_prefix) or len(key) == len(env_prefix):
            continue
        _set_nested_value(
            data, _env_key_to_path(key, env_prefix), _parse_env_value(env[key])
        )
    return data


def load_config(
    path: str | Path | None = None,
    *,
    enable_env_overrides: bool = True,
    env_prefix: str = DEFAULT_ENV_PREFIX,
    environ: dict[str, str] | None = None,
) -> DocConfig:
    """
    Load and validate memberdoc configuration.

    Args:
        path: YAML configuration file; None uses defaults only
        enable_env_overrides: Whether to apply environment variable overrides
        env_prefix: Prefix for environment variables
        environ: Environment mapping used instead of os.environ

    Returns:
        Validated DocConfig

    Raises:
        ConfigError: If the file cannot be read or fails validation

    Example:
        config = load_config("etc/memberdoc.yaml")
        if config.options.no_comment:
            ...
    """
    data: dict[str, Any] = {}
    if path is not None:
        data = _read_yaml(Path(path).resolve())
    data = resolve_variables(data, data)
    if enable_env_overrides:
        data = apply_env_overrides(data, env_prefix, environ)
    try:
        return validate_config(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", path=path) from e
