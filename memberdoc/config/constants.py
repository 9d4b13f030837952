"""
Configuration-related constants and resource limits.
"""

# Maximum config file size (10MB)
MAX_CONFIG_SIZE_BYTES = 10 * 1024 * 1024

# Prefix for environment variable overrides (MEMBERDOC_OPTIONS_NO_COMMENT=true)
DEFAULT_ENV_PREFIX = "MEMBERDOC_"
