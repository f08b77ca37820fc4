"""
categree.config - Configuration loading and defaults
"""

from categree.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from categree.config.loader import (
    apply_env_overrides,
    find_config_file,
    load_config,
    merge_configs,
    validate_config,
)

__all__ = [
    "load_config",
    "find_config_file",
    "merge_configs",
    "apply_env_overrides",
    "validate_config",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
]
