"""
categree.config.loader - Configuration file discovery and loading.

Reads .categree.toml with tomlkit, merges it over DEFAULT_CONFIG and
applies CATEGREE_<SECTION>_<KEY> environment overrides.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

from categree.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX
from categree.core.errors import InvalidArgument

logger = logging.getLogger(__name__)


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Find .categree.toml in start_dir or one of its parents.

    Args:
        start_dir: Directory to start from (default: current directory)

    Returns:
        Path to the config file, or None if not found
    """
    current = Path(start_dir or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def parse_toml(text: str, source: str = "<string>") -> Dict[str, Any]:
    """Parse TOML text into plain Python dicts and lists."""
    try:
        return tomlkit.parse(text).unwrap()
    except TOMLKitError as e:
        raise InvalidArgument(f"{source}: invalid TOML ({e})") from e


def merge_configs(defaults: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge user over defaults without modifying either.

    Args:
        defaults: Base configuration
        user: Values that take precedence

    Returns:
        New merged configuration dict
    """
    merged = copy.deepcopy(defaults)
    for key, value in user.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(value: str) -> Any:
    """
    Convert an environment variable string to a typed value.

    JSON arrays and objects become lists and dicts, "true"/"false"
    become booleans, integers become ints; anything else stays a string.
    """
    stripped = value.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value

    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    try:
        return int(stripped)
    except ValueError:
        return value


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply CATEGREE_<SECTION>_<KEY> environment variables to config.

    CATEGREE_SORT_ROOT_PARENT_ID=5 sets config["sort"]["root_parent_id"].
    Sections are created when missing.

    Args:
        config: Configuration dict, updated in place

    Returns:
        The same config dict
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        rest = name[len(ENV_PREFIX):].lower()
        if "_" not in rest:
            continue
        section, key = rest.split("_", 1)
        if not key:
            continue
        target = config.setdefault(section, {})
        if not isinstance(target, dict):
            continue
        target[key] = _try_parse_env_value(raw)
        logger.debug("Config override from %s: %s.%s", name, section, key)
    return config


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration merged with defaults and environment overrides.

    Args:
        config_path: Explicit config file; when None, the file is searched
            for from the current directory upwards and defaults are used
            if none is found

    Returns:
        Complete configuration dict
    """
    user: Dict[str, Any] = {}
    if config_path is None:
        config_path = find_config_file()

    if config_path is not None:
        config_path = Path(config_path)
        user = parse_toml(config_path.read_text(encoding="utf-8"), str(config_path))
        logger.debug("Loaded configuration from %s", config_path)

    return apply_env_overrides(merge_configs(DEFAULT_CONFIG, user))


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Check a configuration dict for structural problems.

    Args:
        config: Configuration dict

    Returns:
        List of error messages (empty if valid)
    """
    errors: List[str] = []

    if "project" not in config:
        errors.append("Missing [project] section")

    sort = config.get("sort", {})
    if not isinstance(sort.get("root_parent_id", 0), int) or isinstance(
        sort.get("root_parent_id", 0), bool
    ):
        errors.append("sort.root_parent_id must be an integer")
    if not isinstance(sort.get("ignore_orphans", False), bool):
        errors.append("sort.ignore_orphans must be a boolean")

    labels = config.get("labels", {})
    if not isinstance(labels.get("indent_with", ""), str):
        errors.append("labels.indent_with must be a string")
    language_id = labels.get("language_id", 0)
    if not isinstance(language_id, int) or isinstance(language_id, bool) or language_id < 0:
        errors.append("labels.language_id must be a non-negative integer")
    if not isinstance(labels.get("with_alias", True), bool):
        errors.append("labels.with_alias must be a boolean")

    path = config.get("path", {})
    if not isinstance(path.get("separator", ""), str):
        errors.append("path.separator must be a string")
    if not isinstance(path.get("alias_pattern", ""), str):
        errors.append("path.alias_pattern must be a string")

    tree = config.get("tree", {})
    if not isinstance(tree.get("include_hidden", True), bool):
        errors.append("tree.include_hidden must be a boolean")

    return errors
