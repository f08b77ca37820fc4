"""
categree.commands.common - Helpers shared by the CLI commands.
"""

import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from categree.config import load_config, validate_config
from categree.core.errors import InvalidArgument
from categree.core.loader import load_categories
from categree.core.models import Category


def get_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load and validate configuration honoring the global --config option.

    Raises:
        InvalidArgument: If the merged configuration fails validation
    """
    config = load_config(getattr(args, "config", None))
    errors = validate_config(config)
    if errors:
        raise InvalidArgument("Invalid configuration: " + "; ".join(errors))
    return config


def option(args: argparse.Namespace, name: str, config: Dict[str, Any], section: str, key: str) -> Any:
    """Return the CLI value for name, falling back to config[section][key]."""
    value = getattr(args, name, None)
    if value is not None:
        return value
    return config.get(section, {}).get(key)


def language_option(args: argparse.Namespace, config: Dict[str, Any]) -> Optional[int]:
    """Resolve the language id; 0 means no localization."""
    language_id = option(args, "language", config, "labels", "language_id")
    return language_id or None


def read_categories(args: argparse.Namespace) -> List[Category]:
    """Load the categories file named on the command line."""
    return load_categories(Path(args.file))
