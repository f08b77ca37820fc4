"""
categree.commands.config_cmd - Inspect the effective configuration.
"""

import argparse
import sys

import tomlkit

from categree.config import find_config_file, load_config, validate_config


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    if args.config_action == "path":
        config_path = args.config or find_config_file()
        if config_path is None:
            print("No .categree.toml found (using defaults)", file=sys.stderr)
            return 1
        print(config_path)
        return 0

    if args.config_action == "show":
        config = load_config(args.config)
        errors = validate_config(config)
        print(tomlkit.dumps(config), end="")
        for error in errors:
            print(f"Warning: {error}", file=sys.stderr)
        return 1 if errors else 0

    print("Usage: categree config {show|path}")
    return 1
