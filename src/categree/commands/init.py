"""
categree.commands.init - Create a .categree.toml configuration file.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

import tomlkit

from categree.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG

SECTION_COMMENTS = {
    "sort": "Tree ordering of flat category lists",
    "labels": "Indented labels (language_id = 0 disables localization)",
    "path": "Breadcrumb paths (alias_pattern uses {name} and {alias})",
    "tree": "Tree lookup",
}


def build_document(config: Dict[str, Any], project_name: str) -> tomlkit.TOMLDocument:
    """Build a commented TOML document from a configuration dict."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("categree configuration"))
    doc.add(tomlkit.nl())

    for section, values in config.items():
        table = tomlkit.table()
        comment = SECTION_COMMENTS.get(section)
        if comment:
            table.comment(comment)
        for key, value in values.items():
            table.add(key, value)
        doc.add(section, table)

    doc["project"]["name"] = project_name
    return doc


def run(args: argparse.Namespace) -> int:
    """Run the init command."""
    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not args.force:
        print(f"Error: {config_path} already exists (use --force to overwrite)", file=sys.stderr)
        return 1

    doc = build_document(DEFAULT_CONFIG, args.name or Path.cwd().name)
    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    print(f"Created {config_path}")
    return 0
