"""
categree.commands.labels_cmd - Print indented category labels.

Renders the category tree as the indented list used by select boxes.
"""

import argparse

from categree.commands.common import get_config, language_option, option, read_categories
from categree.core.formatting import format_indented_name
from categree.core.tree_builder import CategoryTreeService


def run(args: argparse.Namespace) -> int:
    """Run the labels command."""
    config = get_config(args)
    service = CategoryTreeService(
        read_categories(args),
        include_hidden=config["tree"]["include_hidden"],
    )

    indent_with = option(args, "indent", config, "labels", "indent_with")
    language_id = language_option(args, config)
    with_alias = config["labels"]["with_alias"] and not args.no_alias

    for node in service.walk():
        print(format_indented_name(node, indent_with, language_id, with_alias))

    return 0
