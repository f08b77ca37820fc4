"""
categree.commands.path_cmd - Print the breadcrumb path of a category.
"""

import argparse
import sys

from categree.commands.common import get_config, language_option, option, read_categories
from categree.core.formatting import category_path
from categree.core.tree_builder import CategoryTreeService


def run(args: argparse.Namespace) -> int:
    """Run the path command."""
    config = get_config(args)
    categories = read_categories(args)

    record = next((c for c in categories if c.id == args.category_id), None)
    if record is None:
        print(f"Error: Category {args.category_id} not found in {args.file}", file=sys.stderr)
        return 1

    service = CategoryTreeService(categories, include_hidden=config["tree"]["include_hidden"])
    path = category_path(
        record,
        service,
        language_id=language_option(args, config),
        alias_pattern=option(args, "alias_pattern", config, "path", "alias_pattern") or None,
        separator=option(args, "separator", config, "path", "separator"),
    )

    if not path:
        print(
            f"Error: Category {args.category_id} is not reachable from the top level",
            file=sys.stderr,
        )
        return 1

    print(path)
    return 0
