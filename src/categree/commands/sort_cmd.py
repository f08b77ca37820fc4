"""
categree.commands.sort_cmd - Sort a flat category list into tree order.
"""

import argparse
import csv
import json
from io import StringIO
from typing import List

from categree.commands.common import get_config, option, read_categories
from categree.core.hierarchy import sort_for_tree
from categree.core.models import Category


def render_text(categories: List[Category]) -> str:
    """One tab-separated line per category: id, parent id, name."""
    return "".join(f"{c.id}\t{c.parent_id}\t{c.name}\n" for c in categories)


def render_json(categories: List[Category]) -> str:
    rows = [
        {
            "id": c.id,
            "parent_id": c.parent_id,
            "name": c.name,
            "alias": c.alias,
            "published": c.published,
        }
        for c in categories
    ]
    return json.dumps(rows, indent=2, ensure_ascii=False) + "\n"


def render_csv(categories: List[Category]) -> str:
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["id", "parent_id", "name", "alias", "published"])
    for c in categories:
        writer.writerow([c.id, c.parent_id, c.name, c.alias or "", str(c.published).lower()])
    return output.getvalue()


RENDERERS = {
    "text": render_text,
    "json": render_json,
    "csv": render_csv,
}


def run(args: argparse.Namespace) -> int:
    """Run the sort command."""
    config = get_config(args)
    categories = read_categories(args)

    root_parent_id = option(args, "root", config, "sort", "root_parent_id")
    ignore_orphans = args.ignore_orphans or config["sort"]["ignore_orphans"]

    ordered = sort_for_tree(categories, root_parent_id, ignore_orphans)

    renderer = RENDERERS[args.format]
    print(renderer(ordered), end="")
    return 0
