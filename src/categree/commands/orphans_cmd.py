"""
categree.commands.orphans_cmd - Report categories outside the tree.

Lists categories whose parent is missing from the input, and parent
chains that loop back on themselves.
"""

import argparse

from categree.commands.common import get_config, option, read_categories
from categree.core.hierarchy import detect_cycles, find_orphans


def run(args: argparse.Namespace) -> int:
    """Find orphaned and cyclic categories."""
    config = get_config(args)
    categories = read_categories(args)
    root_parent_id = option(args, "root", config, "sort", "root_parent_id")

    known_ids = {c.id for c in categories}
    cycles = detect_cycles(categories)
    orphans = [
        c for c in find_orphans(categories, root_parent_id) if c.id not in cycles.cycle_members
    ]

    if orphans:
        print(f"Orphaned Categories ({len(orphans)}):")
        print("-" * 40)
        for category in orphans:
            print(f"  {category.id}: {category.name}")
            state = "unreachable" if category.parent_id in known_ids else "missing"
            print(f"    Parent: {category.parent_id} ({state})")
        print()
    else:
        print("✓ No orphaned categories found")

    if cycles.cycle_paths:
        print(f"Cyclic Parent Chains ({len(cycles.cycle_paths)}):")
        print("-" * 40)
        for path in cycles.cycle_paths:
            print("  " + " -> ".join(str(i) for i in path))

    return 0
