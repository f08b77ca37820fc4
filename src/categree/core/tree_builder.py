"""Category tree builder.

Builds TreeNode hierarchies from a flat category list and serves them
through the CategoryLookup interface used by category_path().
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from categree.core.errors import InvalidArgument
from categree.core.formatting import DEFAULT_SEPARATOR, display_name, has_alias
from categree.core.hierarchy import sort_for_tree
from categree.core.models import Category
from categree.core.tree import TreeNode

logger = logging.getLogger(__name__)


class CategoryTreeService:
    """In-memory category tree lookup.

    Only categories reachable from the top level become tree nodes;
    orphans and cycle members are left out. With include_hidden=False,
    unpublished categories and everything below them are left out too.

    Args:
        categories: Flat list of categories.
        include_hidden: Keep unpublished categories in the tree.
    """

    def __init__(self, categories: Iterable[Category], include_hidden: bool = True) -> None:
        self.include_hidden = include_hidden
        self._roots: list[TreeNode[Category]] = []
        self._index: dict[int, TreeNode[Category]] = {}
        self._build(categories)

    def _build(self, categories: Iterable[Category]) -> None:
        # Pre-order guarantees every parent is placed before its children.
        for category in sort_for_tree(categories, ignore_orphans=True):
            if not self.include_hidden and not category.published:
                continue

            node: TreeNode[Category] = TreeNode(category)
            if category.parent_id == 0:
                self._roots.append(node)
            else:
                parent = self._index.get(category.parent_id)
                if parent is None:
                    # Ancestor was hidden
                    continue
                parent.append(node)
            self._index[category.id] = node

        logger.debug(
            "Built category tree with %d nodes under %d roots",
            len(self._index),
            len(self._roots),
        )

    @property
    def roots(self) -> list[TreeNode[Category]]:
        """Top-level nodes in input order."""
        return list(self._roots)

    def get(self, category_id: int) -> TreeNode[Category] | None:
        """Find node by category id."""
        return self._index.get(category_id)

    def walk(self) -> Iterator[TreeNode[Category]]:
        """Iterate all nodes in pre-order."""
        for root in self._roots:
            yield from root.walk("pre")

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._index

    def resolve_with_ancestors(self, category_id: int) -> TreeNode[Category] | None:
        """Return the node for category_id with its parent chain attached.

        Args:
            category_id: The category to resolve.

        Returns:
            The TreeNode, or None if the category is not in the tree.
        """
        node = self._index.get(category_id)
        if node is None:
            logger.debug("Category %d is not part of the tree", category_id)
        return node

    def compose_breadcrumb(
        self,
        node: TreeNode[Category],
        language_id: int | None = None,
        alias_pattern: str | None = None,
        separator: str = DEFAULT_SEPARATOR,
    ) -> str:
        """Join the labels from the root down to node.

        Args:
            node: Node to build the breadcrumb for.
            language_id: Language to localize names into, or None.
            alias_pattern: Format string with {name} and {alias} fields,
                applied to categories that have an alias.
            separator: String placed between labels.

        Returns:
            The breadcrumb string.
        """
        labels = []
        for step in node.path_from_root():
            category = step.value
            label = display_name(category, language_id)
            if alias_pattern and has_alias(category):
                try:
                    label = alias_pattern.format(name=label, alias=category.alias)
                except (KeyError, IndexError, ValueError) as e:
                    raise InvalidArgument(f"Invalid alias pattern {alias_pattern!r}: {e}") from e
            labels.append(label)
        return separator.join(labels)
