"""
categree.core.formatting - Display helpers for category tree nodes.

Builds indented labels for tree-shaped select lists and breadcrumb
paths for single categories.
"""

from typing import Optional, Protocol

from categree.core.errors import InvalidArgument
from categree.core.models import CategoryNode, LocalizedCategory
from categree.core.tree import TreeNode

DEFAULT_INDENT = "--"
DEFAULT_SEPARATOR = " · "


class CategoryLookup(Protocol):
    """Resolves categories into tree nodes and renders breadcrumbs."""

    def resolve_with_ancestors(self, category_id: int) -> Optional[TreeNode]: ...

    def compose_breadcrumb(
        self,
        node: TreeNode,
        language_id: Optional[int] = None,
        alias_pattern: Optional[str] = None,
        separator: str = DEFAULT_SEPARATOR,
    ) -> str: ...


def display_name(category: LocalizedCategory, language_id: Optional[int] = None) -> str:
    """Return the localized name when language_id is given, else the plain name."""
    if language_id is not None:
        return category.get_localized_name(language_id)
    return category.name


def has_alias(category: LocalizedCategory) -> bool:
    """True when the alias is set and not blank."""
    return bool(category.alias and category.alias.strip())


def format_indented_name(
    node: Optional[TreeNode],
    indent_with: str = DEFAULT_INDENT,
    language_id: Optional[int] = None,
    with_alias: bool = True,
) -> str:
    """
    Build the indented display label of a tree node.

    The label is indent_with repeated (depth - 1) times, the display name,
    and " (alias)" when with_alias is set and the category has an alias.

    Args:
        node: Tree node whose value is a LocalizedCategory
        indent_with: String repeated once per level below the root
        language_id: Language to localize the name into, or None
        with_alias: Whether to append the alias

    Returns:
        The label, e.g. "----Shoes (footwear)" for a node at depth 3

    Raises:
        InvalidArgument: If node is None
    """
    if node is None:
        raise InvalidArgument("node must not be None")

    category = node.value
    parts = [indent_with * (node.depth - 1), display_name(category, language_id)]

    if with_alias and has_alias(category):
        parts.append(f" ({category.alias})")

    return "".join(parts)


def category_path(
    record: Optional[CategoryNode],
    lookup: CategoryLookup,
    language_id: Optional[int] = None,
    alias_pattern: Optional[str] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Build the breadcrumb path of a category.

    The record is resolved to its tree node (with ancestors) through
    lookup, which also renders the breadcrumb.

    Args:
        record: The category to build the path for
        lookup: Tree lookup capability
        language_id: Language to localize names into, or None
        alias_pattern: Label pattern forwarded to lookup
        separator: String placed between labels

    Returns:
        The breadcrumb, or "" when the category cannot be resolved

    Raises:
        InvalidArgument: If record is None
    """
    if record is None:
        raise InvalidArgument("record must not be None")

    node = lookup.resolve_with_ancestors(record.id)
    if node is None:
        return ""

    return lookup.compose_breadcrumb(node, language_id, alias_pattern, separator)
