"""
categree.core - Category models, hierarchy sequencing, and tree helpers
"""

from categree.core.errors import CategreeError, CyclicStructure, InvalidArgument
from categree.core.formatting import CategoryLookup, category_path, format_indented_name
from categree.core.hierarchy import (
    CycleInfo,
    append_orphans,
    build_parent_index,
    detect_cycles,
    find_orphans,
    sequence_tree,
    sort_for_tree,
)
from categree.core.models import (
    Category,
    CategoryNode,
    LocalizedCategory,
    ProductCategory,
    find_product_category,
)
from categree.core.tree import TreeNode
from categree.core.tree_builder import CategoryTreeService

__all__ = [
    "CategreeError",
    "CyclicStructure",
    "InvalidArgument",
    "CategoryLookup",
    "category_path",
    "format_indented_name",
    "CycleInfo",
    "append_orphans",
    "build_parent_index",
    "detect_cycles",
    "find_orphans",
    "sequence_tree",
    "sort_for_tree",
    "Category",
    "CategoryNode",
    "LocalizedCategory",
    "ProductCategory",
    "find_product_category",
    "TreeNode",
    "CategoryTreeService",
]
