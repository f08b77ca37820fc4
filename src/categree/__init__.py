"""
categree - Category hierarchy sequencing and display tools

categree turns flat, parent-referencing category lists into tree-ordered
sequences, and builds indented labels and breadcrumb paths for display.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("categree")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__author__ = "categree contributors"
__license__ = "MIT"

from categree.core import (
    Category,
    CategoryTreeService,
    CyclicStructure,
    InvalidArgument,
    TreeNode,
    category_path,
    format_indented_name,
    sort_for_tree,
)

__all__ = [
    "__version__",
    "Category",
    "CategoryTreeService",
    "CyclicStructure",
    "InvalidArgument",
    "TreeNode",
    "category_path",
    "format_indented_name",
    "sort_for_tree",
]
