"""
categree.core.errors - Exceptions raised by the category hierarchy tools.
"""

from typing import List, Optional


class CategreeError(Exception):
    """Base class for all categree errors."""


class InvalidArgument(CategreeError, ValueError):
    """A required argument is missing or malformed."""


class CyclicStructure(CategreeError, ValueError):
    """
    Raised when a hierarchy walk would revisit a category.

    Attributes:
        category_id: The id that was reached a second time
        chain: Parent ids on the stack when the revisit happened,
            outermost first
    """

    def __init__(self, category_id: int, chain: Optional[List[int]] = None):
        self.category_id = category_id
        self.chain = list(chain or [])
        path = " -> ".join(str(c) for c in self.chain + [category_id])
        super().__init__(f"Cyclic category structure at id {category_id} ({path})")
