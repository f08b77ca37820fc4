"""
categree.core.models - Core data models for categories.

Provides the protocols the hierarchy functions depend on, plus
concrete dataclasses for categories and product mappings.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Protocol, runtime_checkable


@runtime_checkable
class CategoryNode(Protocol):
    """Anything with an integer identity and a parent reference."""

    @property
    def id(self) -> int: ...

    @property
    def parent_id(self) -> int: ...


@runtime_checkable
class LocalizedCategory(CategoryNode, Protocol):
    """A category node that can be displayed."""

    @property
    def name(self) -> str: ...

    @property
    def alias(self) -> Optional[str]: ...

    def get_localized_name(self, language_id: int) -> str: ...


@dataclass
class Category:
    """
    Represents a catalog category.

    Attributes:
        id: Unique category identifier
        parent_id: Parent category identifier (0 for top-level)
        name: Display name
        alias: Optional short token shown after the name
        published: Whether the category is visible
        display_order: Ordering hint kept from the source data
        localized_names: Display name per language id
    """

    id: int
    parent_id: int = 0
    name: str = ""
    alias: Optional[str] = None
    published: bool = True
    display_order: int = 0
    localized_names: Dict[int, str] = field(default_factory=dict)

    def get_localized_name(self, language_id: int) -> str:
        """
        Return the name for a language.

        Falls back to the plain name when no non-empty translation exists.
        """
        localized = self.localized_names.get(language_id)
        if localized:
            return localized
        return self.name

    @property
    def is_top_level(self) -> bool:
        return self.parent_id == 0

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"

    def __repr__(self) -> str:
        return f"Category(id={self.id!r}, parent_id={self.parent_id!r}, name={self.name!r})"


@dataclass
class ProductCategory:
    """
    Mapping between a product and one of its categories.

    Attributes:
        product_id: Product identifier
        category_id: Category identifier
        is_featured: Whether the product is featured in the category
        display_order: Position of the product inside the category
    """

    product_id: int
    category_id: int
    is_featured: bool = False
    display_order: int = 0


def find_product_category(
    mappings: Iterable[ProductCategory],
    product_id: int,
    category_id: int,
) -> Optional[ProductCategory]:
    """Return the first mapping for product_id/category_id, or None."""
    for mapping in mappings:
        if mapping.product_id == product_id and mapping.category_id == category_id:
            return mapping
    return None
