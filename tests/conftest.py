"""Shared pytest fixtures for categree tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def catalog_fixture() -> Path:
    """Directory with categories.json, categories.csv and .categree.toml."""
    return FIXTURES_DIR / "catalog"


@pytest.fixture
def example_categories():
    """(id, parent_id) = (1,0), (2,1), (3,1), (4,2), (5,99)."""
    from categree.core.models import Category

    return [
        Category(id=1, parent_id=0, name="Apparel"),
        Category(id=2, parent_id=1, name="Shoes", alias="footwear"),
        Category(id=3, parent_id=1, name="Jackets"),
        Category(id=4, parent_id=2, name="Sneakers"),
        Category(id=5, parent_id=99, name="Clearance"),
    ]


@pytest.fixture
def catalog_categories(catalog_fixture):
    """Categories loaded from the catalog JSON fixture."""
    from categree.core.loader import load_categories

    return load_categories(catalog_fixture / "categories.json")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CATEGREE_* variables from the caller's shell out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("CATEGREE_"):
            monkeypatch.delenv(name)
