"""
Category loading utilities.

Centralized functions for reading flat category lists from files.
Supported formats are JSON (a list of objects, or an object with a
"categories" list) and CSV with a header row.
"""

import csv
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping

from categree.core.errors import InvalidArgument
from categree.core.models import Category

logger = logging.getLogger(__name__)

LOCALIZED_COLUMN = re.compile(r"^name_(\d+)$")

_TRUE_VALUES = {"1", "true", "yes", "y"}
_FALSE_VALUES = {"0", "false", "no", "n", ""}


def _parse_int(value: Any, field_name: str, where: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidArgument(f"{where}: {field_name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{where}: {field_name} must be an integer, got {value!r}")


def _parse_bool(value: Any, field_name: str, where: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise InvalidArgument(f"{where}: {field_name} must be a boolean, got {value!r}")


def category_from_dict(data: Mapping[str, Any], where: str = "category") -> Category:
    """Create a Category from a mapping.

    Args:
        data: Mapping with at least an "id" key
        where: Location used in error messages (e.g. "categories.json[3]")

    Returns:
        Category instance
    """
    if "id" not in data:
        raise InvalidArgument(f"{where}: missing 'id'")

    localized: Dict[int, str] = {}
    names = data.get("localized_names") or {}
    if not isinstance(names, Mapping):
        raise InvalidArgument(f"{where}: localized_names must be an object")
    for lang, text in names.items():
        localized[_parse_int(lang, "language id", where)] = str(text)

    alias = data.get("alias") or None
    return Category(
        id=_parse_int(data["id"], "id", where),
        parent_id=_parse_int(data.get("parent_id", 0) or 0, "parent_id", where),
        name=str(data.get("name") or ""),
        alias=str(alias) if alias is not None else None,
        published=_parse_bool(data.get("published", True), "published", where),
        display_order=_parse_int(data.get("display_order", 0) or 0, "display_order", where),
        localized_names=localized,
    )


def load_categories_json(path: Path) -> List[Category]:
    """Load categories from a JSON file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise InvalidArgument(f"{path}: not valid UTF-8 ({e})") from e
    except json.JSONDecodeError as e:
        raise InvalidArgument(f"{path}: invalid JSON ({e})") from e

    if isinstance(data, dict):
        data = data.get("categories")
    if not isinstance(data, list):
        raise InvalidArgument(f"{path}: expected a list of categories")

    categories = []
    for i, item in enumerate(data):
        where = f"{path.name}[{i}]"
        if not isinstance(item, dict):
            raise InvalidArgument(f"{where}: expected an object, got {type(item).__name__}")
        categories.append(category_from_dict(item, where))
    return categories


def load_categories_csv(path: Path) -> List[Category]:
    """Load categories from a CSV file.

    Columns: id, parent_id, name, and optionally alias, published,
    display_order, and name_<language_id> for localized names.
    """
    categories = []
    try:
        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            if not reader.fieldnames or "id" not in reader.fieldnames:
                raise InvalidArgument(f"{path}: CSV header must contain an 'id' column")

            # Header is line 1
            for line_number, row in enumerate(reader, start=2):
                where = f"{path.name}:{line_number}"
                data: Dict[str, Any] = {"localized_names": {}}
                for column, value in row.items():
                    if column is None:
                        raise InvalidArgument(f"{where}: more values than header columns")
                    match = LOCALIZED_COLUMN.match(column)
                    if match:
                        if value:
                            data["localized_names"][match.group(1)] = value
                    elif value is not None and value != "":
                        data[column] = value
                categories.append(category_from_dict(data, where))
    except UnicodeDecodeError as e:
        raise InvalidArgument(f"{path}: not valid UTF-8 ({e})") from e
    return categories


def load_categories(path: Path) -> List[Category]:
    """Load a flat category list from a JSON or CSV file.

    Args:
        path: File to read; the format is chosen by extension

    Returns:
        Categories in file order

    Raises:
        InvalidArgument: If the file is malformed or the extension unknown
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        categories = load_categories_json(path)
    elif suffix == ".csv":
        categories = load_categories_csv(path)
    else:
        raise InvalidArgument(f"{path}: unsupported file type {suffix or '(none)'}")

    logger.debug("Loaded %d categories from %s", len(categories), path)
    return categories
