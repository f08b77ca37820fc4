"""
categree.config.defaults - Default configuration values.
"""

CONFIG_FILENAME = ".categree.toml"

ENV_PREFIX = "CATEGREE_"

DEFAULT_CONFIG = {
    "project": {
        "name": "categories",
    },
    "sort": {
        # Parent id whose children form the top level
        "root_parent_id": 0,
        "ignore_orphans": False,
    },
    "labels": {
        "indent_with": "--",
        # 0 disables localization
        "language_id": 0,
        "with_alias": True,
    },
    "path": {
        "separator": " · ",
        "alias_pattern": "",
    },
    "tree": {
        "include_hidden": True,
    },
}
