"""
categree.commands - CLI command implementations
"""

from categree.commands import (
    completion,
    config_cmd,
    init,
    labels_cmd,
    orphans_cmd,
    path_cmd,
    sort_cmd,
)

__all__ = [
    "completion",
    "config_cmd",
    "init",
    "labels_cmd",
    "orphans_cmd",
    "path_cmd",
    "sort_cmd",
]
