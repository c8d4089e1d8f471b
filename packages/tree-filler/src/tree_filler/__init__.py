from tree_filler.components.loader import load_archives
from tree_filler.fill_tree import (
    get_archive,
    get_status,
    list_child_dirs,
    list_child_files,
    list_child_statuses,
    load_all_files,
)

__all__ = [
    "get_archive",
    "get_status",
    "list_child_dirs",
    "list_child_files",
    "list_child_statuses",
    "load_all_files",
    "load_archives",
]
