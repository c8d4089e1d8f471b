from .accessor import (
    DirEntry,
    archive,
    basename,
    exists,
    extension,
    list_directory,
    read_body,
    size,
    status,
)
from .node import (
    Archive,
    Directory,
    Entry,
    Node,
    NodeType,
    Status,
    is_archive,
    is_directory,
    is_status,
)
from .scanner import scan_directory

__all__ = [
    "Archive",
    "DirEntry",
    "Directory",
    "Entry",
    "Node",
    "NodeType",
    "Status",
    "archive",
    "basename",
    "exists",
    "extension",
    "is_archive",
    "is_directory",
    "is_status",
    "list_directory",
    "read_body",
    "scan_directory",
    "size",
    "status",
]
