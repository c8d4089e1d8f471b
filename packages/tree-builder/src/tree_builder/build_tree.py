"""
TreeBuilder - recursively scans a directory and produces a status tree.

Each directory becomes a ``Directory`` node and each file a ``Status`` leaf:

    Directory {
        node_type: "directory",
        name: <basename of the directory>,
        path: <path as given or joined from the root>,
        size: <size reported by stat>,
        content: [<Directory | Status>, ...]   # host listing order
    }

    Status {node_type: "status", name, path, size}

Usage (library):
    import asyncio
    from tree_builder.build_tree import build_tree
    tree = asyncio.run(build_tree("/path/to/dir"))
"""

from typing import Optional

from tree_builder.components.node import Directory
from tree_builder.components.scanner import scan_directory


async def build_tree(root: str, max_depth: Optional[int] = None) -> Directory:
    """Scan *root* and return its status-only :class:`Directory` tree."""
    return await scan_directory(root, max_depth=max_depth)
