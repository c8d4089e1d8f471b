"""
TreeFiller - turns status trees into content-loaded archive trees.

``load_all_files`` is the full two-phase run (scan, then load). The
``list_child_*`` helpers look only at the direct entries of a directory:

    list_child_files     -> [Archive, ...]     top-level files, loaded
    list_child_statuses  -> [Status, ...]      top-level files, metadata only
    list_child_dirs      -> [Directory, ...]   top-level sub-directories (status subtrees)

Usage (library):
    import asyncio
    from tree_filler.fill_tree import load_all_files
    tree = asyncio.run(load_all_files("/path/to/dir"))
"""

import asyncio
from typing import List, Optional

from tree_builder.build_tree import build_tree
from tree_builder.components import accessor
from tree_builder.components.node import Archive, Directory, Status, is_directory

from tree_filler.components.loader import load_archives, load_leaf, read_semaphore


async def get_status(path: str) -> Status:
    return await accessor.status(path)


async def get_archive(path: str) -> Archive:
    return await accessor.archive(path)


async def load_all_files(
    root: str,
    max_depth: Optional[int] = None,
    concurrency: Optional[int] = None,
) -> Directory:
    """Scan *root* and load every file below it."""
    tree = await build_tree(root, max_depth=max_depth)
    return await load_archives(tree, concurrency=concurrency)


async def list_child_statuses(root: str, max_depth: Optional[int] = None) -> List[Status]:
    """Direct file entries of *root*, without their content."""
    tree = await build_tree(root, max_depth=max_depth)
    return [item for item in tree.content if not is_directory(item)]


async def list_child_files(
    root: str,
    max_depth: Optional[int] = None,
    concurrency: Optional[int] = None,
) -> List[Archive]:
    """Direct file entries of *root*, each loaded as an Archive."""
    statuses = await list_child_statuses(root, max_depth=max_depth)
    semaphore = read_semaphore(concurrency)
    return list(await asyncio.gather(*(load_leaf(item, semaphore) for item in statuses)))


async def list_child_dirs(root: str, max_depth: Optional[int] = None) -> List[Directory]:
    """Direct sub-directories of *root*, each a full status subtree."""
    tree = await build_tree(root, max_depth=max_depth)
    return [item for item in tree.content if is_directory(item)]
