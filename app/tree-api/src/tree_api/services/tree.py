from typing import Any, Optional

from tree_builder.build_tree import build_tree
from tree_filler.fill_tree import (
    list_child_dirs,
    list_child_files,
    list_child_statuses,
    load_all_files,
)


async def get_tree(path: str, load: bool, max_depth: Optional[int]) -> dict[str, Any]:
    if load:
        tree = await load_all_files(path, max_depth=max_depth)
    else:
        tree = await build_tree(path, max_depth=max_depth)
    return tree.model_dump(mode="json")


async def get_files(path: str) -> list[dict[str, Any]]:
    return [item.model_dump(mode="json") for item in await list_child_files(path)]


async def get_statuses(path: str) -> list[dict[str, Any]]:
    return [item.model_dump(mode="json") for item in await list_child_statuses(path)]


async def get_dirs(path: str) -> list[dict[str, Any]]:
    return [item.model_dump(mode="json") for item in await list_child_dirs(path)]
