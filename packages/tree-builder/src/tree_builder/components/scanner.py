import logging
from typing import Optional

from tree_builder.config import settings
from tree_builder.errors import DepthExceededError

from . import accessor
from .node import Directory, Node

logger = logging.getLogger(__name__)


async def scan_directory(root: str, max_depth: Optional[int] = None) -> Directory:
    """
    Recursively scan a directory into a tree of status-only nodes.

    Entries are visited depth-first, one at a time, in the order the host
    lists them. Files become :class:`Status` leaves, everything else is
    descended into.

    Args:
        root: Path of the directory to scan.
        max_depth: Deepest sub-directory level allowed below ``root``
            (root itself is level 0). Defaults to ``settings.max_depth``.

    Returns:
        The :class:`Directory` for ``root``.

    Raises:
        DepthExceededError: A directory sits deeper than ``max_depth``.
        OSError: ``root`` or a sub-directory cannot be listed.
    """
    limit = settings.max_depth if max_depth is None else max_depth

    async def _walk(current_path: str, depth: int) -> Directory:
        if depth > limit:
            raise DepthExceededError(current_path, limit)

        stat = await accessor.status(current_path)
        content: list[Node] = []

        for entry in await accessor.list_directory(current_path):
            if entry.is_file:
                content.append(await accessor.status(entry.path))
            else:
                content.append(await _walk(entry.path, depth + 1))

        logger.debug("Scanned %s (%d entries)", current_path, len(content))
        return Directory(name=stat.name, path=stat.path, size=stat.size, content=content)

    return await _walk(root, 0)
