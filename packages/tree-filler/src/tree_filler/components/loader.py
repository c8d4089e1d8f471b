import asyncio
import logging
from typing import Optional

from tree_builder.components import accessor
from tree_builder.components.node import Archive, Directory, Node, Status, is_archive, is_directory
from tree_builder.config import settings

logger = logging.getLogger(__name__)


def read_semaphore(concurrency: Optional[int] = None) -> asyncio.Semaphore:
    """Semaphore bounding file reads in flight; defaults to the configured limit."""
    limit = settings.max_concurrent_reads if concurrency is None else concurrency
    if limit < 1:
        raise ValueError(f"concurrency must be >= 1, got {limit}")
    return asyncio.Semaphore(limit)


async def load_leaf(leaf: Status | Archive, semaphore: asyncio.Semaphore) -> Archive:
    """Load one leaf into an :class:`Archive`; loaded leaves pass through."""
    if is_archive(leaf):
        return leaf
    async with semaphore:
        return await accessor.archive(leaf.path)


async def load_archives(tree: Directory, concurrency: Optional[int] = None) -> Directory:
    """
    Return a new tree of the same shape with every leaf loaded as an Archive.

    Leaves of each directory are loaded concurrently; one semaphore bounds the
    number of reads in flight across the whole call. ``concurrency=1`` makes
    the reads strictly sequential. Entry order is preserved at every level and
    the input tree is left untouched.
    """
    semaphore = read_semaphore(concurrency)

    async def _transform(directory: Directory) -> Directory:
        content: list[Node] = list(
            await asyncio.gather(
                *(
                    _transform(item) if is_directory(item) else load_leaf(item, semaphore)
                    for item in directory.content
                )
            )
        )
        return directory.model_copy(update={"content": content})

    loaded = await _transform(tree)
    logger.info("Loaded archives under %s", tree.path)
    return loaded
