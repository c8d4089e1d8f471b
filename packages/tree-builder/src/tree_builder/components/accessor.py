"""
Async metadata accessor over the host filesystem.

Each function wraps a single filesystem concern (existence, size, text body,
directory listing) and returns plain values or node records. Blocking calls
run in a worker thread so callers can fan out reads with ``asyncio.gather``.
Only :func:`exists` catches errors; everything else propagates to the caller.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from tree_builder.config import settings

from .node import Archive, Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirEntry:
    """One entry reported by a directory listing."""

    name: str
    path: str
    is_file: bool


# ---------------------------------------------------------------------------
# Path parsing (no filesystem access)
# ---------------------------------------------------------------------------


def basename(path: str) -> str:
    return os.path.basename(os.path.normpath(path))


def extension(path: str) -> str:
    """Return the extension including its leading dot, or ``""``."""
    return os.path.splitext(path)[1]


# ---------------------------------------------------------------------------
# Filesystem reads
# ---------------------------------------------------------------------------


async def exists(path: str) -> bool:
    """True when ``stat`` succeeds. Any ``OSError`` counts as missing."""
    try:
        await asyncio.to_thread(os.stat, path)
    except OSError as exc:
        logger.debug("stat failed for %s: %s", path, exc)
        return False
    return True


async def size(path: str) -> int:
    """Byte size of ``path``, 0 when it does not exist."""
    if not await exists(path):
        return 0
    stat = await asyncio.to_thread(os.stat, path)
    return int(stat.st_size)


def _read_text(path: str, encoding: str, errors: str) -> str:
    with open(path, "r", encoding=encoding, errors=errors) as f:
        return f.read()


async def read_body(path: str, encoding: Optional[str] = None) -> str:
    """Whole text content of ``path``, ``""`` when it does not exist.

    Undecodable bytes follow ``settings.decode_errors`` (U+FFFD by default).
    """
    if not await exists(path):
        return ""
    return await asyncio.to_thread(
        _read_text, path, encoding or settings.encoding, settings.decode_errors
    )


async def list_directory(path: str) -> List[DirEntry]:
    """Direct entries of ``path`` in the order the host reports them."""

    def _scan() -> List[DirEntry]:
        with os.scandir(path) as entries:
            return [
                DirEntry(
                    name=entry.name,
                    path=os.path.join(path, entry.name),
                    is_file=entry.is_file(),
                )
                for entry in entries
            ]

    return await asyncio.to_thread(_scan)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


async def status(path: str) -> Status:
    return Status(name=basename(path), path=path, size=await size(path))


async def archive(path: str, encoding: Optional[str] = None) -> Archive:
    """Load ``path`` as an :class:`Archive` (status, extension and body)."""
    stat = await status(path)
    body = await read_body(path, encoding=encoding)
    logger.debug("Loaded %s (%d bytes)", path, stat.size)
    return Archive(
        name=stat.name,
        path=stat.path,
        size=stat.size,
        extension=extension(path),
        body=body,
    )
