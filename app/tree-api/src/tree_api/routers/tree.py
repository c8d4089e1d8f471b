import logging
from typing import Any, Awaitable, Optional

from fastapi import APIRouter, HTTPException, Query
from tree_api.dependencies import TargetPath
from tree_api.services import tree as treeService
from tree_builder.errors import DepthExceededError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tree", tags=["tree"])


# ── Error mapping ─────────────────────────────────────────────────────────────

async def _run(call: Awaitable[Any]) -> Any:
    try:
        return await call
    except DepthExceededError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"Not found: {exc.filename}") from exc
    except NotADirectoryError as exc:
        raise HTTPException(status_code=400, detail=f"Not a directory: {exc.filename}") from exc
    except PermissionError as exc:
        raise HTTPException(status_code=403, detail=f"Permission denied: {exc.filename}") from exc
    except (OSError, ValueError) as exc:
        logger.error("Snapshot request failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("", response_model=dict[str, Any])
async def get_tree(
    path: TargetPath,
    load: bool = False,
    max_depth: Optional[int] = Query(default=None, ge=0),
) -> dict[str, Any]:
    """Full snapshot of a directory; ``load=true`` includes file bodies."""
    return await _run(treeService.get_tree(path, load=load, max_depth=max_depth))


@router.get("/files", response_model=list[dict[str, Any]])
async def get_files(path: TargetPath) -> list[dict[str, Any]]:
    """Direct files of a directory with their content."""
    return await _run(treeService.get_files(path))


@router.get("/statuses", response_model=list[dict[str, Any]])
async def get_statuses(path: TargetPath) -> list[dict[str, Any]]:
    """Direct files of a directory, metadata only."""
    return await _run(treeService.get_statuses(path))


@router.get("/dirs", response_model=list[dict[str, Any]])
async def get_dirs(path: TargetPath) -> list[dict[str, Any]]:
    """Direct sub-directories of a directory as status subtrees."""
    return await _run(treeService.get_dirs(path))
