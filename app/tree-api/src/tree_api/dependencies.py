import os
from typing import Annotated

from fastapi import Depends, HTTPException, Query

from tree_api.config import settings


def get_root() -> str:
    """Absolute directory snapshots are served from."""
    return os.path.realpath(settings.api_root)


def resolve_path(
    root: Annotated[str, Depends(get_root)],
    path: Annotated[str, Query(description="Directory relative to the API root")] = ".",
) -> str:
    """FastAPI dependency turning a request path into a directory under the root."""
    root = os.path.realpath(root)
    target = os.path.realpath(os.path.join(root, path))
    if os.path.commonpath([root, target]) != root:
        raise HTTPException(status_code=403, detail=f"Path outside API root: {path}")
    return target


TargetPath = Annotated[str, Depends(resolve_path)]
Root = Annotated[str, Depends(get_root)]
