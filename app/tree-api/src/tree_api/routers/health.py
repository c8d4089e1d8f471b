from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from tree_api.dependencies import Root
from tree_api.services import health as healthService


router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    root: str
    root_exists: bool

@router.get("", response_model=HealthResponse)
async def health_check(root: Root) -> HealthResponse:
    """Return API liveness and whether the snapshot root is reachable."""
    root_exists = await healthService.health_check(root)
    if not root_exists:
        raise HTTPException(status_code=503, detail=f"API root unavailable: {root}")
    return HealthResponse(status="ok", root=root, root_exists=root_exists)
