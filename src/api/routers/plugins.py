from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_service
from models.schemas import PluginsResponse
from svg2tsx.service import OptimizationService

router = APIRouter(prefix="/api", tags=["plugins"])


@router.get("/plugins", summary="List supported cleanup rules", response_model=PluginsResponse)
async def list_plugins(service: OptimizationService = Depends(get_service)) -> PluginsResponse:
    return PluginsResponse(success=True, plugins=service.list_plugins())


__all__ = ["router"]
