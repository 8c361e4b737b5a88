from __future__ import annotations

from fastapi import APIRouter

from models.schemas import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check", response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus(status="ok", message="SVG Optimization Server is running")


__all__ = ["router"]
