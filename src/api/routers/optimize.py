from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_service
from models.schemas import (
    BatchItemResponse,
    BatchOptimizeRequest,
    BatchOptimizeResponse,
    OptimizeRequest,
    OptimizeResponse,
)
from svg2tsx.errors import InvalidInputShapeError, OptimizerFailureError
from svg2tsx.models import BatchItem, OptimizationOutcome
from svg2tsx.service import OptimizationService, describe_info

router = APIRouter(prefix="/api", tags=["optimize"])


@router.post("/optimize", summary="Optimize a single SVG document")
async def optimize_svg(
    payload: OptimizeRequest,
    service: OptimizationService = Depends(get_service),
) -> JSONResponse:
    try:
        outcome = service.optimize(payload.svg_string, payload.config)
    except InvalidInputShapeError as exc:
        return _error(400, str(exc))
    except OptimizerFailureError as exc:
        return _error(500, str(exc), data=describe_info(exc.info))
    except Exception as exc:  # noqa: BLE001
        return _error(500, str(exc) or "Unknown error occurred")
    return JSONResponse(status_code=200, content=_serialize(_to_response(outcome)))


@router.post("/optimize/batch", summary="Optimize several SVG documents independently")
async def optimize_batch(
    payload: BatchOptimizeRequest,
    service: OptimizationService = Depends(get_service),
) -> JSONResponse:
    if payload.svg_files is None:
        return _error(400, "svgFiles array is required")
    items = [_batch_item(index, entry) for index, entry in enumerate(payload.svg_files)]
    outcomes = service.optimize_batch(items, payload.config)
    results = [
        BatchItemResponse(name=item.identifier, **_to_response(item.outcome).model_dump())
        for item in outcomes
    ]
    response = BatchOptimizeResponse(success=True, results=results)
    return JSONResponse(status_code=200, content=_serialize(response))


def _batch_item(index: int, entry: Any) -> BatchItem:
    if not isinstance(entry, dict):
        return BatchItem(identifier=f"item-{index}", content=None)
    name = entry.get("name")
    return BatchItem(identifier=str(name) if name else f"item-{index}", content=entry.get("content"))


def _to_response(outcome: OptimizationOutcome) -> OptimizeResponse:
    return OptimizeResponse(
        success=outcome.success,
        data=outcome.optimized_markup,
        error=outcome.error,
        original_size=outcome.original_size,
        optimized_size=outcome.optimized_size,
        reduction_percentage=outcome.reduction_percentage,
    )


def _serialize(model: OptimizeResponse | BatchOptimizeResponse) -> dict[str, Any]:
    return model.model_dump(by_alias=True, exclude_none=True)


def _error(status_code: int, message: str, *, data: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=_serialize(OptimizeResponse(success=False, error=message, data=data)),
    )


__all__ = ["router"]
