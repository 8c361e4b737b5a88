from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class HealthStatus(BaseModel):
    status: str
    message: str


class OptimizeRequest(CamelModel):
    svg_string: Any = Field(None, alias="svgString")
    config: dict[str, Any] | None = None


class OptimizeResponse(CamelModel):
    success: bool
    data: str | None = None
    error: str | None = None
    original_size: int | None = Field(None, alias="originalSize")
    optimized_size: int | None = Field(None, alias="optimizedSize")
    reduction_percentage: float | None = Field(None, alias="reductionPercentage")


class BatchOptimizeRequest(CamelModel):
    svg_files: list[Any] | None = Field(None, alias="svgFiles")
    config: dict[str, Any] | None = None


class BatchItemResponse(OptimizeResponse):
    name: str


class BatchOptimizeResponse(BaseModel):
    success: bool
    results: list[BatchItemResponse]


class PluginsResponse(BaseModel):
    success: bool
    plugins: list[str]
