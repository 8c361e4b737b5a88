"""SVG to React component transcoder with an SVG optimization service."""

from .batch import BatchOrchestrator
from .config import AppConfig, load_config
from .models import BatchItem, BatchReport, OptimizationOutcome
from .service import OptimizationService
from .transcoder import component_source_to_svg, looks_like_svg, svg_to_component_source

__all__ = [
    "AppConfig",
    "BatchItem",
    "BatchOrchestrator",
    "BatchReport",
    "OptimizationOutcome",
    "OptimizationService",
    "component_source_to_svg",
    "load_config",
    "looks_like_svg",
    "svg_to_component_source",
]
