"""Domain models for optimization requests and batch runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class OptimizerResult:
    """Raw output of one optimizer invocation."""

    data: str | None
    info: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class OptimizationOutcome:
    success: bool
    optimized_markup: str | None = None
    error: str | None = None
    error_code: str | None = None
    original_size: int | None = None
    optimized_size: int | None = None
    reduction_percentage: float | None = None
    info: dict[str, Any] | None = None


@dataclass(slots=True)
class BatchItem:
    """One unit of batch work; file items carry a *path* and are read lazily."""

    identifier: str
    content: object = None
    path: Path | None = None


@dataclass(slots=True)
class BatchItemOutcome:
    identifier: str
    outcome: OptimizationOutcome
    skipped: bool = False


@dataclass(slots=True)
class BatchReport:
    """Aggregate counters and per-item outcomes for one batch run."""

    run_id: str
    processed: int = 0
    optimized: int = 0
    errored: int = 0
    skipped: int = 0
    cancelled: bool = False
    items: list[BatchItemOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)


__all__ = [
    "BatchItem",
    "BatchItemOutcome",
    "BatchReport",
    "OptimizationOutcome",
    "OptimizerResult",
]
