from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from typing import Any

from .errors import InvalidInputShapeError, OptimizerFailureError, Svg2TsxError
from .models import BatchItem, BatchItemOutcome, OptimizationOutcome
from .optimizer import Optimizer
from .rules import BASELINE_RULE_SET, PLUGIN_CATALOGUE, merge_rule_sets
from .transcoder import looks_like_svg


def byte_size(text: str) -> int:
    return len(text.encode("utf-8"))


def round2(value: float) -> float:
    """Round half up to two decimals."""

    return math.floor(value * 100 + 0.5) / 100


def reduction_percentage(original_size: int, optimized_size: int) -> float:
    if original_size <= 0:
        return 0.0
    return round2((original_size - optimized_size) / original_size * 100)


class OptimizationService:
    def __init__(self, optimizer: Optimizer, baseline: Mapping[str, Any] | None = None) -> None:
        self._optimizer = optimizer
        self._baseline = dict(baseline) if baseline is not None else dict(BASELINE_RULE_SET)

    @property
    def baseline(self) -> dict[str, Any]:
        return dict(self._baseline)

    def list_plugins(self) -> list[str]:
        return list(PLUGIN_CATALOGUE)

    def effective_config(self, override: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return merge_rule_sets(self._baseline, override)

    def optimize(self, markup: object, config: Mapping[str, Any] | None = None) -> OptimizationOutcome:
        """Optimize one SVG document.

        Raises :class:`InvalidInputShapeError` for missing or non-SVG input and
        :class:`OptimizerFailureError` when the optimizer yields no output.
        """

        svg = self._validate(markup)
        original_size = byte_size(svg)
        effective = self.effective_config(config)
        result = self._optimizer.optimize(svg, effective)
        if not result.data:
            raise OptimizerFailureError("Failed to optimize SVG", info=result.info)
        optimized_size = byte_size(result.data)
        return OptimizationOutcome(
            success=True,
            optimized_markup=result.data,
            original_size=original_size,
            optimized_size=optimized_size,
            reduction_percentage=reduction_percentage(original_size, optimized_size),
            info=result.info,
        )

    def optimize_batch(
        self, items: Sequence[BatchItem], config: Mapping[str, Any] | None = None
    ) -> list[BatchItemOutcome]:
        outcomes: list[BatchItemOutcome] = []
        for item in items:
            outcomes.append(BatchItemOutcome(identifier=item.identifier, outcome=self._attempt(item, config)))
        return outcomes

    def _attempt(self, item: BatchItem, config: Mapping[str, Any] | None) -> OptimizationOutcome:
        try:
            return self.optimize(item.content, config)
        except OptimizerFailureError as exc:
            return failure_outcome(exc, info=exc.info)
        except Svg2TsxError as exc:
            return failure_outcome(exc)
        except Exception as exc:  # noqa: BLE001
            return OptimizationOutcome(success=False, error=str(exc) or type(exc).__name__, error_code="UNKNOWN")

    def _validate(self, markup: object) -> str:
        if not isinstance(markup, str) or not markup:
            raise InvalidInputShapeError("SVG string is required")
        if not looks_like_svg(markup):
            raise InvalidInputShapeError("Invalid SVG format")
        return markup


def failure_outcome(exc: Svg2TsxError, *, info: dict[str, Any] | None = None) -> OptimizationOutcome:
    return OptimizationOutcome(success=False, error=str(exc), error_code=exc.code, info=info or None)


def describe_info(info: Mapping[str, Any] | None) -> str:
    return json.dumps(dict(info or {}), sort_keys=True)


__all__ = [
    "OptimizationService",
    "byte_size",
    "describe_info",
    "failure_outcome",
    "reduction_percentage",
    "round2",
]
