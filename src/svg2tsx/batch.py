from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from threading import Event
from typing import Any

from .client import OptimizerClient
from .errors import PersistenceError, Svg2TsxError
from .logging import OptimizationLogEntry, RunLogger
from .models import BatchItem, BatchItemOutcome, BatchReport, OptimizationOutcome
from .service import failure_outcome
from .transcoder import component_source_to_svg, extract_svg, svg_to_jsx_markup
from .utils import atomic_write, generate_run_id, iter_files

ProgressCallback = Callable[[float], None]
Persist = Callable[[BatchItem, str], None]
Reembed = Callable[[str], str]

log = logging.getLogger("svg2tsx.batch")


def write_file(item: BatchItem, content: str) -> None:
    try:
        atomic_write(item.path or Path(item.identifier), content)
    except OSError as exc:
        raise PersistenceError(f"Failed to write {item.identifier}: {exc}") from exc


class BatchOrchestrator:
    """Optimizes the SVG embedded in each component source, one item at a time.

    A failing item is recorded and the run moves on; the optional cancellation
    event is only checked between items.
    """

    def __init__(
        self,
        client: OptimizerClient,
        *,
        config: Mapping[str, Any] | None = None,
        persist: Persist = write_file,
        reembed: Reembed = svg_to_jsx_markup,
        logger: RunLogger | None = None,
    ) -> None:
        self._client = client
        self._config = config
        self._persist = persist
        self._reembed = reembed
        self._logger = logger

    def run(
        self,
        items: Iterable[BatchItem],
        *,
        progress: ProgressCallback | None = None,
        cancellation: Event | None = None,
    ) -> BatchReport:
        pending = list(items)
        callback = progress or (lambda _: None)
        report = BatchReport(run_id=generate_run_id("batch"))
        callback(0.0)
        for index, item in enumerate(pending):
            if cancellation is not None and cancellation.is_set():
                report.cancelled = True
                break
            report.items.append(self._process(item, report))
            callback((index + 1) / len(pending))
        return report

    def optimize_files(
        self,
        paths: Sequence[Path],
        *,
        progress: ProgressCallback | None = None,
        cancellation: Event | None = None,
    ) -> BatchReport:
        items = [BatchItem(identifier=str(path), path=path) for path in iter_files(paths)]
        return self.run(items, progress=progress, cancellation=cancellation)

    def _process(self, item: BatchItem, report: BatchReport) -> BatchItemOutcome:
        try:
            content = _read_content(item)
        except PersistenceError as exc:
            report.processed += 1
            report.errored += 1
            outcome = failure_outcome(exc)
            self._log(report.run_id, item, outcome, 0.0)
            return BatchItemOutcome(identifier=item.identifier, outcome=outcome)

        span = extract_svg(content)
        if span is None:
            report.skipped += 1
            return BatchItemOutcome(
                identifier=item.identifier,
                outcome=OptimizationOutcome(success=False, error="No SVG found", error_code="NO_SVG"),
                skipped=True,
            )

        report.processed += 1
        start = time.perf_counter()
        try:
            outcome = self._client.optimize(component_source_to_svg(span), self._config)
            optimized = outcome.optimized_markup or ""
            self._persist(item, content.replace(span, self._reembed(optimized), 1))
        except Svg2TsxError as exc:
            outcome = failure_outcome(exc)
            report.errored += 1
        except Exception as exc:  # noqa: BLE001
            outcome = OptimizationOutcome(success=False, error=str(exc) or type(exc).__name__, error_code="UNKNOWN")
            report.errored += 1
        else:
            report.optimized += 1
        self._log(report.run_id, item, outcome, (time.perf_counter() - start) * 1000)
        return BatchItemOutcome(identifier=item.identifier, outcome=outcome)

    def _log(self, run_id: str, item: BatchItem, outcome: OptimizationOutcome, elapsed_ms: float) -> None:
        if self._logger is None:
            return
        entry = OptimizationLogEntry(
            run_id=run_id,
            source=item.identifier,
            status="success" if outcome.success else "failure",
            error_code=outcome.error_code,
            error_message=outcome.error,
            original_size=outcome.original_size,
            optimized_size=outcome.optimized_size,
            reduction_percentage=outcome.reduction_percentage,
            elapsed_ms=elapsed_ms,
        )
        try:
            self._logger.append(entry)
        except OSError as exc:
            log.warning("Could not append to run log %s: %s", self._logger.path, exc)


def _read_content(item: BatchItem) -> str:
    if item.path is None:
        return item.content if isinstance(item.content, str) else ""
    try:
        return item.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError(f"Failed to read {item.identifier}: {exc}") from exc


__all__ = ["BatchOrchestrator", "ProgressCallback", "write_file"]
