from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class OptimizationLogEntry:
    run_id: str
    source: str
    status: str
    error_code: str | None
    error_message: str | None
    original_size: int | None
    optimized_size: int | None
    reduction_percentage: float | None
    elapsed_ms: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class RunLogger:
    """Append-only JSON Lines log of batch optimization attempts."""

    def __init__(self, log_file: Path) -> None:
        self._log_file = log_file

    @property
    def path(self) -> Path:
        return self._log_file

    def append(self, entry: OptimizationLogEntry) -> None:
        self._log_file.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(entry.to_dict(), ensure_ascii=False)
        with self._log_file.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")


__all__ = ["OptimizationLogEntry", "RunLogger"]
