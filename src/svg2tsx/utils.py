from __future__ import annotations

import hashlib
import os
import tempfile
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Iterator

COMPONENT_SUFFIXES: tuple[str, ...] = (".tsx", ".jsx")


def generate_run_id(prefix: str = "run") -> str:
    epoch_ms = int(time.time() * 1000)
    random_bits = hashlib.sha256(os.urandom(16)).hexdigest()[:8]
    return f"{prefix}-{epoch_ms}-{random_bits}"


def atomic_write(path: Path, data: str, encoding: str = "utf-8") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", delete=False, dir=path.parent, encoding=encoding) as tmp:
        tmp.write(data)
        tmp.flush()
        os.fsync(tmp.fileno())
    os.replace(tmp.name, path)


def iter_files(paths: Iterable[Path], suffixes: tuple[str, ...] = COMPONENT_SUFFIXES) -> Iterator[Path]:
    """Yield component files from *paths*, descending into directories."""

    for path in paths:
        if path.is_file():
            yield path
        elif path.is_dir():
            for file_path in sorted(path.rglob("*")):
                if file_path.is_file() and file_path.suffix.lower() in suffixes:
                    yield file_path


__all__ = ["COMPONENT_SUFFIXES", "atomic_write", "generate_run_id", "iter_files"]
