"""Icon component files: naming, writing and barrel exports."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .config import AppConfig
from .errors import InvalidInputShapeError, PersistenceError
from .transcoder import looks_like_svg, replace_color, svg_to_component_source
from .utils import atomic_write

ICON_NAME_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
INDEX_FILE = "index.ts"
DYNAMIC_IMPORT = "import dynamic from 'next/dynamic';\n"


@dataclass(slots=True)
class IconFile:
    name: str
    icon_type: str
    path: Path
    exported: bool


def validate_icon_name(name: str | None) -> str | None:
    """Return an error message for an invalid icon name, or None."""

    if not name:
        return "Name is required"
    if not ICON_NAME_RE.match(name):
        return "Name must be in PascalCase"
    return None


def upsert_directory(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PersistenceError(f"Failed to create directory: {exc}") from exc
    return path


def save_component_file(path: Path, content: str) -> None:
    try:
        atomic_write(path, content)
    except OSError as exc:
        raise PersistenceError(f"Failed to save component file {path.name}: {exc}") from exc


def export_line(icon_name: str, icon_type: str) -> str:
    return f"export const {icon_name}{icon_type} = dynamic(() => import('./{icon_name}'));\n"


def export_module(directory: Path, icon_name: str, icon_type: str) -> bool:
    """Add the dynamic-import export for *icon_name* to the directory barrel.

    Returns False when the export line was already present.
    """

    index_path = directory / INDEX_FILE
    try:
        content = index_path.read_text(encoding="utf-8") if index_path.exists() else ""
    except OSError as exc:
        raise PersistenceError(f"Failed to read {index_path}: {exc}") from exc
    line = export_line(icon_name, icon_type)
    if line in content:
        return False
    if content and not content.endswith("\n"):
        content += "\n"
    if DYNAMIC_IMPORT not in content:
        content += DYNAMIC_IMPORT
    save_component_file(index_path, content + line)
    return True


def prepare_icon_svg(svg: str, icon_type: str, config: AppConfig) -> str:
    if config.replace_color.applies_to(icon_type):
        return replace_color(svg, config.replace_color.color)
    return svg


def create_icon(svg: str, icon_name: str, icon_type: str, config: AppConfig, *, root: Path) -> IconFile:
    """Write the component for *svg* under the configured directory of *icon_type*."""

    if not looks_like_svg(svg):
        raise InvalidInputShapeError("Input is not an SVG")
    error = validate_icon_name(icon_name)
    if error:
        raise InvalidInputShapeError(error)
    directory = upsert_directory(root / config.icon_path(icon_type))
    source = svg_to_component_source(prepare_icon_svg(svg, icon_type, config))
    path = directory / f"{icon_name}.tsx"
    save_component_file(path, source)
    exported = False
    if config.auto_export_module:
        exported = export_module(directory, icon_name, icon_type)
    return IconFile(name=icon_name, icon_type=icon_type, path=path, exported=exported)


__all__ = [
    "IconFile",
    "create_icon",
    "export_line",
    "export_module",
    "prepare_icon_svg",
    "save_component_file",
    "upsert_directory",
    "validate_icon_name",
]
