from __future__ import annotations

import copy
import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from .rules import DEFAULT_CLIENT_RULE_SET


CONFIG_FILE = Path("config.toml")

DEFAULT_ICON_PATHS: dict[str, str] = {
    "Outline": "src/components/Common/Icon/icons/outline",
    "Fill": "src/components/Common/Icon/icons/fill",
    "Color": "src/components/Common/Icon/icons/color",
    "3D": "src/components/Common/Icon/icons/3d",
}


@dataclass(slots=True)
class ReplaceColorConfig:
    color: str = "#2B2B2B"
    types: tuple[str, ...] = ("Fill", "Outline")

    def applies_to(self, icon_type: str) -> bool:
        return icon_type in self.types


@dataclass(slots=True)
class SvgOptimizeConfig:
    url: str = "http://localhost:3600/api/optimize"
    enabled: bool = True


@dataclass(slots=True)
class RuntimeConfig:
    log_dir: Path = Path("runs")
    log_file: str = "log.jsonl"
    max_payload_mb: int = 10
    request_timeout_s: float | None = None
    startup_timeout_s: float = 10.0
    log_level: str = "info"

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.log_file


@dataclass(slots=True)
class APIConfig:
    host: str = "127.0.0.1"


@dataclass(slots=True)
class AppConfig:
    icon_paths: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ICON_PATHS))
    replace_color: ReplaceColorConfig = field(default_factory=ReplaceColorConfig)
    auto_export_module: bool = True
    svg_optimize: SvgOptimizeConfig = field(default_factory=SvgOptimizeConfig)
    optimization_server_port: int = 3600
    svg_optimize_config: dict[str, Any] = field(default_factory=lambda: copy.deepcopy(DEFAULT_CLIENT_RULE_SET))
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    api: APIConfig = field(default_factory=APIConfig)

    def icon_path(self, icon_type: str) -> str:
        return self.icon_paths.get(icon_type) or f"src/components/Common/Icon/icons/{icon_type.lower()}"


def _read_toml(path: Path) -> Mapping[str, object]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _tuple_of_strings(value: object | None, default: Iterable[str]) -> tuple[str, ...]:
    if not value:
        return tuple(default)
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(item) for item in value)
    raise TypeError(f"Unsupported icon type list: {value!r}")


def _build_replace_color(data: Mapping[str, object] | None) -> ReplaceColorConfig:
    if not data:
        return ReplaceColorConfig()
    return ReplaceColorConfig(
        color=str(data.get("color", "#2B2B2B")),
        types=_tuple_of_strings(data.get("types"), ReplaceColorConfig().types),
    )


def _build_svg_optimize(data: Mapping[str, object] | None) -> SvgOptimizeConfig:
    if not data:
        return SvgOptimizeConfig()
    return SvgOptimizeConfig(
        url=str(data.get("url", SvgOptimizeConfig().url)),
        enabled=bool(data.get("enabled", True)),
    )


def _build_runtime(data: Mapping[str, object] | None) -> RuntimeConfig:
    if not data:
        return RuntimeConfig()
    timeout = data.get("request_timeout_s")
    return RuntimeConfig(
        log_dir=Path(str(data.get("log_dir", "runs"))),
        log_file=str(data.get("log_file", "log.jsonl")),
        max_payload_mb=int(data.get("max_payload_mb", 10)),
        request_timeout_s=float(timeout) if timeout is not None else None,
        startup_timeout_s=float(data.get("startup_timeout_s", 10.0)),
        log_level=str(data.get("log_level", "info")),
    )


def _build_api(data: Mapping[str, object] | None) -> APIConfig:
    if not data:
        return APIConfig()
    return APIConfig(host=str(data.get("host", "127.0.0.1")))


def _mapping(raw: Mapping[str, object], key: str) -> Mapping[str, object] | None:
    value = raw.get(key)
    return value if isinstance(value, Mapping) else None


def load_config(path: Path | None = None) -> AppConfig:
    path = path or CONFIG_FILE
    raw = _read_toml(path)
    section = _mapping(raw, "svg2tsx") or {}
    icon_paths = _mapping(section, "icon_paths")
    rule_set = _mapping(section, "svg_optimize_config")
    return AppConfig(
        icon_paths={str(k): str(v) for k, v in icon_paths.items()} if icon_paths else dict(DEFAULT_ICON_PATHS),
        replace_color=_build_replace_color(_mapping(section, "replace_color")),
        auto_export_module=bool(section.get("auto_export_module", True)),
        svg_optimize=_build_svg_optimize(_mapping(section, "svg_optimize")),
        optimization_server_port=int(section.get("optimization_server_port", 3600)),
        svg_optimize_config=dict(rule_set) if rule_set else copy.deepcopy(DEFAULT_CLIENT_RULE_SET),
        runtime=_build_runtime(_mapping(raw, "runtime")),
        api=_build_api(_mapping(raw, "api")),
    )


def dump_config(config: AppConfig) -> str:
    payload = {
        "svg2tsx": {
            "icon_paths": dict(config.icon_paths),
            "replace_color": {
                "color": config.replace_color.color,
                "types": list(config.replace_color.types),
            },
            "auto_export_module": config.auto_export_module,
            "svg_optimize": {
                "url": config.svg_optimize.url,
                "enabled": config.svg_optimize.enabled,
            },
            "optimization_server_port": config.optimization_server_port,
            "svg_optimize_config": config.svg_optimize_config,
        },
        "runtime": {
            "log_dir": str(config.runtime.log_dir),
            "log_file": config.runtime.log_file,
            "max_payload_mb": config.runtime.max_payload_mb,
            "request_timeout_s": config.runtime.request_timeout_s,
            "startup_timeout_s": config.runtime.startup_timeout_s,
            "log_level": config.runtime.log_level,
        },
        "api": {
            "host": config.api.host,
        },
    }
    return json.dumps(payload, indent=2)


__all__ = [
    "AppConfig",
    "APIConfig",
    "ReplaceColorConfig",
    "RuntimeConfig",
    "SvgOptimizeConfig",
    "dump_config",
    "load_config",
]
