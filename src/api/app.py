from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.settings import Settings, get_settings
from svg2tsx.config import AppConfig, load_config
from svg2tsx.optimizer import Optimizer, ScourOptimizer
from svg2tsx.service import OptimizationService

from .routers import health, optimize, plugins


def create_app(
    config: AppConfig | None = None,
    *,
    optimizer: Optimizer | None = None,
    require_enabled: bool = False,
) -> FastAPI:
    config = config or _prepare_config(get_settings())
    if require_enabled and not config.svg_optimize.enabled:
        raise RuntimeError("SVG optimization is disabled. Enable it via svg2tsx.svg_optimize.enabled")

    app = FastAPI(title="SVG Optimization Server", version="0.1.0")
    app.state.config = config
    app.state.service = OptimizationService(optimizer or ScourOptimizer())
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    max_bytes = config.runtime.max_payload_mb * 1024 * 1024

    @app.middleware("http")
    async def _enforce_size_limit(request: Request, call_next):  # type: ignore[no-untyped-def]
        length = request.headers.get("content-length")
        if length is None:
            # chunked uploads carry no length header
            size = len(await request.body())
        else:
            size = int(length) if length.isdigit() else 0
        if size > max_bytes:
            return JSONResponse(status_code=413, content={"success": False, "error": "SIZE_LIMIT"})
        return await call_next(request)

    app.include_router(health.router)
    app.include_router(optimize.router)
    app.include_router(plugins.router)
    return app


def _prepare_config(settings: Settings) -> AppConfig:
    config = load_config(settings.config_path)
    if settings.port is not None:
        config.optimization_server_port = settings.port
    if settings.enable_server is not None:
        config.svg_optimize.enabled = settings.enable_server
    return config


__all__ = ["create_app"]
