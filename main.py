from fastapi import FastAPI, HTTPException

from api.app import create_app

try:
    app = create_app(require_enabled=True)
except RuntimeError:
    app = FastAPI(title="SVG Optimization Server", version="0.1.0")

    @app.get("/")
    async def api_disabled() -> dict[str, str]:
        raise HTTPException(
            status_code=503,
            detail="SVG optimization disabled. Enable by setting svg_optimize.enabled = true in config.toml",
        )
