"""Clients that submit SVG markup to an optimization service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import urlsplit, urlunsplit

import requests

from .errors import InvalidInputShapeError, OptimizerFailureError, OptimizerUnavailableError
from .models import OptimizationOutcome
from .service import OptimizationService

UNAVAILABLE_HINT = "SVG Optimization Server is not running. Please start it first (svg2tsx serve)."


class OptimizerClient(Protocol):
    def optimize(self, svg: str, config: Mapping[str, Any] | None = None) -> OptimizationOutcome:  # pragma: no cover - interface
        ...


def health_url(optimize_url: str) -> str:
    parts = urlsplit(optimize_url)
    return urlunsplit((parts.scheme, parts.netloc, "/health", "", ""))


class HttpOptimizerClient:
    """Posts markup to ``/api/optimize`` and raises on any unusable reply.

    *session* only needs a requests-style ``get``/``post``; tests pass the
    FastAPI test client here.
    """

    def __init__(self, url: str, *, session: Any | None = None, timeout: float | None = None) -> None:
        self._url = url
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    def _request_options(self) -> dict[str, Any]:
        if self._timeout is None:
            return {}
        return {"timeout": self._timeout}

    def is_available(self) -> bool:
        try:
            response = self._session.get(health_url(self._url), **self._request_options())
        except requests.RequestException:
            return False
        return response.status_code == 200

    def optimize(self, svg: str, config: Mapping[str, Any] | None = None) -> OptimizationOutcome:
        payload: dict[str, Any] = {"svgString": svg}
        if config is not None:
            payload["config"] = dict(config)
        try:
            response = self._session.post(self._url, json=payload, **self._request_options())
        except requests.RequestException as exc:
            raise OptimizerUnavailableError(f"{UNAVAILABLE_HINT} ({exc})") from exc
        body = _json_body(response)
        if response.status_code == 400:
            raise InvalidInputShapeError(str(body.get("error") or "Invalid SVG format"))
        if response.status_code != 200 or not body.get("success") or not body.get("data"):
            message = body.get("error") or f"HTTP error! status: {response.status_code}"
            raise OptimizerFailureError(f"SVG optimization failed: {message}")
        return OptimizationOutcome(
            success=True,
            optimized_markup=str(body["data"]),
            original_size=body.get("originalSize"),
            optimized_size=body.get("optimizedSize"),
            reduction_percentage=body.get("reductionPercentage"),
        )


class LocalOptimizerClient:
    """Runs the optimization service in-process, without HTTP."""

    def __init__(self, service: OptimizationService) -> None:
        self._service = service

    def is_available(self) -> bool:
        return True

    def optimize(self, svg: str, config: Mapping[str, Any] | None = None) -> OptimizationOutcome:
        return self._service.optimize(svg, config)


def _json_body(response: Any) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


__all__ = [
    "HttpOptimizerClient",
    "LocalOptimizerClient",
    "OptimizerClient",
    "health_url",
]
