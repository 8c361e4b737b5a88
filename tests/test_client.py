from __future__ import annotations

import pytest
import requests
from fastapi.testclient import TestClient

from api.app import create_app
from conftest import FakeOptimizer, sized_svg
from svg2tsx.client import HttpOptimizerClient, LocalOptimizerClient, health_url
from svg2tsx.config import AppConfig
from svg2tsx.errors import InvalidInputShapeError, OptimizerFailureError, OptimizerUnavailableError
from svg2tsx.service import OptimizationService

URL = "http://testserver/api/optimize"


class RefusingSession:
    def get(self, url: str, **kwargs: object) -> None:
        raise requests.ConnectionError("connection refused")

    def post(self, url: str, **kwargs: object) -> None:
        raise requests.ConnectionError("connection refused")


def build_client(optimizer: FakeOptimizer) -> HttpOptimizerClient:
    session = TestClient(create_app(AppConfig(), optimizer=optimizer))
    return HttpOptimizerClient(URL, session=session)


def test_health_url() -> None:
    assert health_url("http://localhost:3600/api/optimize") == "http://localhost:3600/health"


def test_http_client_success(fake_optimizer: FakeOptimizer) -> None:
    client = build_client(fake_optimizer)
    assert client.is_available()
    outcome = client.optimize(sized_svg(100), {"multipass": False})
    assert outcome.success is True
    assert outcome.optimized_markup == sized_svg(60)
    assert outcome.reduction_percentage == 40.0
    assert fake_optimizer.calls[0][1]["multipass"] is False


def test_http_client_invalid_input(fake_optimizer: FakeOptimizer) -> None:
    with pytest.raises(InvalidInputShapeError):
        build_client(fake_optimizer).optimize("<div/>")


def test_http_client_server_failure() -> None:
    with pytest.raises(OptimizerFailureError) as exc:
        build_client(FakeOptimizer(output=None)).optimize("<svg></svg>")
    assert "Failed to optimize SVG" in str(exc.value)


def test_http_client_unreachable_server() -> None:
    client = HttpOptimizerClient(URL, session=RefusingSession())
    assert client.is_available() is False
    with pytest.raises(OptimizerUnavailableError) as exc:
        client.optimize("<svg></svg>")
    assert "Please start it first" in str(exc.value)


def test_local_client_delegates_to_service(fake_optimizer: FakeOptimizer) -> None:
    client = LocalOptimizerClient(OptimizationService(fake_optimizer))
    assert client.is_available()
    assert client.optimize(sized_svg(100)).optimized_size == 60
