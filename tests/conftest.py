from __future__ import annotations

from collections.abc import Callable

import pytest

from svg2tsx.models import OptimizerResult


class FakeOptimizer:
    """Records calls and returns a canned (or computed) result."""

    def __init__(
        self,
        output: str | Callable[[str], str | None] | None = "<svg/>",
        *,
        error: Exception | None = None,
        info: dict[str, object] | None = None,
    ) -> None:
        self.output = output
        self.error = error
        self.info = info or {}
        self.calls: list[tuple[str, dict[str, object]]] = []

    def optimize(self, markup: str, rule_set: dict[str, object]) -> OptimizerResult:
        self.calls.append((markup, rule_set))
        if self.error is not None:
            raise self.error
        data = self.output(markup) if callable(self.output) else self.output
        return OptimizerResult(data=data, info=self.info)


def sized_svg(size: int) -> str:
    """Return SVG markup exactly *size* bytes long."""

    return "<svg>" + " " * (size - 11) + "</svg>"


@pytest.fixture
def fake_optimizer() -> FakeOptimizer:
    return FakeOptimizer(output=sized_svg(60))
