"""Error types shared by the transcoder services, HTTP surface and CLI."""

from __future__ import annotations

from typing import Any


class Svg2TsxError(RuntimeError):
    code = "ERROR"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class InvalidInputShapeError(Svg2TsxError):
    """Raised when the markup is missing or does not look like SVG."""

    code = "INVALID_INPUT"


class OptimizerUnavailableError(Svg2TsxError):
    """Raised when the optimization server cannot be reached."""

    code = "OPTIMIZER_UNAVAILABLE"


class OptimizerFailureError(Svg2TsxError):
    code = "OPTIMIZER_FAILURE"

    def __init__(self, message: str, *, info: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.info = info or {}


class PortInUseError(Svg2TsxError):
    code = "PORT_IN_USE"

    def __init__(self, port: int) -> None:
        super().__init__(f"Port {port} is already in use")
        self.port = port


class ServerStartError(Svg2TsxError):
    code = "SERVER_START"


class PersistenceError(Svg2TsxError):
    """Raised when generated output cannot be written."""

    code = "PERSISTENCE_FAILURE"


__all__ = [
    "Svg2TsxError",
    "InvalidInputShapeError",
    "OptimizerUnavailableError",
    "OptimizerFailureError",
    "PortInUseError",
    "ServerStartError",
    "PersistenceError",
]
