"""Start/stop handle for the optimization HTTP service."""

from __future__ import annotations

import errno
import logging
import socket
import threading
import time
from enum import Enum

import uvicorn
from fastapi import FastAPI

from svg2tsx.errors import PortInUseError, ServerStartError

logger = logging.getLogger("svg2tsx.server")


class ServerState(str, Enum):
    STOPPED = "stopped"
    STARTING = "starting"
    LISTENING = "listening"
    STOPPING = "stopping"


class OptimizationServer:
    """Runs one uvicorn server for *app* in a background thread.

    The listen socket is bound synchronously in :meth:`start` so an occupied
    port fails fast with :class:`PortInUseError`.
    """

    def __init__(
        self,
        app: FastAPI,
        *,
        host: str = "127.0.0.1",
        port: int = 3600,
        startup_timeout_s: float = 10.0,
        log_level: str = "info",
    ) -> None:
        self._app = app
        self._host = host
        self._port = port
        self._startup_timeout_s = startup_timeout_s
        self._log_level = log_level
        self._state = ServerState.STOPPED
        self._lock = threading.Lock()
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._socket: socket.socket | None = None

    @property
    def state(self) -> ServerState:
        return self._state

    @property
    def port(self) -> int:
        return self._port

    @property
    def host(self) -> str:
        return self._host

    def is_running(self) -> bool:
        return self._state is ServerState.LISTENING

    def start(self) -> None:
        with self._lock:
            if self._state in {ServerState.LISTENING, ServerState.STARTING}:
                raise PortInUseError(self._port)
            if self._state is ServerState.STOPPING:
                raise ServerStartError("Server is stopping")
            self._state = ServerState.STARTING
        try:
            sock = self._bind()
        except Exception:
            self._state = ServerState.STOPPED
            raise

        config = uvicorn.Config(self._app, log_level=self._log_level, lifespan="off")
        server = uvicorn.Server(config)
        thread = threading.Thread(
            target=server.run,
            kwargs={"sockets": [sock]},
            name=f"svg-optimizer-{self._port}",
            daemon=True,
        )
        self._server, self._thread, self._socket = server, thread, sock
        thread.start()
        try:
            self._wait_until_started(server, thread)
        except ServerStartError:
            self._teardown()
            raise
        self._state = ServerState.LISTENING
        logger.info("SVG Optimization Server running on port %s", self._port)

    def stop(self) -> None:
        with self._lock:
            if self._state is ServerState.STOPPED:
                return
            self._state = ServerState.STOPPING
        self._teardown()
        logger.info("SVG Optimization Server stopped")

    def wait(self, poll_s: float = 0.5) -> None:
        """Block while the server is listening."""

        while self._state is ServerState.LISTENING and self._thread is not None and self._thread.is_alive():
            time.sleep(poll_s)

    def _bind(self) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self._host, self._port))
            sock.listen(128)
        except OSError as exc:
            sock.close()
            if exc.errno == errno.EADDRINUSE:
                raise PortInUseError(self._port) from exc
            raise ServerStartError(f"Unable to bind {self._host}:{self._port}: {exc}") from exc
        self._port = sock.getsockname()[1]
        return sock

    def _wait_until_started(self, server: uvicorn.Server, thread: threading.Thread) -> None:
        deadline = time.monotonic() + self._startup_timeout_s
        while not server.started:
            if not thread.is_alive():
                raise ServerStartError(f"Server on port {self._port} exited during startup")
            if time.monotonic() > deadline:
                raise ServerStartError(f"Server on port {self._port} did not start in time")
            time.sleep(0.01)

    def _teardown(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=self._startup_timeout_s)
        if self._socket is not None:
            self._socket.close()
        self._server = self._thread = self._socket = None
        self._state = ServerState.STOPPED


__all__ = ["OptimizationServer", "ServerState"]
