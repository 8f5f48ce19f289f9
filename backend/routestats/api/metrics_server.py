"""Sidecar HTTP server exposing collected metrics on ``GET /metrics``.

Runs on its own port next to the application so scrapes never pass through
the instrumented middleware chain.
"""

from typing import Optional

from aiohttp import web

from routestats.core.config import settings
from routestats.core.logging import logger
from routestats.core.protocols.metrics_renderer import MetricsRenderer


class MetricsServer:
    """aiohttp server serving a MetricsRenderer's output."""

    def __init__(
        self,
        renderer: MetricsRenderer,
        port: Optional[int] = None,
        host: Optional[str] = None,
    ):
        """Initialize the metrics server.

        Args:
            renderer: Source of the serialized metrics.
            port: Port to listen on; ``0`` lets the OS choose.  Defaults to
                ``settings.METRICS_PORT``.
            host: Address to bind.  Defaults to ``settings.METRICS_HOST``.
        """
        self._renderer = renderer
        self._port = settings.METRICS_PORT if port is None else port
        self._host = host or settings.METRICS_HOST
        self._app = web.Application()
        self._app.add_routes([web.get("/metrics", self._handle_metrics)])
        self._runner: Optional[web.AppRunner] = None
        self.logger = logger.with_context(context_base="metrics_server", port=self._port)

    async def _handle_metrics(self, request: web.Request) -> web.Response:
        return web.Response(
            body=self._renderer.generate(),
            headers={"Content-Type": self._renderer.content_type},
        )

    async def start(self) -> None:
        """Bind the socket and start serving."""
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, host=self._host, port=self._port)
        await site.start()
        self.logger.info(f"Metrics server listening on http://{self._host}:{self._port}/metrics")

    async def stop(self) -> None:
        """Stop serving; a no-op when never started."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self.logger.info("Metrics server stopped")
