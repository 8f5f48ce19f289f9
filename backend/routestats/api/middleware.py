"""HTTP middleware emitting statsd-style latency and status-code metrics.

Usage:
    client = PrometheusMetricsClient()
    app.middleware("http")(
        build_metrics_middleware(client, "api", MetricsMiddlewareOptions(time_by_url=True))
    )

Metrics are recorded from the response's completion hook, after Starlette
has sent the last body chunk, so they never hold up the request.  Handlers
may call ``set_url_key(request, "name")`` to choose the per-route name.
"""

from __future__ import annotations

import inspect
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from starlette.background import BackgroundTask
from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from routestats.core.logging import logger
from routestats.core.protocols.metrics_client import MetricsClient
from routestats.core.route_name import RequestMetricsContext, derive_route_name

OnResponseEnd = Callable[[MetricsClient, float, Request, Response], Optional[Awaitable[Any]]]
MetricsMiddleware = Callable[[Request, RequestResponseEndpoint], Awaitable[Response]]


@dataclass(frozen=True)
class MetricsMiddlewareOptions:
    """Per-route breakdown switches for ``build_metrics_middleware``.

    Attributes:
        time_by_url: Time each route separately instead of one global timer.
        count_by_url: Count requests per route.
        status_code_by_url: Count status codes per route.
        on_response_end: Called as ``(client, start_time, request, response)``
            after every metric is emitted.  Coroutine functions are awaited.
    """

    time_by_url: bool = False
    count_by_url: bool = False
    status_code_by_url: bool = False
    on_response_end: OnResponseEnd | None = None

    @property
    def track_by_url(self) -> bool:
        return self.time_by_url or self.count_by_url or self.status_code_by_url


def build_metrics_middleware(
    client: MetricsClient,
    prefix: str | None = "",
    options: MetricsMiddlewareOptions | None = None,
) -> MetricsMiddleware:
    """Build an HTTP middleware reporting to ``client`` under ``prefix``.

    Args:
        client: Parent metrics client; metrics go to its child for ``prefix``.
        prefix: Metrics namespace.  Empty means the client's own namespace.
        options: Per-route switches and the ``on_response_end`` hook.

    Returns:
        A ``(request, call_next)`` coroutine function for
        ``app.middleware("http")``.
    """
    child = client.get_child_client(prefix or "")
    options = options or MetricsMiddlewareOptions()
    log = logger.with_context(context_base="metrics_middleware", prefix=prefix or "")
    log.debug(
        f"Metrics middleware built (time_by_url={options.time_by_url}, "
        f"count_by_url={options.count_by_url}, "
        f"status_code_by_url={options.status_code_by_url})"
    )

    async def record(start_time: float, request: Request, response: Response) -> None:
        status_code = response.status_code
        child.increment(f"response_code.{status_code}")

        if options.track_by_url:
            route_name = derive_route_name(RequestMetricsContext.from_request(request))
            if options.time_by_url:
                child.timing(f"response_time.{route_name}", start_time)
            if options.count_by_url:
                child.increment(route_name)
            if options.status_code_by_url:
                child.increment(f"response_code.{route_name}.{status_code}")
            if log.isEnabledFor(logging.DEBUG):
                log.debug(f"Recorded metrics for {route_name} ({status_code})")
        else:
            child.timing("response_time", start_time)

        if options.on_response_end is not None:
            result = options.on_response_end(child, start_time, request, response)
            if inspect.isawaitable(result):
                await result

    async def metrics_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors reach the client as a 500 from the outer error middleware.
            await record(start_time, request, Response(status_code=500))
            raise

        original = response.background

        async def on_complete() -> None:
            if original is not None:
                await original()
            await record(start_time, request, response)

        response.background = BackgroundTask(on_complete)
        return response

    return metrics_middleware
