"""Route-name derivation for per-route metrics.

A route name is built from the per-request override when a handler set one,
otherwise from the HTTP method and the route template the framework matched.
The result is sanitized into a single statsd-safe path segment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from starlette.requests import Request

UNKNOWN_ROUTE_NAME = "unknown_express_route"

# Attribute on ``request.state`` that handlers set to pick their own route name.
URL_KEY_STATE_ATTR = "statsd_url_key"

RoutePath = Union[str, re.Pattern]


@dataclass(frozen=True)
class RequestMetricsContext:
    """The parts of a request that decide its route name."""

    method: str
    route_path: RoutePath | None = None
    url_key: str | None = None

    @classmethod
    def from_request(cls, request: Request) -> RequestMetricsContext:
        """Snapshot the method, matched route template and override of ``request``."""
        route = request.scope.get("route")
        return cls(
            method=request.method,
            route_path=getattr(route, "path", None),
            url_key=getattr(request.state, URL_KEY_STATE_ATTR, None),
        )


def set_url_key(request: Request, url_key: str) -> None:
    """Override the route name used for ``request``'s per-route metrics."""
    setattr(request.state, URL_KEY_STATE_ATTR, url_key)


def sanitize_route_name(route_name: str) -> str:
    """Drop every ``:``, drop the first ``/`` and turn the remaining ``/`` into ``_``.

    Only the first slash is removed outright, so ``"a/b"`` becomes ``"ab"``
    while ``"GET_/a/b"`` becomes ``"GET_a_b"``.
    """
    return route_name.replace(":", "").replace("/", "", 1).replace("/", "_")


def derive_route_name(context: RequestMetricsContext) -> str:
    """Return the sanitized route name for a request.

    Resolution order:
        1. ``context.url_key``, verbatim.
        2. ``<METHOD>_<route template>``, where a compiled pattern contributes
           its source text and ``"/"`` is spelled ``"root"``.
        3. ``UNKNOWN_ROUTE_NAME``.
    """
    if context.url_key:
        route_name = context.url_key
    elif context.route_path:
        path = context.route_path
        if isinstance(path, re.Pattern):
            path = path.pattern
        if path == "/":
            path = "root"
        route_name = f"{context.method}_{path}"
    else:
        route_name = UNKNOWN_ROUTE_NAME

    return sanitize_route_name(route_name)
