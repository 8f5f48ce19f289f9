"""Statsd-style request metrics middleware for FastAPI / Starlette apps."""

from routestats.api.middleware import MetricsMiddlewareOptions, build_metrics_middleware
from routestats.core.route_name import set_url_key

__all__ = ["MetricsMiddlewareOptions", "build_metrics_middleware", "set_url_key"]
