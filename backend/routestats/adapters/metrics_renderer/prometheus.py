"""Prometheus implementation of the MetricsRenderer protocol."""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from routestats.core.protocols.metrics_renderer import MetricsRenderer


class PrometheusMetricsRenderer(MetricsRenderer):
    """Render every collector registered on a CollectorRegistry.

    Pass ``PrometheusMetricsClient.registry`` to expose the statsd-style
    families the middleware writes to.
    """

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    def generate(self) -> bytes:
        return generate_latest(self._registry)
