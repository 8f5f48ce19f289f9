"""Metrics client adapters."""

from routestats.adapters.metrics_client.fake import FakeMetricsClient
from routestats.adapters.metrics_client.prometheus import PrometheusMetricsClient

__all__ = ["PrometheusMetricsClient", "FakeMetricsClient"]
