"""Metrics renderer adapters."""

from routestats.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer"]
