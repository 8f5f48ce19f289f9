"""Prometheus implementation of the MetricsClient protocol.

Statsd-style names are not valid Prometheus metric names and are unbounded,
so every increment lands on one counter family and every timing on one
histogram family, labelled with the fully-qualified dotted name.  A
dedicated CollectorRegistry keeps these families out of the global default
registry.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from prometheus_client import CollectorRegistry, Counter, Histogram

from routestats.core.config import settings


@dataclass(frozen=True)
class _Families:
    """Collectors shared between a client and all of its children."""

    registry: CollectorRegistry
    increments: Counter
    timings: Histogram


def _join(prefix: str, name: str) -> str:
    return ".".join(part for part in (prefix, name) if part)


class PrometheusMetricsClient:
    """Prometheus-backed statsd-style metrics client."""

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        namespace: str | None = None,
        prefix: str = "",
        *,
        _families: _Families | None = None,
    ) -> None:
        if _families is None:
            registry = registry or CollectorRegistry()
            namespace = namespace or settings.METRICS_NAMESPACE
            _families = _Families(
                registry=registry,
                increments=Counter(
                    f"{namespace}_statsd_increments_total",
                    "Statsd-style counter increments",
                    ["metric"],
                    registry=registry,
                ),
                timings=Histogram(
                    f"{namespace}_statsd_timing_seconds",
                    "Statsd-style timings in seconds",
                    ["metric"],
                    registry=registry,
                ),
            )
        self._families = _families
        self._registry = _families.registry
        self.prefix = prefix

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    # -- MetricsClient protocol methods --

    def increment(self, name: str) -> None:
        self._families.increments.labels(metric=_join(self.prefix, name)).inc()

    def timing(self, name: str, start_time: float) -> None:
        duration = time.perf_counter() - start_time
        self._families.timings.labels(metric=_join(self.prefix, name)).observe(duration)

    def get_child_client(self, prefix: str) -> PrometheusMetricsClient:
        return PrometheusMetricsClient(
            prefix=_join(self.prefix, prefix),
            _families=self._families,
        )
