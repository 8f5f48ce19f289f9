"""MetricsClient protocol for statsd-style metric emission.

The middleware depends on this protocol rather than on a concrete client.
Production wires a Prometheus-backed adapter; tests inject a fake that
records calls in memory.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsClient(Protocol):
    """Protocol for a namespaced, statsd-style metrics client."""

    def increment(self, name: str) -> None:
        """Increment the counter called ``name`` by one."""
        ...

    def timing(self, name: str, start_time: float) -> None:
        """Record the time elapsed since ``start_time``.

        Args:
            name: Metric name, relative to this client's namespace.
            start_time: A ``time.perf_counter()`` reading taken when the
                measured operation began.
        """
        ...

    def get_child_client(self, prefix: str) -> MetricsClient:
        """Return a client whose metric names are nested under ``prefix``.

        An empty prefix returns a client for the same namespace.
        """
        ...
