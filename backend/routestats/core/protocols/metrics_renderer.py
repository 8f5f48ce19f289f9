"""MetricsRenderer protocol for exposing collected metrics.

Keeps scrape concerns (``content_type``, the serialized payload) out of the
statsd-style ``MetricsClient`` so the middleware never needs to know which
backend ends up storing its counters and timings.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Protocol for turning a metrics backend's state into a scrape response."""

    @property
    def content_type(self) -> str:
        """MIME type of the payload returned by ``generate()``."""
        ...

    def generate(self) -> bytes:
        """Return every collected metric in the backend's exposition format."""
        ...
