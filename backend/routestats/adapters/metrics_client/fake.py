"""Fake MetricsClient for testing.

Records all calls in memory so tests can assert on emitted metric names
without reaching into prometheus-client internals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MetricCall:
    """Single observed client call."""

    kind: str
    name: str
    start_time: float | None = None


class FakeMetricsClient:
    """In-memory spy implementing the MetricsClient protocol.

    Usage:
        fake = FakeMetricsClient()
        child = fake.get_child_client("api")
        # … inject into middleware …
        assert child.increments == ["response_code.200"]
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix
        self.calls: list[MetricCall] = []
        self.children: dict[str, FakeMetricsClient] = {}

    def increment(self, name: str) -> None:
        self.calls.append(MetricCall("increment", name))

    def timing(self, name: str, start_time: float) -> None:
        self.calls.append(MetricCall("timing", name, start_time))

    def get_child_client(self, prefix: str) -> FakeMetricsClient:
        if prefix not in self.children:
            self.children[prefix] = FakeMetricsClient(prefix)
        return self.children[prefix]

    # -- test helpers --

    @property
    def increments(self) -> list[str]:
        return [c.name for c in self.calls if c.kind == "increment"]

    @property
    def timings(self) -> list[str]:
        return [c.name for c in self.calls if c.kind == "timing"]

    def clear(self) -> None:
        """Reset recorded calls on this client and every child."""
        self.calls.clear()
        for child in self.children.values():
            child.clear()
