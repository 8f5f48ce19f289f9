"""Core protocols for dependency injection.

Cross-cutting infrastructure protocols only; concrete implementations live
under ``routestats.adapters``.
"""

from routestats.core.protocols.metrics_client import MetricsClient
from routestats.core.protocols.metrics_renderer import MetricsRenderer

__all__ = [
    "MetricsClient",
    "MetricsRenderer",
]
