"""
Passive tracing hook for HTTP execution.

Tracing never influences execution:
- Never mutates state
- Never affects the returned result
- Failures are silent and non-fatal
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Tracer(ABC):
    """
    Abstract tracing interface.

    Implementations MUST NOT raise or block; the executor calls them inline.
    """

    @abstractmethod
    def record_event(self, event_name: str, metadata: Dict[str, Any]) -> None:
        """
        Record a point-in-time event.

        Args:
            event_name: e.g. "http_request_sent", "http_request_failed"
            metadata: Structural metadata (method, uri, status_code, ...)
        """
        pass


class NoOpTracer(Tracer):
    """Default tracer. Does nothing."""

    def record_event(self, event_name: str, metadata: Dict[str, Any]) -> None:
        pass


def emit_event(tracer: Optional[Tracer], event_name: str, metadata: Dict[str, Any]) -> None:
    """Safely emit a trace event. Never raises."""
    if tracer is None:
        return
    try:
        tracer.record_event(event_name, metadata)
    except Exception as e:
        logger.debug(f"Tracer failed on {event_name}: {e}")
