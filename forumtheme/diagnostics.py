"""Diagnostic event sinks for theme resolution."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)


class EventSeverity(Enum):
    ERROR = 0
    WARNING = 1
    INFORMATION = 2


class EventSink(Protocol):
    def record_event(
        self,
        actor_id: int | str | None,
        source: str,
        message: str,
        severity: EventSeverity,
    ) -> None: ...


_LEVELS = {
    EventSeverity.ERROR: logging.ERROR,
    EventSeverity.WARNING: logging.WARNING,
    EventSeverity.INFORMATION: logging.INFO,
}


class LoggingEventSink:
    """Writes diagnostic events to a logger."""

    def __init__(self, event_logger: logging.Logger | None = None) -> None:
        self._logger = event_logger or logging.getLogger("forumtheme.events")

    def record_event(
        self,
        actor_id: int | str | None,
        source: str,
        message: str,
        severity: EventSeverity,
    ) -> None:
        self._logger.log(_LEVELS[severity], "[%s] %s (actor=%s)", source, message, actor_id)


def record_event_safely(
    sink: EventSink,
    actor_id: int | str | None,
    source: str,
    message: str,
    severity: EventSeverity,
) -> bool:
    """Forward an event to ``sink``; a failing sink is logged, never raised."""
    try:
        sink.record_event(actor_id, source, message, severity)
    except Exception:  # sink failures must not break rendering
        logger.exception("event sink %r failed to record %r", type(sink).__name__, message)
        return False
    return True
