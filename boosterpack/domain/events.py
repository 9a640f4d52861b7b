"""Domain event dispatch."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Mapping

EventPayload = Mapping[str, Any]
EventListener = Callable[[EventPayload], None]

logger = logging.getLogger(__name__)


class EventBus:
    """Synchronous pub-sub; listeners run inside the host's update step.

    Events describe changes that already happened, so a failing listener is
    logged and the remaining listeners still run.
    """

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, list[EventListener]] = defaultdict(list)

    def subscribe(self, event_name: str, listener: EventListener) -> None:
        self._listeners[event_name].append(listener)

    def publish(self, event_name: str, payload: EventPayload) -> None:
        for listener in list(self._listeners.get(event_name, ())):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener %r failed for event %s.", listener, event_name)
