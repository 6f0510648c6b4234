"""Publisher and subscription event handles."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional


class EventType(enum.IntEnum):
    """Kinds of events raised by publishers and subscriptions."""

    # subscription events
    LIVELINESS_CHANGED = 0
    REQUESTED_DEADLINE_MISSED = 1
    REQUESTED_QOS_INCOMPATIBLE = 2
    MESSAGE_LOST = 3
    # publisher events
    LIVELINESS_LOST = 4
    OFFERED_DEADLINE_MISSED = 5
    OFFERED_QOS_INCOMPATIBLE = 6
    # sentinel
    INVALID = 7


@dataclass
class Event:
    """An event handle: implementation identifier, event data and event type."""

    implementation_identifier: Optional[str] = None
    data: Any = None
    event_type: EventType = EventType.INVALID

    def fini(self) -> None:
        """Reset the handle to its zero-initialized state."""
        self.implementation_identifier = None
        self.data = None
        self.event_type = EventType.INVALID


def zero_initialized_event() -> Event:
    """Return an event with no identifier, no data and an invalid type."""
    return Event()