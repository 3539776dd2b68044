from .bus import Event, EventBus, Subscription
from .scene_events import (
    BuildListLoadedEvent,
    BuildListWrittenEvent,
    MembershipChangedEvent,
    OrderCommittedEvent,
)

__all__ = [
    "BuildListLoadedEvent",
    "BuildListWrittenEvent",
    "Event",
    "EventBus",
    "MembershipChangedEvent",
    "OrderCommittedEvent",
    "Subscription",
]
