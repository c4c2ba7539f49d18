from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gadispatch.core.types import EventKind, EventType

UNKNOWN_ACTION = "batch_unknown"

CATEGORY_BY_KIND: dict[EventKind, str] = {
    EventKind.NOTIFICATION: "push",
    EventKind.IN_APP: "in-app",
}

ACTION_BY_EVENT_TYPE: dict[EventType, str] = {
    EventType.NOTIFICATION_RECEIVE: "batch_notification_receive",
    EventType.NOTIFICATION_OPEN: "batch_notification_open",
    EventType.NOTIFICATION_DISMISS: "batch_notification_dismiss",
    EventType.IN_APP_SHOW: "batch_in_app_show",
    EventType.IN_APP_DISMISS: "batch_in_app_dismiss",
    EventType.IN_APP_CLOSE: "batch_in_app_close",
    EventType.IN_APP_AUTO_CLOSE: "batch_in_app_auto_close",
    EventType.IN_APP_GLOBAL_TAP: "batch_in_app_global_tap",
    EventType.IN_APP_CLICK: "batch_in_app_click",
}


@dataclass(frozen=True, slots=True)
class Classification:
    action: str

    # None only for unknown event types
    category: str | None
    kind: EventKind | None

    @property
    def is_unknown(self) -> bool:
        return self.kind is None


UNKNOWN = Classification(action=UNKNOWN_ACTION, category=None, kind=None)


def classify(event_type: Any) -> Classification:
    """
    Map an event type to its hit action name, category and kind.

    Never raises: anything outside the table classifies as UNKNOWN.
    """
    if not isinstance(event_type, EventType):
        return UNKNOWN

    action = ACTION_BY_EVENT_TYPE.get(event_type)
    if action is None:
        return UNKNOWN

    kind = event_type.kind
    return Classification(action=action, category=CATEGORY_BY_KIND[kind], kind=kind)
