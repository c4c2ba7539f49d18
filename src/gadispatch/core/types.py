from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class EventKind(str, Enum):
    NOTIFICATION = "notification"
    IN_APP = "in_app"


class EventType(str, Enum):
    """
    Lifecycle events emitted by the engagement SDK.

    Values are stable snake_case identifiers so events can be read from JSON.
    """

    NOTIFICATION_RECEIVE = "notification_receive"
    NOTIFICATION_OPEN = "notification_open"
    NOTIFICATION_DISMISS = "notification_dismiss"

    IN_APP_SHOW = "in_app_show"
    IN_APP_DISMISS = "in_app_dismiss"
    IN_APP_CLOSE = "in_app_close"
    IN_APP_AUTO_CLOSE = "in_app_auto_close"
    IN_APP_GLOBAL_TAP = "in_app_global_tap"
    IN_APP_CLICK = "in_app_click"

    @property
    def kind(self) -> EventKind:
        if self.value.startswith("notification_"):
            return EventKind.NOTIFICATION
        return EventKind.IN_APP

    def is_notification_event(self) -> bool:
        return self.kind is EventKind.NOTIFICATION

    def is_in_app_event(self) -> bool:
        return self.kind is EventKind.IN_APP


class EventPayload(Protocol):
    """
    Read-only view over one event occurrence, as handed over by the host SDK.
    """

    @property
    def tracking_id(self) -> str | None: ...

    @property
    def deeplink(self) -> str | None: ...

    def custom_value(self, key: str) -> str | None: ...


@dataclass(frozen=True, slots=True)
class EventPayloadData:
    tracking_id: str | None = None

    # Raw deep link, may carry surrounding whitespace
    deeplink: str | None = None

    custom: Mapping[str, str] = field(default_factory=dict)

    def custom_value(self, key: str) -> str | None:
        return self.custom.get(key)
