from __future__ import annotations

import pytest

from gadispatch.core.types import EventKind, EventType
from gadispatch.features.classifier.service import (
    ACTION_BY_EVENT_TYPE,
    UNKNOWN,
    UNKNOWN_ACTION,
    classify,
)


@pytest.mark.parametrize(
    ("event_type", "action", "category"),
    [
        (EventType.NOTIFICATION_RECEIVE, "batch_notification_receive", "push"),
        (EventType.NOTIFICATION_OPEN, "batch_notification_open", "push"),
        (EventType.NOTIFICATION_DISMISS, "batch_notification_dismiss", "push"),
        (EventType.IN_APP_SHOW, "batch_in_app_show", "in-app"),
        (EventType.IN_APP_DISMISS, "batch_in_app_dismiss", "in-app"),
        (EventType.IN_APP_CLOSE, "batch_in_app_close", "in-app"),
        (EventType.IN_APP_AUTO_CLOSE, "batch_in_app_auto_close", "in-app"),
        (EventType.IN_APP_GLOBAL_TAP, "batch_in_app_global_tap", "in-app"),
        (EventType.IN_APP_CLICK, "batch_in_app_click", "in-app"),
    ],
)
def test_classify_table(event_type: EventType, action: str, category: str) -> None:
    c = classify(event_type)

    assert c.action == action
    assert c.category == category
    assert c.kind is event_type.kind
    assert not c.is_unknown


def test_every_event_type_has_an_action() -> None:
    assert set(ACTION_BY_EVENT_TYPE) == set(EventType)
    assert len(set(ACTION_BY_EVENT_TYPE.values())) == len(EventType)


def test_groups_are_disjoint() -> None:
    notif = {t for t in EventType if t.is_notification_event()}
    in_app = {t for t in EventType if t.is_in_app_event()}

    assert len(notif) == 3
    assert len(in_app) == 6
    assert not notif & in_app
    assert all(t.kind is EventKind.NOTIFICATION for t in notif)


def test_unknown_type_maps_to_sentinel() -> None:
    c = classify("not_an_event")

    assert c is UNKNOWN
    assert c.action == UNKNOWN_ACTION
    assert c.category is None
    assert c.is_unknown
