from __future__ import annotations

import logging

from gadispatch.core.logging import get_logger
from gadispatch.core.types import EventKind, EventPayload, EventType
from gadispatch.features.attribution.service import resolve
from gadispatch.features.attribution.types import AttributionFields
from gadispatch.features.classifier.service import classify
from gadispatch.features.deeplink.service import parse_deeplink
from gadispatch.features.deeplink.types import MalformedDeeplinkError, ParsedDeeplink
from gadispatch.features.hits.schema import TRACKING_ID, HitParameters
from gadispatch.features.hits.service import assemble

from .types import AnalyticsClient, Tracker


class Dispatcher:
    """
    Turns SDK lifecycle events into analytics hits.

    Unconfigured until set_tracking_id() binds a tracker; the first binding
    wins and events received before it are dropped. After configuration the
    only shared state is the tracker, so concurrent dispatch_event() calls
    are safe.
    """

    def __init__(
        self,
        *,
        analytics: AnalyticsClient,
        logger: logging.Logger | None = None,
    ) -> None:
        self._analytics = analytics
        self._tracker: Tracker | None = None
        self._logger = logger or get_logger(__name__)

    @property
    def is_configured(self) -> bool:
        return self._tracker is not None

    def set_tracking_id(self, tracking_id: str) -> None:
        if self._tracker is not None:
            return
        self._tracker = self._analytics.new_tracker(tracking_id)
        self._logger.info("tracker_bound", extra={"tracking_id": tracking_id})

    def dispatch_event(self, event_type: EventType, payload: EventPayload) -> HitParameters | None:
        """
        Build the hit for one event and hand it to the tracker.

        Returns the hit that was sent, or None when the event was dropped
        because no tracker is bound yet.
        """
        tracker = self._tracker
        if tracker is None:
            self._logger.debug(
                "event_dropped",
                extra={"event_type": _event_name(event_type), "reason": "unconfigured"},
            )
            return None

        classification = classify(event_type)
        extra: dict[str, str | None] = {}

        if classification.kind is None:
            self._logger.warning(
                "unknown_event_type", extra={"event_type": _event_name(event_type)}
            )
            fields = AttributionFields()
        else:
            deeplink = self._parse_deeplink(event_type, payload.deeplink)
            fields = resolve(
                classification.kind, deeplink, payload.custom_value, payload.tracking_id
            )
            if classification.kind is EventKind.IN_APP:
                extra[TRACKING_ID] = payload.tracking_id

        hit = assemble(classification.action, classification.category, fields, extra)
        tracker.send(hit)

        self._logger.debug(
            "hit_sent",
            extra={"event_type": _event_name(event_type), "action": classification.action},
        )
        return hit

    def _parse_deeplink(self, event_type: EventType, raw: str | None) -> ParsedDeeplink | None:
        try:
            return parse_deeplink(raw)
        except MalformedDeeplinkError as exc:
            # fall back to custom payload and defaults
            self._logger.warning(
                "deeplink_malformed",
                extra={"event_type": _event_name(event_type), "reason": str(exc)},
            )
            return None


def _event_name(event_type: object) -> str:
    # enum value, stable across Python versions; str() differs for mixin enums
    return str(getattr(event_type, "value", event_type))
