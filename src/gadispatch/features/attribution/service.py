from __future__ import annotations

from collections.abc import Callable

from gadispatch.core.types import EventKind
from gadispatch.features.deeplink.types import ParsedDeeplink

from .types import (
    DEFAULT_SOURCE,
    IN_APP_MEDIUM,
    NOTIFICATION_MEDIUM,
    UTM_CAMPAIGN,
    UTM_CONTENT,
    UTM_MEDIUM,
    UTM_SOURCE,
    AttributionFields,
    CustomLookup,
)

# Sources are applied lowest priority first: defaults, fragment, query, custom payload.
# AttributionFields.update ignores None, so each dimension ends up with the
# highest-priority value that is actually present.


def resolve_notification(
    deeplink: ParsedDeeplink | None,
    custom: CustomLookup | None,
    tracking_id: str | None = None,
) -> AttributionFields:
    fields = AttributionFields(source=DEFAULT_SOURCE, medium=NOTIFICATION_MEDIUM)

    if deeplink is not None:
        fields.update(
            source=deeplink.fragment_value(UTM_SOURCE),
            medium=deeplink.fragment_value(UTM_MEDIUM),
            name=deeplink.fragment_value(UTM_CAMPAIGN),
            content=deeplink.fragment_value(UTM_CONTENT),
        )
        fields.update(
            source=deeplink.query_value(UTM_SOURCE),
            medium=deeplink.query_value(UTM_MEDIUM),
            name=deeplink.query_value(UTM_CAMPAIGN),
            content=deeplink.query_value(UTM_CONTENT),
        )

    _apply_custom(fields, custom)
    return fields


def resolve_in_app(
    deeplink: ParsedDeeplink | None,
    custom: CustomLookup | None,
    tracking_id: str | None = None,
) -> AttributionFields:
    # Only content is read from the deep link for in-app messages
    fields = AttributionFields(source=DEFAULT_SOURCE, medium=IN_APP_MEDIUM, name=tracking_id)

    if deeplink is not None:
        fields.update(content=deeplink.fragment_value(UTM_CONTENT))
        fields.update(content=deeplink.query_value(UTM_CONTENT))

    _apply_custom(fields, custom)
    return fields


_RESOLVERS: dict[
    EventKind,
    Callable[[ParsedDeeplink | None, CustomLookup | None, str | None], AttributionFields],
] = {
    EventKind.NOTIFICATION: resolve_notification,
    EventKind.IN_APP: resolve_in_app,
}


def resolve(
    kind: EventKind,
    deeplink: ParsedDeeplink | None,
    custom: CustomLookup | None,
    tracking_id: str | None,
) -> AttributionFields:
    return _RESOLVERS[kind](deeplink, custom, tracking_id)


def _apply_custom(fields: AttributionFields, custom: CustomLookup | None) -> None:
    # utm_content is never taken from the custom payload
    if custom is None:
        return
    fields.update(
        source=custom(UTM_SOURCE),
        medium=custom(UTM_MEDIUM),
        name=custom(UTM_CAMPAIGN),
    )
