from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

UTM_SOURCE = "utm_source"
UTM_MEDIUM = "utm_medium"
UTM_CAMPAIGN = "utm_campaign"
UTM_CONTENT = "utm_content"

DEFAULT_SOURCE = "batch"
NOTIFICATION_MEDIUM = "push"
IN_APP_MEDIUM = "in-app"

# Lookup into the event's custom payload, e.g. payload.custom_value
CustomLookup = Callable[[str], str | None]


@dataclass(slots=True)
class AttributionFields:
    """
    Campaign dimensions for one event.

    A dimension only changes when offered a non-None value, so the last
    present candidate wins and an absent one never clears an earlier value.
    """

    source: str | None = None
    medium: str | None = None
    name: str | None = None
    content: str | None = None

    def update(
        self,
        *,
        source: str | None = None,
        medium: str | None = None,
        name: str | None = None,
        content: str | None = None,
    ) -> None:
        if source is not None:
            self.source = source
        if medium is not None:
            self.medium = medium
        if name is not None:
            self.name = name
        if content is not None:
            self.content = content
