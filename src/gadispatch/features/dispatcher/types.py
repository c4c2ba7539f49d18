from __future__ import annotations

from typing import Protocol

from gadispatch.features.hits.schema import HitParameters


class Tracker(Protocol):
    """
    Destination bound to one tracking id. Delivery (network, retries) is
    entirely the tracker's concern; the return value is never consulted.
    """

    def send(self, params: HitParameters) -> None: ...


class AnalyticsClient(Protocol):
    """
    Minimal surface the dispatcher needs from the analytics SDK.
    """

    def new_tracker(self, tracking_id: str) -> Tracker: ...
