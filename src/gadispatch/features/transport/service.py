from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TextIO

from gadispatch.features.hits.schema import HitParameters


@dataclass(slots=True)
class JsonLinesTracker:
    """
    Writes each hit as one JSON object per line.
    """

    tracking_id: str
    stream: TextIO

    def send(self, params: HitParameters) -> None:
        record = {"tracking_id": self.tracking_id, "params": dict(params)}
        # Stable JSON for deterministic outputs/diffs
        self.stream.write(json.dumps(record, sort_keys=True, separators=(",", ":")) + "\n")
        self.stream.flush()


@dataclass(slots=True)
class JsonLinesAnalytics:
    stream: TextIO

    def new_tracker(self, tracking_id: str) -> JsonLinesTracker:
        return JsonLinesTracker(tracking_id=tracking_id, stream=self.stream)
