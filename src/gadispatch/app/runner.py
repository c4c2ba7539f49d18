from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from gadispatch.app.bootstrap import build_dispatcher
from gadispatch.core.config import load_config
from gadispatch.core.logging import get_logger
from gadispatch.core.types import EventPayloadData, EventType
from gadispatch.features.transport.service import JsonLinesAnalytics


@dataclass(frozen=True)
class ReplayResult:
    dispatched: int
    dropped: int


def parse_event_line(line: str) -> tuple[EventType, EventPayloadData]:
    data: Any = json.loads(line)
    if not isinstance(data, dict):
        raise ValueError("Each event line must be a JSON object.")

    raw_type = data.get("type")
    try:
        event_type = EventType(raw_type)
    except ValueError:
        raise ValueError(
            f"Unsupported event type={raw_type!r}. Allowed={sorted(t.value for t in EventType)}"
        ) from None

    custom = data.get("custom") or {}
    if not isinstance(custom, dict):
        raise ValueError("'custom' must be a JSON object of strings.")

    for key in ("tracking_id", "deeplink"):
        if data.get(key) is not None and not isinstance(data[key], str):
            raise ValueError(f"'{key}' must be a string or null.")

    payload = EventPayloadData(
        tracking_id=data.get("tracking_id"),
        deeplink=data.get("deeplink"),
        # null custom values are absent, not the string "None"
        custom={str(k): str(v) for k, v in custom.items() if v is not None},
    )
    return event_type, payload


def replay(config_path: str, lines: Iterable[str], out: TextIO) -> ReplayResult:
    cfg = load_config(config_path)
    # stdout carries the hits, keep logs off it
    logger = get_logger("gadispatch.replay", cfg.logging.level, stream=sys.stderr)
    dispatcher = build_dispatcher(cfg, JsonLinesAnalytics(stream=out), logger=logger)

    dispatched = 0
    dropped = 0
    for line in lines:
        if not line.strip():
            continue
        event_type, payload = parse_event_line(line)
        if dispatcher.dispatch_event(event_type, payload) is None:
            dropped += 1
        else:
            dispatched += 1

    return ReplayResult(dispatched=dispatched, dropped=dropped)


def replay_file(config_path: str, events_path: str | Path, out: TextIO) -> ReplayResult:
    with open(events_path, encoding="utf-8") as f:
        return replay(config_path, f, out)
