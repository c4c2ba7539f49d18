from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class DispatcherConfig:
    # None leaves the dispatcher unconfigured (events are dropped)
    tracking_id: str | None = None


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    dispatcher: DispatcherConfig
    logging: LoggingConfig
    raw: dict[str, Any]  # original parsed YAML (for debugging)


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    data = yaml.safe_load(p.read_text())
    if not isinstance(data, dict):
        raise ValueError("Config YAML must parse to a dict at the top level.")
    return data


def parse_config(data: dict[str, Any]) -> AppConfig:
    if "dispatcher" not in data:
        raise ValueError("Missing required top-level config section: 'dispatcher'")

    dispatcher = data.get("dispatcher") or {}
    logging_cfg = data.get("logging") or {}

    if not isinstance(dispatcher, dict):
        raise ValueError("Config section 'dispatcher' must be a mapping.")

    tracking_id = dispatcher.get("tracking_id")
    if tracking_id is not None:
        tracking_id = str(tracking_id).strip() or None

    dispatcher_cfg = DispatcherConfig(tracking_id=tracking_id)
    log_cfg = LoggingConfig(level=str(logging_cfg.get("level", "INFO")).upper())

    return AppConfig(dispatcher=dispatcher_cfg, logging=log_cfg, raw=data)


def load_config(path: str | Path) -> AppConfig:
    data = load_yaml(path)
    return parse_config(data)
