from __future__ import annotations

import logging
from typing import Protocol

from gadispatch.core.config import AppConfig
from gadispatch.core.logging import get_logger
from gadispatch.features.dispatcher.service import Dispatcher
from gadispatch.features.dispatcher.types import AnalyticsClient


class DispatcherHost(Protocol):
    """
    The host SDK side of registration: whatever routes lifecycle events
    to dispatchers.
    """

    def add_dispatcher(self, dispatcher: Dispatcher) -> None: ...


def build_dispatcher(
    cfg: AppConfig,
    analytics: AnalyticsClient,
    logger: logging.Logger | None = None,
) -> Dispatcher:
    logger = logger or get_logger("gadispatch", cfg.logging.level)
    dispatcher = Dispatcher(analytics=analytics, logger=logger)

    if cfg.dispatcher.tracking_id is not None:
        dispatcher.set_tracking_id(cfg.dispatcher.tracking_id)

    return dispatcher


def register_dispatcher(host: DispatcherHost, dispatcher: Dispatcher) -> Dispatcher:
    """
    Explicit registration, called once from the host's composition root at
    startup. The dispatcher never registers itself.
    """
    host.add_dispatcher(dispatcher)
    return dispatcher
