# src/patternlab/observers/logger.py
from __future__ import annotations
import logging
from .events import BaseEvent

_CONTEXT_KEYS = ("ts", "run_id", "source")


class LoggerObserver:
    """Writes each event as one INFO line on the given logger."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def notify(self, event: BaseEvent) -> None:
        d = event.dict()
        fields = ", ".join(f"{k}={v}" for k, v in d.items() if k not in _CONTEXT_KEYS)
        self.logger.info(
            "[EVENT] %s source=%s run=%s: %s",
            event.__class__.__name__, d["source"], d["run_id"], fields,
        )
