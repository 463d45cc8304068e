# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/patternlab/observers/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List


class NotifierError(RuntimeError):
    """Base class for Notifier failures."""


class InvalidSubscriberError(NotifierError, TypeError):
    """Raised when something that cannot be called is subscribed."""


@dataclass(frozen=True)
class SubscriberFailure:
    index: int              # position in the publish snapshot
    subscriber: Any
    error: BaseException

    def describe(self) -> str:
        name = getattr(self.subscriber, "__qualname__", None) or repr(self.subscriber)
        return f"#{self.index} {name}: {type(self.error).__name__}: {self.error}"


class PublishError(NotifierError):
    """Raised by the COLLECT policy once every subscriber has been attempted."""

    def __init__(self, failures: List[SubscriberFailure]):
        self.failures = list(failures)
        lines = "; ".join(f.describe() for f in self.failures)
        super().__init__(f"{len(self.failures)} subscriber(s) failed: {lines}")
