# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/patternlab/observers/notifier.py
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Tuple, TypeVar

from .errors import InvalidSubscriberError, PublishError, SubscriberFailure
from .interface import Subscriber

log = logging.getLogger("patternlab")

P = TypeVar("P")


class ErrorPolicy(str, Enum):
    CONTINUE = "continue"   # log, record, keep delivering
    RAISE = "raise"         # stop at the first failure and re-raise it
    COLLECT = "collect"     # deliver to everyone, then raise PublishError


@dataclass
class PublishResult:
    delivered: int = 0
    failures: List[SubscriberFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def _matches(entry: Any, subscriber: Any) -> bool:
    # bound methods are rebuilt on each attribute access, so fall back to ==
    return entry is subscriber or (hasattr(entry, "__self__") and entry == subscriber)


class Notifier(Generic[P]):
    """
    Ordered, synchronous publish/subscribe.

    - subscribers are plain callables taking one payload
    - duplicates are allowed and are called once per registration
    - publish() walks a snapshot taken when it starts: subscribers added
      mid-publish wait for the next publish, removed ones still get the
      in-flight payload
    - the lock only guards the list, delivery runs outside it so
      subscribers may subscribe/unsubscribe/publish re-entrantly
    """

    def __init__(self, policy: ErrorPolicy | str = ErrorPolicy.CONTINUE):
        self.policy = ErrorPolicy(policy)
        self._subscribers: List[Subscriber] = []
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def subscribe(self, subscriber: Subscriber) -> Subscriber:
        """Append a subscriber. Returns it, so this also works as a decorator."""
        if not callable(subscriber):
            raise InvalidSubscriberError(
                f"subscriber must be callable, got {type(subscriber).__name__}"
            )
        with self._lock:
            self._subscribers.append(subscriber)
        return subscriber

    def unsubscribe(self, subscriber: Subscriber) -> int:
        """Remove every registration of *subscriber*. Returns how many were removed."""
        with self._lock:
            kept = [s for s in self._subscribers if not _matches(s, subscriber)]
            removed = len(self._subscribers) - len(kept)
            self._subscribers = kept
        return removed

    def clear(self) -> None:
        with self._lock:
            self._subscribers = []

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        with self._lock:
            return tuple(self._subscribers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def __contains__(self, subscriber: object) -> bool:
        with self._lock:
            return any(_matches(s, subscriber) for s in self._subscribers)

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------
    def publish(self, payload: P) -> PublishResult:
        snapshot = self.subscribers
        result = PublishResult()

        for index, subscriber in enumerate(snapshot):
            try:
                subscriber(payload)
            except Exception as exc:
                if self.policy is ErrorPolicy.RAISE:
                    raise
                failure = SubscriberFailure(index=index, subscriber=subscriber, error=exc)
                result.failures.append(failure)
                log.error("subscriber failed during publish: %s", failure.describe(), exc_info=exc)
                continue
            result.delivered += 1

        if result.failures and self.policy is ErrorPolicy.COLLECT:
            raise PublishError(result.failures)
        return result
