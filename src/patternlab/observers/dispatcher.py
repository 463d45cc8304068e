# src/patternlab/observers/dispatcher.py
from __future__ import annotations
from typing import List, Optional
from .events import BaseEvent
from .interface import Observer
from .notifier import ErrorPolicy, Notifier, PublishResult


class EventBus:
    """Fans demo events out to Observer objects through a Notifier."""

    def __init__(self, observers: Optional[List[Observer]] = None):
        # observers must not break demos
        self._notifier: Notifier[BaseEvent] = Notifier(ErrorPolicy.CONTINUE)
        for ob in observers or []:
            self.attach(ob)

    def attach(self, observer: Observer) -> None:
        self._notifier.subscribe(observer.notify)

    def detach(self, observer: Observer) -> None:
        self._notifier.unsubscribe(observer.notify)

    def __len__(self) -> int:
        return len(self._notifier)

    def emit(self, event: BaseEvent) -> PublishResult:
        return self._notifier.publish(event)
