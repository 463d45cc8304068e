# src/patternlab/patterns/observer.py
from __future__ import annotations

from typing import Any, List, Tuple

from ..observers.notifier import ErrorPolicy, Notifier, PublishResult
from .display import Display

OUTPUT_SLOT = "observerOutput"


class DisplayObserver:
    """Subscriber that renders whatever it is given into the observer slot."""

    def __init__(self, name: str, display: Display):
        self.name = name
        self.display = display
        self.received: List[Any] = []

    def __call__(self, data: Any) -> None:
        self.received.append(data)
        self.display.set_text(OUTPUT_SLOT, f"Observer updated with data: {data}")

    def __repr__(self) -> str:
        return f"DisplayObserver({self.name!r})"


def run_observer_demo(
    data: Any,
    display: Display,
    *,
    count: int = 2,
    policy: ErrorPolicy | str = ErrorPolicy.CONTINUE,
) -> Tuple[List[DisplayObserver], PublishResult]:
    notifier: Notifier[Any] = Notifier(policy)
    observers = [DisplayObserver(f"observer{i}", display) for i in range(1, count + 1)]
    for ob in observers:
        notifier.subscribe(ob)
    return observers, notifier.publish(data)
