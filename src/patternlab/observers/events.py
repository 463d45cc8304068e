# src/patternlab/observers/events.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
import uuid


# ---------------------------------------------------------------------
# Base context and helper
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class BaseEvent:
    ts: str           # ISO timestamp
    run_id: str       # correlates all events in a single CLI invocation
    source: str       # which demo emitted it (singleton/factory/...)

    def dict(self) -> Dict[str, Any]:
        return asdict(self)


def new_ctx(source: str, run_id: Optional[str] = None) -> Dict[str, Any]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "run_id": run_id or str(uuid.uuid4()),
        "source": source,
    }


# ---------------------------------------------------------------------
# Creational
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class SingletonChecked(BaseEvent):
    same_instance: bool

@dataclass(frozen=True)
class ShapeDrawn(BaseEvent):
    shape: str
    css_class: str
    canvas_size: int


# ---------------------------------------------------------------------
# Structural
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class CoffeeOrdered(BaseEvent):
    kind: str
    cost: int


# ---------------------------------------------------------------------
# Behavioural
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class ObserverUpdated(BaseEvent):
    data: str
    observers: List[str]
    failures: int = 0

@dataclass(frozen=True)
class MessageRelayed(BaseEvent):
    sender: str
    recipients: List[str]
    message: str


@dataclass(frozen=True)
class DemoFailed(BaseEvent):
    demo: str
    error: str
