# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
from typing import Any, Protocol
from .events import BaseEvent


class Subscriber(Protocol):
    def __call__(self, payload: Any) -> None: ...


class Observer(Protocol):
    def notify(self, event: BaseEvent) -> None: ...
