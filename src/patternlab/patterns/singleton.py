# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/patternlab/patterns/singleton.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..config.models import LabConfig
from ..observers.dispatcher import EventBus


class ContextNotInitializedError(RuntimeError):
    pass


class Singleton:
    """Every construction returns the same instance."""

    _instance: Optional[Singleton] = None

    def __new__(cls) -> Singleton:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


def check_singleton() -> bool:
    return Singleton() is Singleton()


def describe_check(same: bool) -> str:
    return f"Are both instances equal? {str(same).lower()}"


@dataclass
class AppContext:
    """
    Process-wide state for one CLI run.

    Initialized once with init(), read with get(). Code below the CLI gets
    the instance passed in rather than calling get() itself.
    """

    config: LabConfig
    logger: logging.Logger
    run_id: str
    bus: EventBus = field(default_factory=EventBus)

    _current = None  # class-level, not a dataclass field (no annotation)

    @classmethod
    def init(cls, **kwargs) -> AppContext:
        """Create (or replace) the process-wide context."""
        cls._current = cls(**kwargs)
        return cls._current

    @classmethod
    def get(cls) -> AppContext:
        if cls._current is None:
            raise ContextNotInitializedError(
                "AppContext is not initialized. Call AppContext.init(...) first."
            )
        return cls._current

    @classmethod
    def reset(cls) -> None:
        cls._current = None
