# src/patternlab/patterns/display.py
from __future__ import annotations

from typing import Dict, List


class Display:
    """In-memory stand-in for the page: named text slots plus a shape canvas."""

    def __init__(self) -> None:
        self._slots: Dict[str, str] = {}
        self.canvas: List[str] = []

    def set_text(self, slot: str, text: str) -> None:
        self._slots[slot] = text

    def text(self, slot: str) -> str:
        return self._slots.get(slot, "")

    def append_shape(self, css_class: str) -> None:
        self.canvas.append(css_class)

    def slots(self) -> Dict[str, str]:
        return dict(self._slots)
