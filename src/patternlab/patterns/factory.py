# src/patternlab/patterns/factory.py
from __future__ import annotations

from typing import Callable, Dict, Protocol

from .display import Display


class UnknownShapeError(ValueError):
    pass


class Shape(Protocol):
    kind: str
    css_class: str

    def draw(self, display: Display) -> None: ...


class Circle:
    kind = "circle"
    css_class = "circle"

    def draw(self, display: Display) -> None:
        display.append_shape(self.css_class)


class Square:
    kind = "square"
    css_class = "square"

    def draw(self, display: Display) -> None:
        display.append_shape(self.css_class)


SHAPES: Dict[str, Callable[[], Shape]] = {
    "circle": Circle,
    "square": Square,
}


def create_shape(kind: str) -> Shape:
    key = (kind or "").strip().lower()
    try:
        return SHAPES[key]()
    except KeyError:
        raise UnknownShapeError(
            f"Unknown shape '{kind}'. Valid shapes: {', '.join(sorted(SHAPES))}"
        ) from None


def draw_shape(kind: str, display: Display) -> Shape:
    shape = create_shape(kind)
    shape.draw(display)
    return shape
