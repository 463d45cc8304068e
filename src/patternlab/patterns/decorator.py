# src/patternlab/patterns/decorator.py
from __future__ import annotations

from typing import Protocol

from ..config.models import CoffeeMenu

COFFEE_KINDS = ("plain", "milk")


class UnknownCoffeeError(ValueError):
    pass


class Beverage(Protocol):
    def cost(self) -> int: ...


class Coffee:
    def __init__(self, menu: CoffeeMenu | None = None):
        self._menu = menu or CoffeeMenu()

    def cost(self) -> int:
        return self._menu.base_cost


class MilkDecorator:
    """Adds milk on top of any beverage. Stacks."""

    def __init__(self, beverage: Beverage, menu: CoffeeMenu | None = None):
        self._beverage = beverage
        self._menu = menu or CoffeeMenu()

    def cost(self) -> int:
        return self._beverage.cost() + self._menu.milk_cost


def order_coffee(kind: str, menu: CoffeeMenu | None = None) -> Beverage:
    menu = menu or CoffeeMenu()
    kind = (kind or "").strip().lower()
    if kind not in COFFEE_KINDS:
        raise UnknownCoffeeError(
            f"Unknown coffee '{kind}'. Valid kinds: {', '.join(COFFEE_KINDS)}"
        )

    coffee: Beverage = Coffee(menu)
    if kind == "milk":
        coffee = MilkDecorator(coffee, menu)
    return coffee


def describe_cost(coffee: Beverage, menu: CoffeeMenu | None = None) -> str:
    menu = menu or CoffeeMenu()
    return f"Coffee cost is: {menu.currency}{coffee.cost()}"
