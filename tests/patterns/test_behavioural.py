import pytest

from patternlab.config.models import CoffeeMenu
from patternlab.observers.errors import PublishError
from patternlab.patterns.decorator import (
    Coffee,
    MilkDecorator,
    UnknownCoffeeError,
    describe_cost,
    order_coffee,
)
from patternlab.patterns.display import Display
from patternlab.patterns.mediator import (
    Mediator,
    Participant,
    UnknownParticipantError,
    send_mediated_message,
)
from patternlab.patterns.observer import DisplayObserver, run_observer_demo


# --------- Decorator ----------

def test_plain_and_milk_costs():
    assert order_coffee("plain").cost() == 5
    assert order_coffee("milk").cost() == 7
    assert describe_cost(order_coffee("milk")) == "Coffee cost is: $7"


def test_decorators_stack_and_follow_menu():
    menu = CoffeeMenu(base_cost=3, milk_cost=1, currency="€")
    double = MilkDecorator(MilkDecorator(Coffee(menu), menu), menu)
    assert double.cost() == 5
    assert describe_cost(double, menu) == "Coffee cost is: €5"


def test_unknown_coffee():
    with pytest.raises(UnknownCoffeeError):
        order_coffee("latte")


# --------- Observer ----------

def test_observer_demo_updates_display_for_each_observer():
    d = Display()
    observers, result = run_observer_demo("test data", d)

    assert [o.name for o in observers] == ["observer1", "observer2"]
    assert all(o.received == ["test data"] for o in observers)
    assert result.delivered == 2
    assert d.text("observerOutput") == "Observer updated with data: test data"


def test_observer_demo_with_zero_observers():
    d = Display()
    observers, result = run_observer_demo("x", d, count=0)
    assert observers == []
    assert result.delivered == 0
    assert d.text("observerOutput") == ""


def test_display_observer_is_a_plain_callable():
    d = Display()
    ob = DisplayObserver("solo", d)
    ob(42)
    assert ob.received == [42]
    assert d.text("observerOutput") == "Observer updated with data: 42"


def test_collect_policy_surfaces_failures(monkeypatch):
    def boom(self, data):
        raise RuntimeError("render failed")

    monkeypatch.setattr(DisplayObserver, "__call__", boom)
    with pytest.raises(PublishError):
        run_observer_demo("x", Display(), policy="collect")


# --------- Mediator ----------

def test_send_mediated_message_reaches_user2():
    d = Display()
    recipients = send_mediated_message("Hello from User1!", d)
    assert recipients == ["User2"]
    assert d.text("mediatorOutput") == "User2 received: Hello from User1!"


def test_mediator_routes_to_everyone_but_sender():
    m = Mediator()
    a = Participant("a", m)
    b = Participant("b", m)
    c = Participant("c", m)

    assert b.send("ping") == ["a", "c"]
    assert a.inbox == [("b", "ping")]
    assert c.inbox == [("b", "ping")]
    assert b.inbox == []


def test_mediator_rejects_duplicates_and_strangers():
    m = Mediator()
    Participant("a", m)
    with pytest.raises(ValueError):
        Participant("a", m)

    stranger = Participant("s", Mediator())
    with pytest.raises(UnknownParticipantError):
        m.notify(stranger, "hi")
