import logging

import pytest

from patternlab.config.models import LabConfig
from patternlab.observers.dispatcher import EventBus
from patternlab.patterns.display import Display
from patternlab.patterns.factory import Circle, Square, UnknownShapeError, create_shape, draw_shape
from patternlab.patterns.singleton import (
    AppContext,
    ContextNotInitializedError,
    Singleton,
    check_singleton,
    describe_check,
)


def test_singleton_returns_same_instance():
    a = Singleton()
    b = Singleton()
    assert a is b
    assert check_singleton() is True
    assert describe_check(True) == "Are both instances equal? true"


def test_singleton_reset_gives_fresh_instance():
    a = Singleton()
    Singleton._reset()
    assert Singleton() is not a


def test_app_context_requires_init():
    with pytest.raises(ContextNotInitializedError):
        AppContext.get()


def test_app_context_init_and_get():
    ctx = AppContext.init(config=LabConfig(), logger=logging.getLogger("patternlab"), run_id="r1")
    assert AppContext.get() is ctx
    assert isinstance(ctx.bus, EventBus)

    AppContext.reset()
    with pytest.raises(ContextNotInitializedError):
        AppContext.get()


def test_factory_creates_by_kind_case_insensitively():
    assert isinstance(create_shape("circle"), Circle)
    assert isinstance(create_shape(" Square "), Square)


def test_draw_shape_appends_css_class_to_canvas():
    d = Display()
    draw_shape("circle", d)
    draw_shape("square", d)
    draw_shape("circle", d)
    assert d.canvas == ["circle", "square", "circle"]


def test_unknown_shape_lists_valid_kinds():
    d = Display()
    with pytest.raises(UnknownShapeError, match="circle, square"):
        draw_shape("triangle", d)
    assert d.canvas == []
