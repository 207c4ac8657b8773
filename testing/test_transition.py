import pytest
from wait_for import TimedOutError

from lazyview.element import Element
from lazyview.exceptions import MissingLoadCondition
from lazyview.locator import By
from lazyview.transition import Transition
from lazyview.transition import TransitionEvent
from lazyview.utils import Required
from lazyview.view import View


class DashboardView(View):
    title = Required(Element(By.id("title")))


def test_event_follows_readiness(context):
    view = DashboardView().bind(context)
    event = TransitionEvent(view)
    assert event.is_satisfied() is False
    context.add(By.id("title"))
    assert event.is_satisfied() is view.is_loaded is True


def test_to_binds_unbound_view(context):
    view = DashboardView()
    event = context.transition().to(view)
    assert view.context is context
    assert event.view is view


def test_to_keeps_bound_view(context, titled_context):
    view = DashboardView().bind(titled_context)
    Transition(context).to(view)
    assert view.context is titled_context


def test_wait_returns_view(context):
    context.add(By.id("title"))
    view = DashboardView()
    assert context.transition().to(view).wait(timeout=1, delay=0.01) is view


def test_wait_times_out(context):
    event = context.transition().to(DashboardView())
    with pytest.raises(TimedOutError):
        event.wait(timeout=0.1, delay=0.01)


def test_wait_stops_on_missing_condition(context):
    view = DashboardView().bind(context)
    view._load_conditions = []
    with pytest.raises(MissingLoadCondition):
        TransitionEvent(view).wait(timeout=1, delay=0.01)


def test_repr(context):
    view = DashboardView().bind(context)
    assert repr(TransitionEvent(view)) == "TransitionEvent(<DashboardView>)"
