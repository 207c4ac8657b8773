import pytest
from wait_for import TimedOutError

from lazyview.element import Element
from lazyview.element import ElementList
from lazyview.exceptions import ContextCapabilityMismatch
from lazyview.exceptions import LookupTransientFailure
from lazyview.exceptions import NotBound
from lazyview.exceptions import NotFound
from lazyview.locator import By


def test_lazy_element_is_unbound():
    element = Element(By.id("foo"))
    assert element.lazy
    assert not element.is_bound
    with pytest.raises(NotBound):
        element.context
    with pytest.raises(NotBound):
        element.is_displayed


def test_eager_element_is_bound(context):
    element = Element(By.id("foo"), context=context)
    assert not element.lazy
    assert element.is_bound
    assert element.context is context


def test_creating_reference_does_not_look_up(context):
    element = Element(By.id("foo"), context=context)
    assert context.lookups == 0
    assert not element.is_displayed
    assert context.lookups == 1


def test_bind_returns_element(context):
    element = Element("#foo")
    assert element.bind(context) is element
    assert element.context is context


def test_bind_requires_element_context():
    with pytest.raises(ContextCapabilityMismatch):
        Element(By.id("foo")).bind(object())


def test_presence_and_visibility(context):
    element = Element(By.id("foo"), context=context)
    assert not element.is_present
    assert not element.is_displayed

    node = context.add(By.id("foo"), visible=False)
    assert element.is_present
    assert not element.is_displayed

    node.visible = True
    assert element.is_displayed

    context.remove_all(By.id("foo"))
    assert not element.is_present


def test_handle(context):
    element = Element(By.id("foo"), context=context)
    with pytest.raises(NotFound):
        element.handle
    node = context.add(By.id("foo"))
    assert element.handle is node


def test_index(context):
    context.add(By.css(".row"), name="first", visible=False)
    second = context.add(By.css(".row"), name="second")
    element = Element(By.css(".row"), context=context, index=1)
    assert element.handle is second
    assert element.is_displayed
    assert not Element(By.css(".row"), context=context, index=2).is_present
    assert Element(By.css(".row"), context=context, index=-1).handle is second
    assert not Element(By.css(".row"), context=context, index=-3).is_present


def test_lookup_failure_propagates_from_element(context):
    context.break_lookup(By.id("foo"))
    element = Element(By.id("foo"), context=context)
    with pytest.raises(LookupTransientFailure) as excinfo:
        element.is_displayed
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_wait_displayed(context):
    context.add(By.id("foo"))
    assert Element(By.id("foo"), context=context).wait_displayed(timeout=1, delay=0.01)


def test_wait_displayed_times_out(context):
    with pytest.raises(TimedOutError):
        Element(By.id("foo"), context=context).wait_displayed(timeout=0.1, delay=0.01)


def test_clone_is_unbound_copy(context):
    element = Element(By.id("foo"))
    element.bind(context)
    copy = element.clone()
    assert copy is not element
    assert copy.locator == element.locator
    assert not copy.is_bound
    assert copy._seq_id > element._seq_id


def test_locator_protocol_and_repr():
    element = Element(By.id("foo"), index=3)
    assert element.__locator__() == By.id("foo")
    assert repr(element) == "Element(Locator(by='id', value='foo'), index=3)"


def test_element_list_is_live(context):
    rows = ElementList(Element, By.css(".row"), context=context)
    assert len(rows) == 0
    assert not rows

    context.add(By.css(".row"), name="a")
    assert len(rows) == 1

    context.add(By.css(".row"), name="b")
    assert len(rows) == 2
    assert [row.handle.name for row in rows] == ["a", "b"]
    assert rows[-1].index == 1
    assert [row.index for row in rows[0:2]] == [0, 1]


def test_element_list_items_are_bound(context):
    context.add(By.css(".row"))
    rows = ElementList(Element, By.css(".row"), context=context)
    item = rows[0]
    assert item.is_bound
    assert not item.lazy
    assert item.context is context


def test_element_list_factory(context):
    class Row(Element):
        pass

    created = []

    def factory():
        row = Row(By.css(".other"))
        created.append(row)
        return row

    context.add(By.css(".row"))
    rows = ElementList(Element, By.css(".row"), factory=factory, context=context)
    assert isinstance(rows[0], Row)
    assert created[0].is_bound
    # the factory product keeps its own locator
    assert created[0].locator == By.css(".other")


def test_element_list_lookup_failure(context):
    context.break_lookup(By.css(".row"))
    rows = ElementList(Element, By.css(".row"), context=context)
    with pytest.raises(LookupTransientFailure):
        len(rows)


def test_unbound_element_list(context):
    rows = ElementList(Element, By.css(".row"))
    assert rows.lazy
    with pytest.raises(NotBound):
        len(rows)
    rows.bind(context)
    assert len(rows) == 0


def test_element_list_needs_default_implementation():
    with pytest.raises(TypeError):
        ElementList(str, By.css(".row"))
