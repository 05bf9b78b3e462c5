import pytest

from sales_total.models import ElementState
from sales_total.ui import SalesElement


def test_element_starts_loading():
    element = SalesElement()
    assert element.element_id == "total-sales"
    assert element.state is ElementState.LOADING
    assert element.text == "Loading..."
    assert not element.settled


def test_success_and_error_states():
    ok = SalesElement()
    ok.show_total("1234.56")
    assert ok.snapshot().model_dump() == {
        "element_id": "total-sales",
        "text": "1234.56",
        "state": ElementState.SUCCESS,
    }

    failed = SalesElement()
    failed.show_error()
    assert failed.text == "Error loading data"
    assert failed.state is ElementState.ERROR


def test_element_is_written_once():
    element = SalesElement()
    element.show_total("1.00")
    with pytest.raises(RuntimeError):
        element.show_error()
    assert element.state is ElementState.SUCCESS


def test_html_rendering():
    element = SalesElement()
    element.show_error()
    assert element.to_html() == '<span id="total-sales" class="error">Error loading data</span>'
