"""Tests for the Streamlit product list page."""
import pytest
from streamlit.testing.v1 import AppTest

from productlist.services.product_store import ProductListStore

APP_SCRIPT = "from productlist.web.app import main\nmain()"


def names(store: ProductListStore):
    return [product.name for product in store.list()]


def submit_new_product(at: AppTest, raw_name: str) -> None:
    at.text_input(key="new_product_name").input(raw_name)
    add_button = next(b for b in at.button if b.label == "➕")
    add_button.click().run()


@pytest.fixture
def app() -> AppTest:
    """Create the page and render it once."""
    at = AppTest.from_string(APP_SCRIPT, default_timeout=30)
    at.run()
    return at


def test_page_starts_empty(app):
    """Test that a new session shows an empty list."""
    assert not app.exception
    assert names(app.session_state["store"]) == []
    assert any(info.value == "Список пуст" for info in app.info)


def test_add_form_trims_and_ignores_blank_input(app):
    """Test adding through the form clears the field and drops blank names."""
    submit_new_product(app, "  Milk ")

    assert not app.exception
    assert names(app.session_state["store"]) == ["Milk"]
    assert app.text_input(key="new_product_name").value == ""

    submit_new_product(app, "   ")

    assert not app.exception
    assert names(app.session_state["store"]) == ["Milk"]
    assert not app.error


def test_edit_mode_deletes_checked_rows(app):
    """Test that checked rows are removed together by position."""
    for name in ("A", "B", "C"):
        submit_new_product(app, name)
    first, _, third = app.session_state["store"].list()

    app.button(key="toggle_edit_mode").click().run()
    assert app.session_state["view_state"].edit_mode

    app.checkbox(key=f"select_{first.id}").check()
    app.checkbox(key=f"select_{third.id}").check()
    app.run()
    app.button(key="delete_selected").click().run()

    assert not app.exception
    assert names(app.session_state["store"]) == ["B"]


def test_view_state_carries_session_id(app):
    """Test that the screen state is bound to the session."""
    view_state = app.session_state["view_state"]

    assert view_state.session_id == app.session_state["session_id"]
    assert view_state.session_id
