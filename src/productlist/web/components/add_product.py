"""Add product component: a text field with a plus button."""
import streamlit as st

from productlist.services.product_store import ProductListStore


def render_add_product(store: ProductListStore) -> None:
    """
    Render the add product form.

    The field is cleared on submit. Blank input is dropped by the store
    without any message.

    Args:
        store: Store receiving the new product
    """
    with st.form("add_product", clear_on_submit=True):
        name_col, button_col = st.columns([5, 1])
        with name_col:
            name = st.text_input(
                "Название продукта",
                placeholder="Введите название продукта",
                label_visibility="collapsed",
                key="new_product_name"
            )
        with button_col:
            submit = st.form_submit_button("➕", help="Добавить продукт")

    if submit:
        count_before = len(store)
        store.add(name)
        if len(store) != count_before:
            # Force rerun to refresh the list
            st.rerun()
