"""List display component for showing products and their actions."""
from typing import List

import streamlit as st

from productlist.services.product_store import ProductListStore
from productlist.web.state import ProductListViewState
from .dialogs import render_delete_dialog, render_edit_dialog


def render_product_list(
    store: ProductListStore,
    view_state: ProductListViewState
) -> None:
    """
    Render the products with per-row edit and delete buttons.

    In edit mode each row gets a checkbox instead, and the checked rows
    are removed together by position.

    Args:
        store: Store holding the products
        view_state: Screen state for selection and edit mode
    """
    products = store.list()

    if not products:
        st.info("Список пуст")
        return

    if view_state.edit_mode:
        _render_bulk_delete(store, view_state)
        return

    for product in products:
        with st.container():
            name_col, edit_col, del_col = st.columns([6, 1, 1])

            with name_col:
                st.write(product.name)

            with edit_col:
                if st.button(
                    "✏️",
                    key=f"edit_{product.id}",
                    help="Изменить продукт"
                ):
                    view_state.request_edit(product)
                    render_edit_dialog(store, view_state)

            with del_col:
                if st.button(
                    "🗑️",
                    key=f"del_{product.id}",
                    help="Удалить продукт"
                ):
                    view_state.request_delete(product)
                    render_delete_dialog(store, view_state)


def _render_bulk_delete(
    store: ProductListStore,
    view_state: ProductListViewState
) -> None:
    selected: List[int] = []
    for index, product in enumerate(store.list()):
        if st.checkbox(product.name, key=f"select_{product.id}"):
            selected.append(index)

    if st.button(
        "Удалить выбранные",
        type="primary",
        disabled=not selected,
        key="delete_selected"
    ):
        view_state.delete_at(store, selected)
        st.rerun()
