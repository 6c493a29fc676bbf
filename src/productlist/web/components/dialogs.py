"""Confirmation dialogs for deleting and renaming a product."""
import streamlit as st

from productlist.services.product_store import ProductListStore
from productlist.web.state import ProductListViewState


@st.dialog("Подтверждение удаления")
def render_delete_dialog(
    store: ProductListStore,
    view_state: ProductListViewState
) -> None:
    """
    Ask before removing the product selected for deletion.

    Args:
        store: Store holding the product
        view_state: Screen state carrying the selection
    """
    product = view_state.selected_for_delete(store)
    if product is None:
        # Already gone; nothing to confirm
        view_state.cancel_delete()
        st.rerun()

    st.write(f'Вы уверены, что хотите удалить "{product.name}"?')

    delete_col, cancel_col = st.columns(2)
    with delete_col:
        if st.button("Удалить", type="primary", key="confirm_delete"):
            view_state.confirm_delete(store)
            st.rerun()
    with cancel_col:
        if st.button("Отмена", key="cancel_delete"):
            view_state.cancel_delete()
            st.rerun()


@st.dialog("Изменить продукт")
def render_edit_dialog(
    store: ProductListStore,
    view_state: ProductListViewState
) -> None:
    """
    Rename the product selected for editing.

    Args:
        store: Store holding the product
        view_state: Screen state carrying the selection and draft name
    """
    product = view_state.selected_for_edit(store)
    if product is None:
        view_state.cancel_edit()
        st.rerun()

    new_name = st.text_input(
        "Новое название",
        value=view_state.edited_product_name,
        key=f"edit_name_{product.id}"
    )

    save_col, cancel_col = st.columns(2)
    with save_col:
        if st.button("Сохранить", type="primary", key="confirm_edit"):
            view_state.confirm_edit(store, new_name)
            st.rerun()
    with cancel_col:
        if st.button("Отмена", key="cancel_edit"):
            view_state.cancel_edit()
            st.rerun()
