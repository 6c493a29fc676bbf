"""Main Streamlit application for the product list."""
import uuid
import streamlit as st

from productlist.config.settings import get_settings, get_streamlit_settings
from productlist.services.product_store import ProductListStore
from productlist.web.state import ProductListViewState
from productlist.web.components import (
    render_add_product,
    render_product_list,
)
from productlist.utils.logger import get_logger

# Initialize logger
logger = get_logger(__name__)


def init_session_state() -> None:
    """Initialize session state variables."""
    if 'session_id' not in st.session_state:
        st.session_state.session_id = str(uuid.uuid4())
        logger.info("New session started", session_id=st.session_state.session_id)

    # One store per session, empty on every start
    if 'store' not in st.session_state:
        st.session_state.store = ProductListStore()

    if 'view_state' not in st.session_state:
        st.session_state.view_state = ProductListViewState(
            session_id=st.session_state.session_id
        )


def render_header(view_state: ProductListViewState) -> None:
    """Render the title bar with the edit mode toggle."""
    title_col, toggle_col = st.columns([4, 1])
    with title_col:
        st.markdown(f"### {get_settings().APP_TITLE}")
    with toggle_col:
        label = "Готово" if view_state.edit_mode else "Изменить"
        if st.button(label, key="toggle_edit_mode"):
            edit_mode = view_state.toggle_edit_mode()
            logger.info(
                "Edit mode toggled",
                session_id=st.session_state.session_id,
                edit_mode=edit_mode
            )
            st.rerun()


def main() -> None:
    """Main application entry point."""
    try:
        streamlit_settings = get_streamlit_settings()
        st.set_page_config(
            page_title=get_settings().APP_TITLE,
            page_icon=streamlit_settings.PAGE_ICON,
            layout=streamlit_settings.PAGE_LAYOUT
        )

        init_session_state()
        store: ProductListStore = st.session_state.store
        view_state: ProductListViewState = st.session_state.view_state

        render_header(view_state)
        render_add_product(store)
        render_product_list(store, view_state)

    except Exception:
        logger.exception(
            "Unhandled error in main application",
            session_id=st.session_state.get('session_id', 'error')
        )
        st.error("Ошибка в приложении. Попробуйте ещё раз.")


if __name__ == "__main__":
    main()
