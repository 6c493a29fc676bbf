"""Configuration for the product list app."""
from .settings import (
    ProductListSettings,
    StreamlitSettings,
    get_settings,
    get_streamlit_settings,
    clear_settings_cache,
)

__all__ = [
    'ProductListSettings',
    'StreamlitSettings',
    'get_settings',
    'get_streamlit_settings',
    'clear_settings_cache'
]
