"""UI components for the product list."""
from .add_product import render_add_product
from .product_list import render_product_list
from .dialogs import render_delete_dialog, render_edit_dialog

__all__ = [
    'render_add_product',
    'render_product_list',
    'render_delete_dialog',
    'render_edit_dialog'
]
