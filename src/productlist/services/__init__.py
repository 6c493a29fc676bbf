"""Services for the product list."""
from .product_store import ProductListStore

__all__ = ['ProductListStore']
