"""Models for the product list."""
from .product import Product, new_product_id

__all__ = ['Product', 'new_product_id']
