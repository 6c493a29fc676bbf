"""Streamlit presentation layer for the product list."""
