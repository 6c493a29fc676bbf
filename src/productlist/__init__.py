"""In-memory product list with a Streamlit front end."""
__version__ = "0.1.0"
