"""Test configuration and fixtures for the product list."""
import os

# Keep test runs from writing log files
os.environ.setdefault("PRODUCTLIST_LOG_TO_FILE", "false")

import pytest
from loguru import logger

from productlist.services.product_store import ProductListStore
from productlist.web.state import ProductListViewState


@pytest.fixture
def store() -> ProductListStore:
    """Create an empty product store."""
    return ProductListStore()


@pytest.fixture
def filled_store(store) -> ProductListStore:
    """Create a store holding three products."""
    for name in ("Молоко", "Хлеб", "Яйца"):
        store.add(name)
    return store


@pytest.fixture
def view_state() -> ProductListViewState:
    """Create a fresh screen state."""
    return ProductListViewState()


@pytest.fixture
def log_records():
    """Collect loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
    yield records
    logger.remove(handler_id)
