"""Tests for configuration settings."""
import pytest
from pydantic import ValidationError

from productlist.config.settings import (
    ProductListSettings,
    StreamlitSettings,
    PROJECT_ROOT,
    clear_settings_cache,
    get_settings,
)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_default_settings(monkeypatch):
    """Test the defaults without environment overrides."""
    monkeypatch.delenv("PRODUCTLIST_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PRODUCTLIST_APP_TITLE", raising=False)
    settings = ProductListSettings(_env_file=None)

    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == "detailed"
    assert settings.APP_TITLE == "Список продуктов"
    assert settings.LOG_FILE.is_absolute()


def test_env_overrides(monkeypatch):
    """Test that prefixed environment variables are picked up."""
    monkeypatch.setenv("PRODUCTLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("PRODUCTLIST_APP_TITLE", "Покупки")

    settings = get_settings()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.APP_TITLE == "Покупки"


def test_project_root_holds_src():
    """Test that the project root is the directory above src/."""
    assert (PROJECT_ROOT / "src" / "productlist").is_dir()


def test_relative_log_file_is_resolved(monkeypatch):
    """Test that a relative log path is anchored at the project root."""
    monkeypatch.setenv("PRODUCTLIST_LOG_FILE", "custom/app.log")

    settings = ProductListSettings(_env_file=None)

    assert settings.LOG_FILE == PROJECT_ROOT / "custom" / "app.log"


def test_invalid_log_level():
    """Test that an unknown log level is rejected."""
    with pytest.raises(ValidationError):
        ProductListSettings(LOG_LEVEL="LOUD", _env_file=None)


def test_invalid_log_format():
    """Test that an unknown log format is rejected."""
    with pytest.raises(ValidationError):
        ProductListSettings(LOG_FORMAT="fancy", _env_file=None)


def test_streamlit_settings_validation():
    """Test the Streamlit page layout check."""
    assert StreamlitSettings(PAGE_LAYOUT="wide").PAGE_LAYOUT == "wide"

    with pytest.raises(ValidationError):
        StreamlitSettings(PAGE_LAYOUT="narrow")
