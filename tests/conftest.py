import pytest

from mathlib.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings, untouched by the host environment."""
    for name in ("MATHLIB_DEFAULT_PRECISION", "LOGGING_LEVEL", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def single_precision(clean_settings, monkeypatch):
    """Make plain Python numbers build single precision angles."""
    monkeypatch.setenv("MATHLIB_DEFAULT_PRECISION", "single")
    get_settings.cache_clear()
