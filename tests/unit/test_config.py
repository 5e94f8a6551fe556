import numpy as np
import pytest
from environs import Env

from mathlib.config import Settings, get_settings, load_settings
from mathlib.trig import DegreeAngle, UnsupportedPrecisionError


def test_defaults():
    settings = load_settings(Env())

    assert settings == Settings(default_precision=np.dtype(np.float64))
    assert settings.logging_level == "INFO"
    assert settings.debug is False


@pytest.mark.parametrize("raw", ["single", "SINGLE", " single ", "float32"])
def test_single_default_precision(monkeypatch, raw):
    monkeypatch.setenv("MATHLIB_DEFAULT_PRECISION", raw)

    assert load_settings().default_precision == np.dtype(np.float32)


def test_invalid_default_precision_raises(monkeypatch):
    monkeypatch.setenv("MATHLIB_DEFAULT_PRECISION", "half")

    with pytest.raises(UnsupportedPrecisionError):
        load_settings()


def test_debug_flag_overrides_logging_level(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "warning")
    monkeypatch.setenv("DEBUG", "true")

    settings = load_settings()

    assert settings.logging_level == "DEBUG"
    assert settings.debug is True


def test_logging_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "warning")

    assert load_settings().logging_level == "WARNING"


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("MATHLIB_DEFAULT_PRECISION", "single")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().default_precision == np.dtype(np.float32)


def test_default_precision_applies_to_new_angles(single_precision):
    angle = DegreeAngle(90.0)

    assert angle.precision == "single"
    # numpy values keep their own precision
    assert DegreeAngle(np.float64(90.0)).precision == "double"
