"""Environment-driven settings for mathlib."""

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
from environs import Env

from mathlib.trig.validators import validate_precision


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Library settings.

    default_precision: precision for angles built from plain Python numbers
    logging_level: level name used by setup_logging
    """

    default_precision: np.dtype
    logging_level: str = "INFO"
    debug: bool = False


def load_settings(env: Env | None = None) -> Settings:
    """Read settings from the environment.

    Raises:
        UnsupportedPrecisionError: If MATHLIB_DEFAULT_PRECISION is not single/double
    """
    if env is None:
        env = Env()

    precision = env.str("MATHLIB_DEFAULT_PRECISION", "double").strip().lower()
    log_level_str = env.str("LOGGING_LEVEL", "INFO").upper()

    # DEBUG flag overrides log level when set to True
    debug_mode = env.bool("DEBUG", default=False)
    if debug_mode:
        log_level_str = "DEBUG"

    return Settings(
        default_precision=validate_precision(precision),
        logging_level=log_level_str,
        debug=debug_mode,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings loaded once from the process environment."""
    return load_settings()
