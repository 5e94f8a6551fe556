import logging
import sys

from environs import Env

from mathlib.config import load_settings


def setup_logging(env: Env | None = None) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    settings = load_settings(env)

    numeric_level = getattr(logging, settings.logging_level, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {settings.logging_level}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    # Set the level for the library loggers
    logging.getLogger("mathlib").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
