"""Logging configuration helpers."""

import logging

LOGGER_NAME = "recipe_coach"


def configure_logging(level: str = "INFO") -> None:
    """Configure the recipe_coach logger once, updating only the level after."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
