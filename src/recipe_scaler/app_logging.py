"""Logging configuration helpers."""

import logging

LOGGER_NAME = "recipe_scaler"


def configure_logging(*, debug: bool = False) -> None:
    """Attach one stream handler to the package logger.

    Repeated calls only adjust the level, so app factories can call this
    freely.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
