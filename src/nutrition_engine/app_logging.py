"""Logging configuration for the engine's package logger."""

import logging

LOGGER_NAME = "nutrition_engine"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"

_HANDLER_NAME = "nutrition_engine.stream"


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Route engine logs to stderr at INFO, or DEBUG when ``debug`` is set.

    Repeated calls only adjust the level; the stream handler is attached once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        return logger
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
