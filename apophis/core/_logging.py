from __future__ import annotations

import logging

LOGGER_NAME = "apophis"


def get_logger() -> logging.Logger:
    """
    Return the library logger.

    A NullHandler is attached on first use, so records stay silent until the
    application configures logging (e.g. ``logging.basicConfig``).
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def safe_log(logger: logging.Logger, level: str, message: str) -> None:
    """
    Log ``message`` at ``level`` without ever raising.

    A failing handler must not change the result of a combinator, so errors
    from the logging call are dropped.

    Example:
        >>> safe_log(get_logger(), "debug", "Later Eval memoized")
    """
    try:
        getattr(logger, level, logger.info)(message)
    except Exception:
        pass
