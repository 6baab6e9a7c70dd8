"""Logging setup for programs built on hypernum."""

import logging

LOGGER_NAME = "hypernum"
LOG_FORMAT = "[%(levelname)s] %(asctime)s,%(msecs)03d %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: int | str = logging.INFO, name: str = LOGGER_NAME) -> logging.Logger:
    """Attach a stream handler to the hypernum loggers.

    Library modules only log through ``logging.getLogger(__name__)``; call this
    once from an entry point to see their records.

    Args:
        log_level (int | str): Level number or name, e.g. ``"DEBUG"``.
        name (str): Logger to configure; ``""`` configures the root logger.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name or None)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger
