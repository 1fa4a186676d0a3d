import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "keepup"


def setup_logger(name: str) -> logging.Logger:
    """Return the named logger, configuring it and the ``keepup`` package logger.

    Clients log through ``logging.getLogger(__name__)``, so the package
    logger needs the same handler and level as the named one.
    """
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    _configure(logging.getLogger(PACKAGE_LOGGER), level)
    return _configure(logging.getLogger(name), level)


def _configure(logger: logging.Logger, level: str) -> logging.Logger:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
