import logging
import sys

LOGGER_NAME = "hello_service"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Return the service logger, writing bare messages to the current stdout."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # Replace rather than stack handlers on repeated calls
    for existing in [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]:
        logger.removeHandler(existing)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
