# src/dirscope/log.py
import logging
import sys

CONSOLE_FORMAT = "%(levelname)s | %(message)s"

_HANDLER_TAG_ATTR = "_dirscope_handler"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attaches a single stderr handler to the package logger. Only the entry
    point calls this; calling it again just updates the level.
    """
    logger = logging.getLogger("dirscope")
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            handler.setLevel(level)
            handler.setStream(sys.stderr)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    setattr(handler, _HANDLER_TAG_ATTR, True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
