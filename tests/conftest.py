import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_dirscope_logging():
    """Drop handlers attached by configure_logging so a later test does not
    reuse a stream pytest has already closed."""
    yield
    logger = logging.getLogger("dirscope")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
