import logging

import pytest

from patternlab.patterns.singleton import AppContext, Singleton


@pytest.fixture(autouse=True)
def _clean_process_state():
    yield
    AppContext.reset()
    Singleton._reset()
    logger = logging.getLogger("patternlab")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
