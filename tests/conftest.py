import logging

import pytest

from querysense.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``setup_logger`` so later tests see records through caplog."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
