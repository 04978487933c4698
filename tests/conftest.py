import logging

import pytest

import logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by folderhash.main so they don't outlive the captured streams."""
    yield
    root_logger = logging.getLogger()
    for handler in logging_config._installed_handlers:
        root_logger.removeHandler(handler)
    logging_config._installed_handlers.clear()
