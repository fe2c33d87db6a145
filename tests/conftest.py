import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() so handlers never outlive a test's streams."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
