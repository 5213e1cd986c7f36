import logging
import pytest


@pytest.fixture(autouse=True)
def restore_logging():
    """main() disables logging globally unless -v is passed; undo that after each test."""
    original_disable_level = logging.root.manager.disable
    yield
    logging.disable(original_disable_level)
