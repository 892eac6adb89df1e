import logging

import pytest

from careerbridge.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_installs_single_handler(restore_root_logger):
    setup_logging("debug")
    setup_logging("debug")
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("chatty")
    assert restore_root_logger.level == logging.INFO
