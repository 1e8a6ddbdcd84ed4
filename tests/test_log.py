import logging
from logging.handlers import RotatingFileHandler

import pytest

from patterns import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _own(root):
    return [h for h in root.handlers if getattr(h, "_mdpattern", False)]


def test_console_handler_added_once(root_logger):
    setup_logging()
    setup_logging(logging.WARNING)

    own = _own(root_logger)
    assert len(own) == 1
    assert own[0].level == logging.WARNING


def test_file_handler(root_logger, tmp_path):
    setup_logging(log_dir=str(tmp_path / "logs"))
    setup_logging(log_dir=str(tmp_path / "logs"))

    file_handlers = [h for h in _own(root_logger) if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    logging.getLogger("patterns.test").debug("written to file")
    file_handlers[0].flush()

    files = list((tmp_path / "logs").glob("mdpattern_*.log"))
    assert len(files) == 1
    assert "written to file" in files[0].read_text()
