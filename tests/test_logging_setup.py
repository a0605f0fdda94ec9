import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logging

import pytest

from simple_notes import logging_setup, settings


@pytest.fixture
def fresh_logger(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(settings, "LOG_PATH", tmp_path / "logs" / "simple-notes.log")
    logger = logging.getLogger(settings.LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers[:], logger.level, logger.propagate = saved


def test_setup_writes_session_stamped_file(fresh_logger, tmp_path):
    log = logging_setup.setup_logging()
    logging.getLogger("simple_notes.core.persistence").info("Loaded from file: notes.txt")
    for h in log.handlers:
        h.flush()

    lines = (tmp_path / "logs" / "simple-notes.log").read_text(encoding="utf-8").splitlines()
    assert any("Loaded from file: notes.txt" in line for line in lines)
    assert all(line.endswith(f"sid={logging_setup.SESSION_ID}") for line in lines)


def test_setup_is_idempotent(fresh_logger):
    logging_setup.setup_logging()
    logging_setup.setup_logging()
    assert len(fresh_logger.handlers) == 2
