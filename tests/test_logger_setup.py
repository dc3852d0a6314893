import json
import logging

import pytest

import logger_setup


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("pendulum_sim")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_setup_logging_writes_run_log(tmp_path, restore_logger):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({
        "run_id": "unit",
        "logging": {"level": "DEBUG", "format": "%(levelname)s %(message)s"},
    }))

    logger = logger_setup.setup_logging(str(config_path), runs_dir=str(tmp_path / "runs"))
    logger.debug("hello pendulums")
    for handler in logger.handlers:
        handler.flush()

    assert logger is restore_logger
    assert not logger.propagate
    assert len(logger.handlers) == 2
    log_text = (tmp_path / "runs" / "unit" / "simulation.log").read_text()
    assert "DEBUG hello pendulums" in log_text


def test_setup_logging_is_idempotent(tmp_path, restore_logger):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({
        "run_id": "again",
        "logging": {"level": "INFO", "format": "%(message)s"},
    }))

    first = logger_setup.setup_logging(str(config_path), runs_dir=str(tmp_path / "runs"))
    old_file_handler = next(h for h in first.handlers if isinstance(h, logging.FileHandler))

    logger = logger_setup.setup_logging(str(config_path), runs_dir=str(tmp_path / "runs"))
    assert len(logger.handlers) == 2
    assert old_file_handler not in logger.handlers
    # FileHandler.close() drops its stream.
    assert old_file_handler.stream is None
