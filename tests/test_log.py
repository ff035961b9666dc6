import logging

import pytest

from glomers import configure_logging
from glomers import log as glomers_log


@pytest.fixture(autouse=True)
def fresh_logger(monkeypatch):
    logger = logging.getLogger("glomers")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    logger.handlers.clear()
    monkeypatch.setattr(glomers_log, "_CONFIGURED", False)
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def test_level_from_argument_and_env(monkeypatch, fresh_logger):
    configure_logging("debug")
    assert fresh_logger.level == logging.DEBUG

    monkeypatch.setenv("GLOMERS_LOG_LEVEL", "error")
    configure_logging()
    assert fresh_logger.level == logging.ERROR

    monkeypatch.setenv("GLOMERS_LOG_LEVEL", "nonsense")
    configure_logging()
    assert fresh_logger.level == logging.INFO


def test_single_stderr_handler(fresh_logger):
    configure_logging()
    configure_logging()
    assert len(fresh_logger.handlers) == 1
    assert isinstance(fresh_logger.handlers[0], logging.StreamHandler)
    assert fresh_logger.propagate is False
