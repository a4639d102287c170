import io
import logging

import pytest

from hillclimb.foundation.logging import configure_hillclimb_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("hillclimb")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


@pytest.fixture
def bare_root(monkeypatch, package_logger):
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    package_logger.handlers[:] = []
    return package_logger


def test_leaves_application_handlers_in_charge(package_logger):
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(package_logger.handlers)
        assert configure_hillclimb_logging() is None
        assert package_logger.handlers == before
    finally:
        root.removeHandler(handler)


def test_attaches_single_console_handler(bare_root):
    stream = io.StringIO()
    first = configure_hillclimb_logging(level=logging.DEBUG, stream=stream)
    second = configure_hillclimb_logging(level=logging.DEBUG, stream=stream)

    assert first is second
    assert bare_root.handlers == [first]
    assert bare_root.level == logging.DEBUG
    assert bare_root.propagate is False

    logging.getLogger("hillclimb.report").info("abc\t1.0000\t0ns")
    assert stream.getvalue() == "abc\t1.0000\t0ns\n"


def test_lower_level_widens_existing_console_handler(bare_root):
    stream = io.StringIO()
    configure_hillclimb_logging(level=logging.WARNING, stream=stream)
    logging.getLogger("hillclimb.report").info("hidden")

    configure_hillclimb_logging(level=logging.INFO)
    logging.getLogger("hillclimb.report").info("shown")

    assert bare_root.level == logging.INFO
    assert len(bare_root.handlers) == 1
    assert stream.getvalue() == "shown\n"
