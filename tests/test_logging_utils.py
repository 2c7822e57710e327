import io
import logging

import pytest

from safe_wipe.logging_utils import configure_logging, verbosity_to_level


@pytest.fixture
def package_logger(monkeypatch):
    logger = logging.getLogger("safe_wipe")
    level = logger.level
    monkeypatch.setattr(logger, "handlers", [])
    yield logger
    logger.setLevel(level)


@pytest.mark.parametrize(
    "verbosity, level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_verbosity_to_level(verbosity, level):
    assert verbosity_to_level(verbosity) == level


def test_configure_logging_writes_to_given_stream(package_logger):
    stream = io.StringIO()

    configure_logging(verbosity=1, stream=stream)
    logging.getLogger("safe_wipe.wiper").info("Wiping %s", "build")
    logging.getLogger("safe_wipe.wiper").debug("Running step %s", "delete")

    assert stream.getvalue() == "INFO safe_wipe.wiper: Wiping build\n"


def test_configure_logging_replaces_its_own_handler_only(package_logger):
    foreign = logging.StreamHandler(io.StringIO())
    package_logger.addHandler(foreign)
    second = io.StringIO()

    configure_logging(verbosity=0, stream=io.StringIO())
    configure_logging(verbosity=2, stream=second)

    assert len(package_logger.handlers) == 2
    assert package_logger.handlers[0] is foreign
    assert package_logger.handlers[1].stream is second
    assert package_logger.level == logging.DEBUG


def test_configure_logging_leaves_root_logger_alone(package_logger):
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level

    configure_logging(verbosity=2, stream=io.StringIO())

    assert root.handlers == handlers_before
    assert root.level == level_before
