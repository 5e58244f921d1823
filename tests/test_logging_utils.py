from __future__ import annotations

import io
import logging

import pytest

from planet_duel.core.logging_utils import configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger("planet_duel")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


def test_messages_reach_the_stream():
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)

    logging.getLogger("planet_duel.core.controls").debug("Missile result: %s", "hit enemy")

    line = stream.getvalue().strip()
    assert line.endswith("DEBUG planet_duel.core.controls: Missile result: hit enemy")


def test_level_filters_messages():
    stream = io.StringIO()
    configure_logging("warning", stream=stream)

    logging.getLogger("planet_duel.app").info("hidden")

    assert stream.getvalue() == ""


def test_reconfiguring_does_not_duplicate_handlers():
    stream = io.StringIO()
    configure_logging("INFO", stream=io.StringIO())
    package_logger = configure_logging("INFO", stream=stream)

    logging.getLogger("planet_duel.sweep").info("once")

    assert stream.getvalue().count("once") == 1
    named = [h for h in package_logger.handlers if h.get_name() == "planet_duel"]
    assert len(named) == 1


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError, match="unknown log level"):
        configure_logging("LOUD")
