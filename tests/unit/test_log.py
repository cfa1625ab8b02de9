import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from apitask.log import configure_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def test_json_format(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("DEBUG", "json")
    structlog.get_logger("apitask.test").info("request.completed", status=200)
    line = capsys.readouterr().err.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "request.completed"
    assert event["status"] == 200
    assert event["level"] == "info"
    assert event["logger"] == "apitask.test"
    assert "timestamp" in event


def test_level_filters(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("WARNING", "json")
    logger = structlog.get_logger("apitask.test")
    logger.debug("hidden")
    logger.warning("shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
