from __future__ import annotations

import json
import logging

import pytest
import structlog

from dcatde_ckan.core.config import Settings
from dcatde_ckan.core.logging import configure_logging


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_events_are_json_on_stderr(capsys: pytest.CaptureFixture[str], reset_structlog: None) -> None:
    configure_logging("debug", settings=Settings())

    structlog.get_logger("test").debug("dcat_upload.package_created", name="demo")

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "dcat_upload.package_created"
    assert event["level"] == "debug"
    assert event["name"] == "demo"
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_falls_back_to_info(capsys: pytest.CaptureFixture[str], reset_structlog: None) -> None:
    configure_logging("chatty", settings=Settings())

    logger = structlog.get_logger("test")
    logger.debug("hidden")
    logger.info("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
