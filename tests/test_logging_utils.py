from __future__ import annotations

import sys

import pytest
from loguru import logger

from toastcall import logging_utils
from toastcall.logging_utils import configure_logging, current_invocation, invocation_scope


@pytest.fixture(autouse=True)
def _restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_invocation_scope_sets_and_restores_name() -> None:
    assert current_invocation() == "-"
    with invocation_scope("ping"):
        assert current_invocation() == "ping"
        with invocation_scope("echo"):
            assert current_invocation() == "echo"
        assert current_invocation() == "ping"
    assert current_invocation() == "-"


def test_configure_logging_injects_invocation(monkeypatch) -> None:
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    configure_logging(profile="default", level="DEBUG")

    records: list[str] = []
    sink_id = logger.add(lambda message: records.append(message.record["extra"]["invocation"]), level="DEBUG")
    try:
        with invocation_scope("ping"):
            logger.debug("inside")
        logger.debug("outside")
    finally:
        logger.remove(sink_id)

    assert records == ["ping", "-"]


def test_configure_logging_applies_new_level_for_same_profile(monkeypatch, capsys) -> None:
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    configure_logging(profile="default", level="INFO")
    logger.debug("hidden at info")

    configure_logging(profile="default", level="DEBUG")
    logger.debug("shown at debug")

    err = capsys.readouterr().err
    assert "hidden at info" not in err
    assert "shown at debug" in err
    assert logging_utils._CONFIGURED == ("default", "DEBUG")
