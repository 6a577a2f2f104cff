"""Tests for the ``logging_config`` module."""

from __future__ import annotations

import importlib
import json
import logging
import sys
from typing import TYPE_CHECKING, Iterator

import pytest
from loguru import logger

from symlinktrack.config import LOG_FORMAT_ENV, LOG_LEVEL_ENV
from symlinktrack.resolver import resolve_hop
from symlinktrack.utils import logging_config
from symlinktrack.utils.logging_config import configure_logging, get_logger

if TYPE_CHECKING:
    from loguru import Message

    from tests.conftest import Chain


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> Iterator[list[Message]]:
    """Configure DEBUG logging and collect every record emitted during the test."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    configure_logging()
    messages: list[Message] = []
    sink_id = logger.add(messages.append, level="DEBUG")
    yield messages
    logger.remove(sink_id)
    monkeypatch.delenv(LOG_LEVEL_ENV)
    configure_logging()


@pytest.mark.skipif(sys.platform == "win32", reason="requires POSIX symlinks")
def test_resolver_logs_hops(symlink_chain: Chain, captured: list[Message]) -> None:
    """Test that a followed hop is logged with its context."""
    resolve_hop(str(symlink_chain.a))

    records = [message.record for message in captured]
    followed = [record for record in records if record["message"] == "Followed symlink"]
    assert len(followed) == 1
    assert followed[0]["extra"]["name"] == "symlinktrack.resolver"
    assert followed[0]["extra"]["extra"]["next_path"] == str(symlink_chain.b)


def test_get_logger_binds_name(captured: list[Message]) -> None:
    """Test that ``get_logger`` binds the module name."""
    get_logger("tests.sample").info("hello")

    assert captured[-1].record["extra"]["name"] == "tests.sample"


def test_stdlib_logging_is_intercepted(captured: list[Message]) -> None:
    """Test that standard-library records are forwarded to loguru."""
    logging.getLogger("third.party").warning("from stdlib")

    assert captured[-1].record["message"] == "from stdlib"
    assert captured[-1].record["level"].name == "WARNING"


def test_json_format(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that ``SYMLINK_TRACK_LOG_FORMAT=json`` emits serialised records on stderr."""
    monkeypatch.setenv(LOG_FORMAT_ENV, "json")
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    try:
        configure_logging()
        get_logger("tests.json").info("serialised")
        line = capsys.readouterr().err.strip().splitlines()[-1]
    finally:
        monkeypatch.delenv(LOG_FORMAT_ENV)
        monkeypatch.delenv(LOG_LEVEL_ENV)
        configure_logging()

    assert json.loads(line)["record"]["message"] == "serialised"


@pytest.mark.skipif(sys.platform == "win32", reason="requires POSIX symlinks")
def test_import_leaves_host_logging_alone(symlink_chain: Chain) -> None:
    """Test that importing the package keeps existing sinks and handlers and emits nothing on its own."""
    messages: list[Message] = []
    sink_id = logger.add(messages.append, level="DEBUG")
    root_handlers = list(logging.getLogger().handlers)
    try:
        importlib.reload(logging_config)
        resolve_hop(str(symlink_chain.a))
        logger.info("host message")
    finally:
        logger.remove(sink_id)

    assert logging.getLogger().handlers == root_handlers
    assert [message.record["message"] for message in messages] == ["host message"]
