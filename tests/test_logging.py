"""Tests for godecls.logging."""

from __future__ import annotations

import json
import logging

import pytest

from godecls.logging import JsonFormatter, configure_logging, get_logger, level_for_verbosity


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_each_verbose_flag_bumps_level(verbosity: int, level: int) -> None:
    assert level_for_verbosity(verbosity) == level


def test_configure_logging_replaces_handlers() -> None:
    configure_logging(verbosity=1)
    logger = configure_logging(verbosity=1)
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_configure_logging_json_formatter() -> None:
    logger = configure_logging(log_format="json")
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_configure_logging_rejects_unknown_format() -> None:
    with pytest.raises(ValueError):
        configure_logging(log_format="xml")


def test_json_formatter_emits_one_object_per_record() -> None:
    record = get_logger("walker").makeRecord(
        "godecls.walker", logging.WARNING, __file__, 1, "skipping %s", ("a.go",), None
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "godecls.walker"
    assert payload["msg"] == "skipping a.go"
    assert "time" in payload
