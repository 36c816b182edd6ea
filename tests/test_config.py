"""Tests for :mod:`morpheus.config` and :mod:`morpheus.logging_config`."""

from __future__ import annotations

import io
import logging

import numpy as np
import pytest

from morpheus import config
from morpheus.logging_config import setup_logging


def test_single_float_precision() -> None:
    assert config.FLOAT_DTYPE is np.float64
    assert config.DEFAULT_TOLERANCE == 1e-10


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (" error ", logging.ERROR)],
)
def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch, value: str, expected: int) -> None:
    monkeypatch.setenv("MORPHEUS_LOG_LEVEL", value)
    assert config.get_log_level() == expected


@pytest.mark.parametrize("value", ["", "chatty"])
def test_log_level_falls_back_to_warning(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("MORPHEUS_LOG_LEVEL", value)
    assert config.get_log_level() == logging.WARNING


def test_log_level_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MORPHEUS_LOG_LEVEL", raising=False)
    assert config.get_log_level(default=logging.CRITICAL) == logging.CRITICAL


def test_setup_logging_does_not_stack_handlers() -> None:
    stream = io.StringIO()
    setup_logging(level=logging.INFO, stream=stream)
    logger = setup_logging(level=logging.INFO, stream=stream)

    assert len(logger.handlers) == 1
    logging.getLogger("morpheus.vector").info("hello")
    assert "morpheus.vector - INFO - hello" in stream.getvalue()


def test_setup_logging_writes_optional_file(tmp_path) -> None:
    log_file = tmp_path / "run.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file), stream=io.StringIO())

    assert len(logger.handlers) == 2
    logger.warning("disk")
    for handler in logger.handlers:
        handler.flush()
    assert "WARNING - disk" in log_file.read_text(encoding="utf-8")
