"""Tests for the ``python -m morpheus`` entry point."""

from __future__ import annotations

import logging
import runpy
import sys

import pytest

from morpheus import Matrix
from morpheus.main import main


def test_all_drivers_pass_with_exit_status_zero(capsys) -> None:
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Matrix test: PASSED!" in out
    assert "Add/scale test: PASSED!" in out
    assert "Norm test: PASSED!" in out


def test_single_driver(capsys) -> None:
    assert main(["norm"]) == 0
    out = capsys.readouterr().out
    assert "Norm test: PASSED!" in out
    assert "Matrix test" not in out


def test_failure_gives_exit_status_one(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr(Matrix, "is_symmetric", lambda self: False)
    assert main(["matrix", "--seed", "1"]) == 1
    assert "Matrix test: FAILED!" in capsys.readouterr().out


def test_unknown_driver_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["determinant"])
    assert excinfo.value.code == 2


def test_verbose_logs_at_debug(capsys) -> None:
    assert main(["norm", "-v"]) == 0
    assert logging.getLogger("morpheus").level == logging.DEBUG
    assert "Running drivers: norm" in capsys.readouterr().out


def test_log_file_receives_records(tmp_path, capsys) -> None:
    log_file = tmp_path / "morpheus.log"
    assert main(["norm", "-v", "--log-file", str(log_file)]) == 0
    for handler in logging.getLogger("morpheus").handlers:
        handler.flush()
    assert "Running drivers: norm" in log_file.read_text(encoding="utf-8")


def test_module_entry_point_exits_with_status(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["morpheus", "norm"])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("morpheus", run_name="__main__")
    assert excinfo.value.code == 0
