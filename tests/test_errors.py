"""Tests for :mod:`morpheus.errors`."""

from __future__ import annotations

import logging

import pytest

from morpheus import PreconditionViolation, Vector
from morpheus.errors import check_index, check_size, require


def test_violation_is_an_assertion_error() -> None:
    assert issubclass(PreconditionViolation, AssertionError)


def test_require_logs_before_raising(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="morpheus")
    with pytest.raises(PreconditionViolation, match="sizes differ"):
        require(False, "sizes differ")
    assert "sizes differ" in caplog.text


def test_require_passes_silently() -> None:
    require(True, "unused")


def test_check_size() -> None:
    assert check_size(3, "n") == 3
    with pytest.raises(PreconditionViolation, match="'n' must be positive"):
        check_size(0, "n")


def test_check_index_does_not_wrap() -> None:
    assert check_index(0, 1, "Index") == 0
    with pytest.raises(PreconditionViolation, match=r"Index -1 out of range \[0, 1\)"):
        check_index(-1, 1, "Index")


def test_mismatched_dot_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="morpheus")
    a = Vector(2)
    a.set_value(1.0)
    with pytest.raises(PreconditionViolation):
        a.dot(Vector(3))
    assert any(record.name == "morpheus.errors" for record in caplog.records)


def test_module_is_documented() -> None:
    from morpheus import errors

    assert errors.__doc__ and "Precondition checks" in errors.__doc__
