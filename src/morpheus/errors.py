"""
Precondition checks shared by the vector and matrix types.

Violations are logged at ERROR through this module's logger, then raised.
"""
from __future__ import annotations

import logging
import numbers

logger = logging.getLogger(__name__)


class PreconditionViolation(AssertionError):
    """
    Raised when a caller breaks the contract of an operation.

    Invalid sizes, out-of-range indices and mismatched operand dimensions are
    programmer errors. They are not meant to be caught and recovered from.
    """


def require(condition: bool, message: str) -> None:
    """
    Raise :class:`PreconditionViolation` with `message` unless `condition` holds.

    Unlike a bare ``assert`` this check stays active under ``python -O``.
    """
    if not condition:
        logger.error(message)
        raise PreconditionViolation(message)


def check_size(value: int, name: str) -> int:
    """
    Validate a dimension passed to a constructor.

    Args:
        value: The requested size.
        name: Name used in the error message.

    Raises:
        PreconditionViolation: If `value` is not a positive integer.

    Returns:
        The size as a plain ``int``.
    """
    require(
        isinstance(value, numbers.Integral) and not isinstance(value, bool),
        f"'{name}' must be an integer, got {type(value).__name__}.",
    )
    size = int(value)
    require(size > 0, f"'{name}' must be positive, got {size}.")
    return size


def check_index(index: int, bound: int, name: str) -> int:
    """Validate a zero-based subscript against `bound` (no negative wraparound)."""
    require(0 <= index < bound, f"{name} {index} out of range [0, {bound}).")
    return index


def check_entry(value: float) -> float:
    """
    Validate a value written into a single entry.

    Raises:
        TypeError: If `value` is not a real number (strings are not parsed).

    Returns:
        The value as a plain ``float``.
    """
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Entries must be real numbers, got {type(value).__name__}.")
    return float(value)
