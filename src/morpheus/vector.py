"""
Dense Vector
============
A fixed-length, mutable, one-dimensional container of float64 entries.

The length is fixed at construction. Operations that produce a vector (`add`)
write into a caller-owned output instead of allocating one.

Note: the norms keep their historical definitions. `norm1` is the signed sum
of the entries, `norm_inf` the largest entry compared against 0, and `norm2`
the sum of squares (the squared Euclidean length).
"""
from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, TextIO

import numpy as np

from morpheus.config import FLOAT_DTYPE
from morpheus.errors import PreconditionViolation, check_entry, check_index, check_size, require
from morpheus.reporter import print_vector

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Vector:
    """
    Stores a dense vector.
    """

    def __init__(self, num_elements: int) -> None:
        """
        Allocate storage for a vector.

        Args:
            num_elements: The number of entries in the vector.

        Raises:
            PreconditionViolation: If `num_elements` is not positive.

        Warning:
            The storage is allocated but not initialized. Call `set_value` or
            assign every entry before reading.
        """
        self._num_elements = check_size(num_elements, "num_elements")
        self._data: npt.NDArray[np.float64] = np.empty(self._num_elements, dtype=FLOAT_DTYPE)
        logger.debug("Allocated vector with %d entries.", self._num_elements)

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Vector:
        """
        Create a vector holding a copy of `values`.

        Raises:
            PreconditionViolation: If `values` is empty, ragged, or not one-dimensional.
        """
        try:
            array = np.asarray(list(values), dtype=FLOAT_DTYPE)
        except ValueError as exc:
            message = f"Cannot build a vector from ragged or nested values: {exc}"
            logger.error(message)
            raise PreconditionViolation(message) from exc
        require(array.ndim == 1, f"Expected a flat sequence of numbers, got shape {array.shape}.")
        vector = cls(array.size)
        vector._data[:] = array
        return vector

    def __repr__(self) -> str:
        """String representation of the vector."""
        return f"{self.__class__.__name__}(num_elements={self._num_elements})"

    def __len__(self) -> int:
        return self._num_elements

    def __iter__(self) -> Iterator[float]:
        for value in self._data:
            yield float(value)

    def __getitem__(self, index: int) -> float:
        i = check_index(operator.index(index), self._num_elements, "Vector index")
        return float(self._data[i])

    def __setitem__(self, index: int, value: float) -> None:
        i = check_index(operator.index(index), self._num_elements, "Vector index")
        self._data[i] = check_entry(value)

    @property
    def num_elements(self) -> int:
        """Total number of entries."""
        return self._num_elements

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a copy of the entries as a 1-D array."""
        return self._data.copy()

    def set_value(self, alpha: float = 0.0) -> None:
        """Set every entry to `alpha`."""
        self._data.fill(alpha)

    def scale(self, alpha: float) -> None:
        """Multiply every entry by `alpha` in place."""
        self._data *= alpha

    def add(self, b: Vector, out: Vector) -> None:
        """
        Vector addition, ``out = self + b``.

        `out` is not allocated, only filled in. It may be the same object as
        `self` or `b`.

        Args:
            b: Vector to add.
            out: Destination for the sum.

        Raises:
            PreconditionViolation: If the three vectors differ in length.
        """
        require(
            self._num_elements == b._num_elements,
            f"Cannot add vectors of length {self._num_elements} and {b._num_elements}.",
        )
        require(
            self._num_elements == out._num_elements,
            f"Sum vector has length {out._num_elements}, expected {self._num_elements}.",
        )
        np.add(self._data, b._data, out=out._data)

    def dot(self, b: Vector) -> float:
        """
        Dot product with `b`.

        Raises:
            PreconditionViolation: If the vectors differ in length.
        """
        require(
            self._num_elements == b._num_elements,
            f"Cannot take dot product of vectors of length {self._num_elements} and {b._num_elements}.",
        )
        return float(np.dot(self._data, b._data))

    def norm1(self) -> float:
        """Sum of all entries."""
        return float(np.sum(self._data))

    def norm_inf(self) -> float:
        """Largest entry, or 0 if no entry is positive."""
        # fmax ignores NaN, like a plain `>` scan would
        return float(np.fmax.reduce(self._data, initial=0.0))

    def norm2(self) -> float:
        """Sum of squares of the entries."""
        return self.dot(self)

    def print(self, stream: Optional[TextIO] = None) -> None:
        """Write a human-readable dump of the vector to `stream` (default stdout)."""
        print_vector(self, stream=stream)
