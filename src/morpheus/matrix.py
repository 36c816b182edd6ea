"""
Dense Matrix
============
A fixed-size, mutable, two-dimensional container of float64 entries.

Storage is one contiguous buffer of ``rows * cols`` entries; entry ``(r, c)``
lives at ``r * cols + c``. A row-major 2-D view over the same buffer is used by
the vectorized kernels.

Multiplication writes into a caller-owned output (``Vector`` or ``Matrix``)
instead of allocating one. Property queries (`is_symmetric`,
`is_upper_triangular`) are not cached; each call rescans the entries.

Note: `norm1` and `norm_inf` use the signed column and row sums, compared
against 0, not the sums of absolute values.
"""
from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, TextIO, Union

import numpy as np

from morpheus.config import FLOAT_DTYPE
from morpheus.errors import PreconditionViolation, check_entry, check_index, check_size, require
from morpheus.reporter import print_matrix
from morpheus.vector import Vector

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _matmul_into(
    a: npt.NDArray[np.float64],
    b: npt.NDArray[np.float64],
    out: npt.NDArray[np.float64],
) -> None:
    """Compute ``a @ b`` into `out`, going through a temporary if `out` overlaps an operand."""
    if np.may_share_memory(out, a) or np.may_share_memory(out, b):
        out[...] = a @ b
    else:
        np.matmul(a, b, out=out)


class Matrix:
    """
    Stores a dense matrix.

    Usage::

        m = Matrix(4, 3)
        m.set_value(0.0)
        m[0, 0] = 1; m[1, 1] = 1; m[2, 2] = 1
    """

    def __init__(self, num_rows: int, num_cols: int) -> None:
        """
        Allocate storage for a dense matrix.

        Args:
            num_rows: Number of rows.
            num_cols: Number of columns.

        Raises:
            PreconditionViolation: If either dimension is not positive.

        Warning:
            The storage is allocated but not initialized.
        """
        self._num_rows = check_size(num_rows, "num_rows")
        self._num_cols = check_size(num_cols, "num_cols")
        self._buffer: npt.NDArray[np.float64] = np.empty(self._num_rows * self._num_cols, dtype=FLOAT_DTYPE)
        self._view: npt.NDArray[np.float64] = self._buffer.reshape(self._num_rows, self._num_cols)
        logger.debug("Allocated %dx%d matrix.", self._num_rows, self._num_cols)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """
        Create a matrix holding a copy of the nested sequence `rows`.

        Raises:
            PreconditionViolation: If `rows` is empty, a row is empty, or the
                rows differ in length, or a cell is not a single number.
        """
        row_lists = [list(row) for row in rows]
        require(len(row_lists) > 0, "Cannot build a matrix from zero rows.")
        widths = {len(row) for row in row_lists}
        require(len(widths) == 1, f"All rows must have the same length, got lengths {sorted(widths)}.")
        try:
            array = np.asarray(row_lists, dtype=FLOAT_DTYPE)
        except ValueError as exc:
            message = f"Cannot build a matrix from nested or non-numeric cells: {exc}"
            logger.error(message)
            raise PreconditionViolation(message) from exc
        matrix = cls(len(row_lists), widths.pop())
        matrix._view[:, :] = array
        return matrix

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Create the `size` x `size` identity matrix."""
        matrix = cls(size, size)
        matrix._buffer.fill(0.0)
        np.fill_diagonal(matrix._view, 1.0)
        return matrix

    def __repr__(self) -> str:
        """String representation of the matrix."""
        return f"{self.__class__.__name__}(num_rows={self._num_rows}, num_cols={self._num_cols})"

    def _flat_index(self, key: tuple[int, int]) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, col) pair, got {key!r}.")
        row = check_index(operator.index(key[0]), self._num_rows, "Row")
        col = check_index(operator.index(key[1]), self._num_cols, "Column")
        return row * self._num_cols + col

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self._buffer[self._flat_index(key)])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._buffer[self._flat_index(key)] = check_entry(value)

    @property
    def num_rows(self) -> int:
        """Number of rows."""
        return self._num_rows

    @property
    def num_cols(self) -> int:
        """Number of columns."""
        return self._num_cols

    @property
    def num_entries(self) -> int:
        """Number of entries, ``num_rows * num_cols``."""
        return self._num_rows * self._num_cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._num_rows, self._num_cols

    def rows(self) -> Iterator[list[float]]:
        """Iterate over the rows, each as a list of floats."""
        for r in range(self._num_rows):
            yield self._view[r].tolist()

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a copy of the entries as a 2-D array."""
        return self._view.copy()

    def set_value(self, alpha: float = 0.0) -> None:
        """Set every entry to `alpha`."""
        self._buffer.fill(alpha)

    def multiply(self, x: Union[Vector, Matrix], out: Union[Vector, Matrix]) -> None:
        """
        Compute ``out = self * x`` for a vector or matrix operand.

        `out` is not allocated, only filled in, and must already have the
        result's dimensions.

        For a vector, ``x`` must have ``num_cols`` entries and ``out``
        ``num_rows`` entries. For a matrix, ``out`` must have ``num_rows``
        rows, ``x`` must have ``num_cols`` rows, and ``x`` and ``out`` must
        have the same number of columns.

        Args:
            x: Vector or matrix to be multiplied.
            out: Result of the multiplication, of the same kind as `x`.

        Raises:
            PreconditionViolation: If the dimensions are inconsistent or the
                operands are of unsupported types.
        """
        if isinstance(x, Vector):
            self._multiply_vector(x, out)
        elif isinstance(x, Matrix):
            self._multiply_matrix(x, out)
        else:
            require(False, f"Cannot multiply a matrix by {type(x).__name__}.")

    def _multiply_vector(self, x: Vector, out: Vector) -> None:
        require(isinstance(out, Vector), f"Result of a matrix-vector product must be a Vector, got {type(out).__name__}.")
        require(
            x.num_elements == self._num_cols,
            f"Vector has {x.num_elements} entries, matrix has {self._num_cols} columns.",
        )
        require(
            out.num_elements == self._num_rows,
            f"Result vector has {out.num_elements} entries, matrix has {self._num_rows} rows.",
        )
        _matmul_into(self._view, x._data, out._data)

    def _multiply_matrix(self, x: Matrix, out: Matrix) -> None:
        require(isinstance(out, Matrix), f"Result of a matrix-matrix product must be a Matrix, got {type(out).__name__}.")
        require(
            self._num_rows == out._num_rows,
            f"Result has {out._num_rows} rows, expected {self._num_rows}.",
        )
        require(
            self._num_cols == x._num_rows,
            f"Inner dimensions differ: {self._num_cols} columns vs {x._num_rows} rows.",
        )
        require(
            x._num_cols == out._num_cols,
            f"Result has {out._num_cols} columns, expected {x._num_cols}.",
        )
        _matmul_into(self._view, x._view, out._view)

    def is_symmetric(self) -> bool:
        """
        Whether the matrix equals its transpose exactly.

        Non-square matrices are never symmetric.
        """
        if self._num_rows != self._num_cols:
            return False
        return bool(np.array_equal(self._view, self._view.T))

    def is_upper_triangular(self) -> bool:
        """
        Whether every entry right of the diagonal is exactly zero.

        Only the entries ``(r, c)`` with ``c > r`` are inspected. Non-square
        matrices always report False.
        """
        if self._num_rows != self._num_cols:
            return False
        upper = self._view[np.triu_indices(self._num_rows, k=1)]
        return bool(np.all(upper == 0.0))

    def approx_equal(self, other: Matrix, tol: float) -> bool:
        """
        Whether `other` has the same size and every entry lies within `tol`.

        An entry pair fails only when ``|self[r, c] - other[r, c]| > tol``.
        """
        if self.shape != other.shape:
            return False
        return not bool(np.any(np.abs(self._view - other._view) > tol))

    def norm1(self) -> float:
        """Largest signed column sum, or 0 if none is positive."""
        return float(np.fmax.reduce(self._view.sum(axis=0), initial=0.0))

    def norm_inf(self) -> float:
        """Largest signed row sum, or 0 if none is positive."""
        return float(np.fmax.reduce(self._view.sum(axis=1), initial=0.0))

    def print(self, stream: Optional[TextIO] = None) -> None:
        """Write a human-readable dump of the matrix to `stream` (default stdout)."""
        print_matrix(self, stream=stream)
