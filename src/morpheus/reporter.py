"""
Diagnostic text dumps of vectors and matrices.

The output lists the dimensions first, then every entry in row-major order.
Values use ``%g`` formatting (six significant digits).
"""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from morpheus.matrix import Matrix
    from morpheus.vector import Vector


def _format_entry(value: float) -> str:
    return f"{value:g}"


def format_vector(vector: Vector) -> str:
    """
    Render a vector as text.

    Example::

        Vector with 3 entries
        data[0] = 0
        data[1] = 0
        data[2] = 7
    """
    lines = [f"Vector with {vector.num_elements} entries"]
    lines.extend(f"data[{i}] = {_format_entry(value)}" for i, value in enumerate(vector))
    return "\n".join(lines) + "\n"


def format_matrix(matrix: Matrix) -> str:
    """
    Render a matrix as text, one row per line.

    Example::

        4x3 Matrix
        1 0 0
        0 1 0
        0 0 1
        0 0 0
    """
    lines = [f"{matrix.num_rows}x{matrix.num_cols} Matrix"]
    for row in matrix.rows():
        lines.append("".join(f"{_format_entry(value)} " for value in row))
    return "\n".join(lines) + "\n"


def print_vector(vector: Vector, stream: Optional[TextIO] = None) -> None:
    (stream if stream is not None else sys.stdout).write(format_vector(vector))


def print_matrix(matrix: Matrix, stream: Optional[TextIO] = None) -> None:
    (stream if stream is not None else sys.stdout).write(format_matrix(matrix))
