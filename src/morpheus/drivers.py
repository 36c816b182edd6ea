"""
Acceptance Drivers
==================
Self-checking scenarios that exercise the public API end to end.

Each driver prints an ``ERROR:`` line for every failed check, then a single
``PASSED!``/``FAILED!`` summary line, and returns whether all checks passed.
The command-line entry point (``python -m morpheus``) maps the result to the
process exit status.
"""
from __future__ import annotations

import logging
import math
import sys
from typing import Callable, Optional, TextIO

import numpy as np

from morpheus.config import DEFAULT_TOLERANCE
from morpheus.matrix import Matrix
from morpheus.vector import Vector

logger = logging.getLogger(__name__)

# Upper bound for random integer entries, same range as C's RAND_MAX
RANDOM_ENTRY_MAX = 2**31 - 1


def _approx_equal(a: float, b: float, tol: float) -> bool:
    """True if ``|a - b| < tol``."""
    return abs(a - b) < tol


def _report(name: str, passed: bool, out: TextIO) -> bool:
    status = "PASSED!" if passed else "FAILED!"
    out.write(f"{name} test: {status}\n")
    logger.info("%s test finished: %s", name, status)
    return passed


def matrix_test(rng: Optional[np.random.Generator] = None, out: Optional[TextIO] = None) -> bool:
    """
    Multiply a random 5x5 matrix by the identity and check the structural queries.

    Args:
        rng: Source of the random entries. A fresh generator is used if omitted.
        out: Stream for the report lines, defaults to stdout.
    """
    rng = rng if rng is not None else np.random.default_rng()
    out = out if out is not None else sys.stdout
    passed = True
    size = 5

    rand_mat = Matrix(size, size)
    for r in range(size):
        for c in range(size):
            rand_mat[r, c] = float(rng.integers(0, RANDOM_ENTRY_MAX))

    eye = Matrix(size, size)
    for r in range(size):
        for c in range(size):
            eye[r, c] = 1.0 if r == c else 0.0

    result = Matrix(size, size)
    rand_mat.multiply(eye, result)

    if not rand_mat.approx_equal(result, DEFAULT_TOLERANCE):
        out.write("ERROR: The matrix product is incorrect\n")
        passed = False

    if not eye.is_symmetric():
        out.write("ERROR: The identity matrix should be symmetric\n")
        passed = False

    if not eye.is_upper_triangular():
        out.write("ERROR: The identity matrix should be upper triangular\n")
        passed = False

    return _report("Matrix", passed, out)


def add_scale_test(
    num_entries: int = 10,
    rng: Optional[np.random.Generator] = None,
    out: Optional[TextIO] = None,
) -> bool:
    """
    Check that ``A + (-1 * A)`` is the zero vector.

    Args:
        num_entries: Length of the vectors.
        rng: Source of the random entries. A fresh generator is used if omitted.
        out: Stream for the report lines, defaults to stdout.
    """
    rng = rng if rng is not None else np.random.default_rng()
    out = out if out is not None else sys.stdout
    passed = True

    vec_a = Vector(num_entries)
    vec_b = Vector(num_entries)
    vec_c = Vector(num_entries)

    for i in range(num_entries):
        vec_a[i] = float(rng.integers(0, RANDOM_ENTRY_MAX))

    for i in range(num_entries):
        vec_b[i] = vec_a[i]

    vec_b.scale(-1.0)
    vec_a.add(vec_b, vec_c)

    # C should be all zeros, so its norm should be too
    if vec_c.norm2() > DEFAULT_TOLERANCE:
        out.write("ERROR: C must be 0\n")
        passed = False

    return _report("Add/scale", passed, out)


def norm_test(num_entries: int = 5, out: Optional[TextIO] = None) -> bool:
    """
    Check the three vector norms on a vector with every entry ``1/sqrt(n)``.

    Expected: ``norm1 == sqrt(n)``, ``norm_inf == 1/sqrt(n)``, ``norm2 == 1``.
    """
    out = out if out is not None else sys.stdout
    passed = True

    vec = Vector(num_entries)
    root_n = math.sqrt(num_entries)
    inv_root_n = 1.0 / root_n
    for i in range(num_entries):
        vec[i] = inv_root_n

    if not _approx_equal(vec.norm1(), root_n, DEFAULT_TOLERANCE):
        out.write("ERROR: The 1-norm is incorrect\n")
        passed = False
    if not _approx_equal(vec.norm_inf(), inv_root_n, DEFAULT_TOLERANCE):
        out.write("ERROR: The infinity-norm is incorrect\n")
        passed = False
    if not _approx_equal(vec.norm2(), 1.0, DEFAULT_TOLERANCE):
        out.write("ERROR: The 2-norm is incorrect\n")
        passed = False

    return _report("Norm", passed, out)


def run_drivers(
    names: list[str],
    seed: Optional[int] = None,
    out: Optional[TextIO] = None,
) -> bool:
    """
    Run the named drivers in order with a shared random generator.

    Every driver runs even if an earlier one fails.

    Raises:
        KeyError: If a name is not registered in `DRIVERS`.
    """
    rng = np.random.default_rng(seed)
    results = []
    for name in names:
        driver = DRIVERS[name]
        logger.debug("Running driver '%s'.", name)
        results.append(driver(rng, out))
    return all(results)


DRIVERS: dict[str, Callable[[np.random.Generator, Optional[TextIO]], bool]] = {
    "matrix": lambda rng, out: matrix_test(rng=rng, out=out),
    "add-scale": lambda rng, out: add_scale_test(rng=rng, out=out),
    "norm": lambda rng, out: norm_test(out=out),
}
