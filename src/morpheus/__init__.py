"""
Morpheus: dense vector and matrix primitives.

The package exposes two leaf value types, :class:`Vector` and :class:`Matrix`,
backed by contiguous NumPy buffers. Dimension mismatches and invalid sizes are
programmer errors and raise :class:`PreconditionViolation`.
"""
from morpheus.errors import PreconditionViolation
from morpheus.vector import Vector
from morpheus.matrix import Matrix

__all__ = ["Matrix", "PreconditionViolation", "Vector"]
