"""Shared pytest fixtures for the Morpheus test suite."""

from __future__ import annotations

import logging

import numpy as np
import pytest
from hypothesis import HealthCheck, settings

from morpheus import Matrix, Vector
from morpheus.logging_config import LOGGER_NAME

# The logger reset fixture below is autouse, so every @given test sees it
settings.register_profile(
    "morpheus",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("morpheus")


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by ``setup_logging`` so streams do not leak between tests."""

    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def identity5() -> Matrix:
    return Matrix.identity(5)


@pytest.fixture
def random5(rng: np.random.Generator) -> Matrix:
    """A 5x5 matrix with random integer-valued entries."""

    return Matrix.from_rows(rng.integers(0, 1000, size=(5, 5)).astype(float).tolist())


@pytest.fixture
def unit_vector5() -> Vector:
    """Five entries, each ``1/sqrt(5)``."""

    vec = Vector(5)
    vec.set_value(1.0 / np.sqrt(5.0))
    return vec
