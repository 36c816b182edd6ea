"""
Configuration & Global Constants
================================
Central registry for the numeric settings shared by the package.

Exports:
    FLOAT_DTYPE: The single floating-point precision used for all storage.
    DEFAULT_TOLERANCE: Absolute tolerance used by the acceptance drivers.
    LOG_LEVEL (int): Logging level for the command-line entry point, read from
        the ``MORPHEUS_LOG_LEVEL`` environment variable.
"""
import logging
import os

import numpy as np


def get_log_level(env_var: str = "MORPHEUS_LOG_LEVEL", default: int = logging.WARNING) -> int:
    """
    Resolve a logging level from an environment variable holding a level name.

    Unknown names fall back to `default`.
    """
    name = os.environ.get(env_var, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    if isinstance(level, int):
        return level
    return default


# Global Constants
FLOAT_DTYPE: type = np.float64
DEFAULT_TOLERANCE: float = 1e-10
LOG_LEVEL: int = get_log_level()
