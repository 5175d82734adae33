# MIT License (see LICENSE)
"""
Utility functions for numeric conversion and sign handling.

Vector math lives on the Vector type itself; this module holds the small
helpers shared by the diagnostics, snapshot and constraint code.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used for position snapshots and diagnostics so that renderers and
    analysis code always receive consistent precision.
    """
    return np.array(x, dtype=np.float64)


def sign(x: float) -> float:
    """Sign of x as a float: -1.0, 0.0 or 1.0."""
    if x > 0:
        return 1.0
    if x < 0:
        return -1.0
    return 0.0
