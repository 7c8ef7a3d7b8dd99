# domain/vector/avec3.py
"""
Indexed vec3 operations on a flat interleaved buffer.
Vector i lives at a[3*i : 3*i + 3]; every function takes (buffer, index).
"""

import numpy as np


def create(n: int, dtype=np.float64) -> np.ndarray:
    return np.zeros(3 * n, dtype=dtype)


def count(a) -> int:
    return len(a) // 3


def get(a, i: int) -> np.ndarray:
    """Copy of vector i, widened to float64."""
    return np.array(a[3 * i : 3 * i + 3], dtype=np.float64)


def set3(a, i: int, x: float, y: float, z: float):
    a[3 * i] = x
    a[3 * i + 1] = y
    a[3 * i + 2] = z
    return a
