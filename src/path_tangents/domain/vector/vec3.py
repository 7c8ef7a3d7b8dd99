# domain/vector/vec3.py
import math

import numpy as np

Vec3 = np.ndarray  # shape (3,), float64


def create() -> Vec3:
    return np.zeros(3, dtype=np.float64)


def copy(a) -> Vec3:
    return np.array(a, dtype=np.float64, copy=True)


def set(a: Vec3, b) -> Vec3:
    a[0], a[1], a[2] = b[0], b[1], b[2]
    return a


def sub(a, b) -> Vec3:
    """New vector a - b."""
    return np.array((a[0] - b[0], a[1] - b[1], a[2] - b[2]), dtype=np.float64)


def length(a) -> float:
    return math.hypot(float(a[0]), float(a[1]), float(a[2]))


def normalize(a: Vec3) -> Vec3:
    """Scale a to unit length in place. Zero vectors are left as they are."""
    n = length(a)
    if n > 0:
        a[0] /= n
        a[1] /= n
        a[2] /= n
    return a
