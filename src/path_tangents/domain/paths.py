# domain/paths.py
import math

import numpy as np

TAU = 2.0 * math.pi


def star_path(
    radius: float = 200.0, divisions: int = 50, spikes: int = 10, amplitude: float = 0.1
) -> list[list[float]]:
    """Flat star in the z=0 plane: a circle whose radius wobbles `spikes` times per turn."""
    pts = []
    for k in range(divisions):
        s = k / divisions
        r = radius + radius * amplitude * math.cos(spikes * s * TAU)
        pts.append([r * math.cos(TAU * s), r * math.sin(TAU * s), 0.0])
    return pts


def random_path(n: int, rng: np.random.Generator) -> np.ndarray:
    """n points uniform in [0, 1)^3, shape (n, 3)."""
    return rng.random((n, 3))
