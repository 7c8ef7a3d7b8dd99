import math

import numpy as np

from path_tangents.domain.paths import random_path, star_path
from path_tangents.domain.tangents.tangents_core import compute_tangents


def test_star_path_shape_and_radius():
    pts = star_path(radius=200.0, divisions=50)
    assert len(pts) == 50
    assert all(p[2] == 0.0 for p in pts)
    # k=0 sits on a spike: radius * (1 + amplitude)
    assert math.isclose(pts[0][0], 220.0)
    assert math.isclose(pts[0][1], 0.0, abs_tol=1e-9)


def test_star_path_tangents_stay_in_plane():
    t = np.stack(compute_tangents(star_path(), closed=True))
    assert np.allclose(t[:, 2], 0.0)
    assert np.allclose(np.linalg.norm(t, axis=1), 1.0, atol=1e-4)


def test_random_path_is_seeded():
    a = random_path(5, np.random.default_rng(1))
    b = random_path(5, np.random.default_rng(1))
    assert a.shape == (5, 3)
    assert np.array_equal(a, b)
