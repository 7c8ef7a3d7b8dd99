# domain/tangents/tangents_core.py
"""
Per-point path tangents by forward differencing.

Point i gets normalize(p[i+1] - p[i]). The last point wraps to p[0] on a
closed path; on an open path it takes the incoming direction p[i] - p[i-1].
Coincident neighbours give a zero tangent, never an error.
"""

import numpy as np

from path_tangents.app.protocols import IndexedVec3, TangentExecutor
from path_tangents.domain.entities.path import as_path
from path_tangents.domain.tangents.tangents_accessors import (
    output_accessor,
    result_of,
    source_accessor,
)
from path_tangents.domain.vector import vec3


def raw_tangent(src: IndexedVec3, i: int, closed: bool) -> np.ndarray:
    n = len(src)
    if n == 1:
        return vec3.create()
    if i < n - 1:
        return vec3.sub(src.get(i + 1), src.get(i))
    if closed:
        return vec3.sub(src.get(0), src.get(i))
    # open path: arriving direction at the final point
    return vec3.sub(src.get(i), src.get(i - 1))


def fill_tangents(src: IndexedVec3, out: IndexedVec3, closed: bool, start: int = 0, stop=None):
    """Write normalized tangents for indices [start, stop) of src into out."""
    stop = len(src) if stop is None else stop
    for i in range(start, stop):
        # normalized in float64; the output buffer may be narrower
        out.set(i, vec3.normalize(raw_tangent(src, i, closed)))


def compute_tangents(path, closed: bool = False, executor: TangentExecutor | None = None):
    """
    One unit tangent per point, in the representation of `path`:
    interleaved buffer in -> new 1-D array; point list in -> new list of vectors
    ((N, 3) array in -> new (N, 3) array).
    """
    p = as_path(path)
    src, out = source_accessor(p), output_accessor(p)
    if executor is None:
        fill_tangents(src, out, closed)
    else:
        executor.run(src, out, closed)
    return result_of(p, out)


def compute_tangents_array(points, closed: bool = False) -> np.ndarray:
    """Whole-array variant for (N, 3) input. Same policy as compute_tangents."""
    p = as_path(points)
    if p.kind != "points":
        raise TypeError("compute_tangents_array expects an (N, 3) point array")
    pts = p.points
    n = len(pts)
    if n == 1:
        return np.zeros((1, 3))

    raw = np.empty_like(pts)
    raw[:-1] = pts[1:] - pts[:-1]
    raw[-1] = pts[0] - pts[-1] if closed else pts[-1] - pts[-2]

    norms = np.hypot(np.hypot(raw[:, 0], raw[:, 1]), raw[:, 2])[:, None]
    return np.divide(raw, norms, out=np.zeros_like(raw), where=norms > 0)
