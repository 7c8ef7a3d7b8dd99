import numpy as np

from path_tangents.domain.entities.path import InterleavedPath, Path, PointListPath
from path_tangents.domain.vector import avec3, vec3


class FlatBufferAccessor:
    """IndexedVec3 over an interleaved buffer (vector i at [3i, 3i+3))."""

    def __init__(self, buffer):
        self.buffer = buffer

    def __len__(self) -> int:
        return avec3.count(self.buffer)

    def get(self, i: int) -> np.ndarray:
        return avec3.get(self.buffer, i)

    def set(self, i: int, v) -> None:
        avec3.set3(self.buffer, i, v[0], v[1], v[2])


class PointListAccessor:
    """IndexedVec3 over a list of small vectors."""

    def __init__(self, points):
        self.points = points

    def __len__(self) -> int:
        return len(self.points)

    def get(self, i: int) -> np.ndarray:
        return vec3.copy(self.points[i])

    def set(self, i: int, v) -> None:
        vec3.set(self.points[i], v)


def source_accessor(path: Path):
    if isinstance(path, InterleavedPath):
        return FlatBufferAccessor(path.buffer)
    elif isinstance(path, PointListPath):
        return PointListAccessor(path.points)
    else:
        raise TypeError(path)


def output_accessor(path: Path):
    """Freshly allocated output storage matching the input representation."""
    if isinstance(path, InterleavedPath):
        dtype = path.buffer.dtype if np.issubdtype(path.buffer.dtype, np.floating) else np.float64
        return FlatBufferAccessor(avec3.create(len(path), dtype=dtype))
    elif isinstance(path, PointListPath):
        return PointListAccessor([vec3.create() for _ in range(len(path))])
    else:
        raise TypeError(path)


def result_of(path: Path, out):
    if isinstance(path, PointListPath) and path.as_array:
        return np.stack(out.points)
    return out.buffer if isinstance(out, FlatBufferAccessor) else out.points
