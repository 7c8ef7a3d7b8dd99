# domain/entities/path.py
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import Literal

import numpy as np

from path_tangents.app.errors import InvalidInputError

PathKind = Literal["interleaved", "points"]


def _is_scalar(v) -> bool:
    return isinstance(v, (Real, np.number)) and not isinstance(v, (bool, np.bool_))


def _is_vector_like(v) -> bool:
    if isinstance(v, (str, bytes, Mapping)):
        return False
    return hasattr(v, "__len__") and hasattr(v, "__getitem__")


def _is_numeric_dtype(dtype) -> bool:
    return np.issubdtype(dtype, np.number) and dtype != np.bool_


def _checked_buffer(raw) -> np.ndarray:
    """1-D numeric array of length 3N, N >= 1. Floating arrays pass through uncopied."""
    if isinstance(raw, np.ndarray):
        if raw.ndim != 1:
            raise InvalidInputError(f"interleaved buffer must be 1-D, got {raw.ndim}-D")
        if raw.dtype != object and not _is_numeric_dtype(raw.dtype):
            raise InvalidInputError(f"unsupported buffer dtype {raw.dtype}")
    elif not _is_vector_like(raw):
        raise InvalidInputError(f"interleaved buffer must be a sequence, got {type(raw).__name__}")
    if len(raw) == 0:
        raise InvalidInputError("path is empty")
    if len(raw) % 3 != 0:
        raise InvalidInputError(f"interleaved buffer length {len(raw)} is not a multiple of 3")
    if isinstance(raw, np.ndarray) and np.issubdtype(raw.dtype, np.floating):
        return raw
    for k, v in enumerate(raw):
        if not _is_scalar(v):
            raise InvalidInputError("interleaved buffer holds a non-numeric value", index=k // 3)
    return np.asarray(raw, dtype=np.float64)


def _checked_points(raw) -> np.ndarray:
    """New (N, 3) float64 array, N >= 1."""
    if isinstance(raw, np.ndarray) and raw.ndim == 2 and raw.dtype != object:
        if raw.shape[0] == 0:
            raise InvalidInputError("path is empty")
        if raw.shape[1] != 3:
            raise InvalidInputError("point must have exactly 3 components", index=0)
        if not _is_numeric_dtype(raw.dtype):
            raise InvalidInputError(f"unsupported point dtype {raw.dtype}")
        return raw.astype(np.float64, copy=True)
    if not _is_vector_like(raw):
        raise InvalidInputError(f"point list must be a sequence, got {type(raw).__name__}")
    if len(raw) == 0:
        raise InvalidInputError("path is empty")

    pts = np.empty((len(raw), 3), dtype=np.float64)
    for i, p in enumerate(raw):
        if not _is_vector_like(p) or len(p) != 3:
            raise InvalidInputError("point must have exactly 3 components", index=i)
        if not all(_is_scalar(c) for c in p):
            raise InvalidInputError("point components must be numeric", index=i)
        pts[i] = (p[0], p[1], p[2])
    return pts


# Path representations. Both denote an ordered list of N >= 1 3D points and
# validate their storage on construction.
@dataclass(frozen=True, eq=False)
class InterleavedPath:
    buffer: np.ndarray  # 1-D, length 3N

    kind: PathKind = field(default="interleaved", init=False)

    def __post_init__(self):
        object.__setattr__(self, "buffer", _checked_buffer(self.buffer))

    def __len__(self) -> int:
        return len(self.buffer) // 3


@dataclass(frozen=True, eq=False)
class PointListPath:
    points: np.ndarray  # (N, 3), float64
    as_array: bool = False  # caller passed an (N, 3) ndarray; hand back the same shape

    kind: PathKind = field(default="points", init=False)

    def __post_init__(self):
        object.__setattr__(self, "points", _checked_points(self.points))

    def __len__(self) -> int:
        return len(self.points)


Path = InterleavedPath | PointListPath


def as_path(raw) -> Path:
    """
    Classify caller input once into a tagged path representation.
    Interleaved vs point list is decided by the first element: a bare number
    means an interleaved buffer, an indexable value means a point list.
    """
    if isinstance(raw, (InterleavedPath, PointListPath)):
        return raw
    if raw is None:
        raise InvalidInputError("path is None")

    if isinstance(raw, np.ndarray):
        if raw.size == 0:
            raise InvalidInputError("path is empty")
        if raw.ndim == 2:
            return PointListPath(raw, as_array=True)
        if raw.ndim != 1:
            raise InvalidInputError(f"path array must be 1-D or 2-D, got {raw.ndim}-D")
        if raw.dtype != object:
            return InterleavedPath(raw)

    if not isinstance(raw, Sequence) and not _is_vector_like(raw):
        raise InvalidInputError(f"path must be a sequence, got {type(raw).__name__}")
    if len(raw) == 0:
        raise InvalidInputError("path is empty")

    first = raw[0]
    if _is_scalar(first):
        return InterleavedPath(raw)
    if _is_vector_like(first):
        return PointListPath(raw)
    raise InvalidInputError("path entries must be numbers or 3-component points", index=0)


def flatten(points) -> np.ndarray:
    """Interleaved buffer of a point list."""
    return np.asarray(points, dtype=np.float64).reshape(-1)
