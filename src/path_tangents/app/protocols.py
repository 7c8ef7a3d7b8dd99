from typing import Protocol, runtime_checkable

import numpy as np


# ------------- Tangents --------------------
@runtime_checkable
class IndexedVec3(Protocol):
    """
    Responsibilities:
      • Address N 3D vectors by position, whatever the storage.
      • get() returns a fresh float64 copy; set() writes in place.
    """

    def __len__(self) -> int: ...
    def get(self, i: int) -> np.ndarray: ...
    def set(self, i: int, v) -> None: ...


@runtime_checkable
class TangentExecutor(Protocol):
    """
    Responsibilities:
      • Run the per-index tangent loop over src, writing every slot of out.
      • Each index is independent; order of evaluation is free.
    """

    def run(self, src: IndexedVec3, out: IndexedVec3, closed: bool) -> None: ...


# ------------- Observability --------------------
class TangentHooks(Protocol):
    def compute_start(self, *, kind, n, closed): ...
    def compute_end(self, *, kind, n, closed, degenerate, wall_ms): ...
    def error(self, *, reason: str, index, **kw): ...
