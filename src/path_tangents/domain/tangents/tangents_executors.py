import math
from concurrent.futures import ThreadPoolExecutor as _Pool

from path_tangents.app.protocols import IndexedVec3
from path_tangents.domain.tangents.tangents_core import fill_tangents


def partition(n: int, parts: int, min_chunk: int = 1) -> list[tuple[int, int]]:
    """Split [0, n) into at most `parts` contiguous ranges of >= min_chunk indices."""
    if n <= 0:
        return []
    parts = max(1, min(parts, n // max(1, min_chunk)))
    step = math.ceil(n / parts)
    return [(s, min(s + step, n)) for s in range(0, n, step)]


class SerialExecutor:
    def run(self, src: IndexedVec3, out: IndexedVec3, closed: bool) -> None:
        fill_tangents(src, out, closed)


class ThreadedExecutor:
    """
    Fill disjoint index ranges from a thread pool.
    Every output slot is written by exactly one task, so no locking is needed.
    """

    def __init__(self, workers: int = 4, min_chunk: int = 1024):
        if workers < 1 or min_chunk < 1:
            raise ValueError("workers and min_chunk must be >= 1")
        self.workers, self.min_chunk = workers, min_chunk

    def run(self, src: IndexedVec3, out: IndexedVec3, closed: bool) -> None:
        ranges = partition(len(src), self.workers, self.min_chunk)
        if len(ranges) <= 1:
            fill_tangents(src, out, closed)
            return
        with _Pool(max_workers=self.workers) as pool:
            futures = [pool.submit(fill_tangents, src, out, closed, a, b) for a, b in ranges]
            for f in futures:
                f.result()
