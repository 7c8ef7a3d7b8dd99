import numpy as np
import pytest

from path_tangents.app.protocols import IndexedVec3, TangentExecutor
from path_tangents.domain.paths import random_path
from path_tangents.domain.tangents.tangents_accessors import FlatBufferAccessor, PointListAccessor
from path_tangents.domain.tangents.tangents_core import compute_tangents
from path_tangents.domain.tangents.tangents_executors import (
    SerialExecutor,
    ThreadedExecutor,
    partition,
)


def test_partition_covers_range_without_overlap():
    ranges = partition(10, 4)
    assert ranges[0][0] == 0 and ranges[-1][1] == 10
    covered = [i for a, b in ranges for i in range(a, b)]
    assert covered == list(range(10))


def test_partition_respects_min_chunk():
    assert partition(100, 8, min_chunk=1024) == [(0, 100)]
    assert len(partition(4096, 8, min_chunk=1024)) == 4
    assert partition(0, 4) == []


def test_accessors_satisfy_protocol():
    assert isinstance(FlatBufferAccessor(np.zeros(3)), IndexedVec3)
    assert isinstance(PointListAccessor([np.zeros(3)]), IndexedVec3)
    assert isinstance(SerialExecutor(), TangentExecutor)
    assert isinstance(ThreadedExecutor(), TangentExecutor)


@pytest.mark.parametrize("closed", [True, False])
def test_threaded_matches_serial(closed):
    pts = random_path(5_000, np.random.default_rng(21))
    serial = compute_tangents(pts.reshape(-1), closed, executor=SerialExecutor())
    threaded = compute_tangents(
        pts.reshape(-1), closed, executor=ThreadedExecutor(workers=4, min_chunk=500)
    )
    assert np.array_equal(serial, threaded)

    as_list = compute_tangents(pts.tolist(), closed, executor=ThreadedExecutor(3, min_chunk=7))
    assert np.allclose(np.stack(as_list).reshape(-1), serial)


def test_threaded_small_path_runs_inline():
    t = compute_tangents([[0, 0, 0], [0, 1, 0]], executor=ThreadedExecutor(workers=8))
    assert np.allclose(t[0], [0, 1, 0]) and np.allclose(t[1], [0, 1, 0])


def test_threaded_rejects_bad_sizes():
    with pytest.raises(ValueError):
        ThreadedExecutor(workers=0)
    with pytest.raises(ValueError):
        ThreadedExecutor(min_chunk=0)
