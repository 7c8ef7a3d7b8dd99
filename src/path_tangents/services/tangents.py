# services/tangents.py
import time

import numpy as np

from path_tangents.app.errors import InvalidInputError
from path_tangents.app.protocols import TangentExecutor, TangentHooks
from path_tangents.domain.entities.path import as_path
from path_tangents.domain.tangents.tangents_core import compute_tangents
from path_tangents.runtime.hooks import NoopHooks


def count_degenerate(tangents) -> int:
    t = np.asarray(tangents, dtype=np.float64).reshape(-1, 3)
    return int(np.count_nonzero(~t.any(axis=1)))


class TangentService:
    """Configured entry point: default closed flag, executor choice, hooks."""

    def __init__(
        self,
        executor: TangentExecutor | None = None,
        hooks: TangentHooks | None = None,
        closed_default: bool = False,
    ):
        self.executor = executor
        self.hooks = hooks or NoopHooks()
        self.closed_default = closed_default

    def compute(self, path, closed: bool | None = None):
        closed = self.closed_default if closed is None else closed
        try:
            p = as_path(path)
        except InvalidInputError as exc:
            self.hooks.error(reason=exc.reason, index=exc.index)
            raise

        self.hooks.compute_start(kind=p.kind, n=len(p), closed=closed)
        t0 = time.perf_counter()
        out = compute_tangents(p, closed, executor=self.executor)
        wall_ms = (time.perf_counter() - t0) * 1000.0
        self.hooks.compute_end(
            kind=p.kind,
            n=len(p),
            closed=closed,
            degenerate=count_degenerate(out),
            wall_ms=wall_ms,
        )
        return out
