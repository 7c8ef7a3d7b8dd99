# runtime/executor_factory.py
from collections.abc import Callable

from path_tangents.app.protocols import TangentExecutor
from path_tangents.config.models import (
    ExecutorSerialModel,
    ExecutorThreadedModel,
    ExecutorUnion,
)
from path_tangents.domain.tangents.tangents_executors import SerialExecutor, ThreadedExecutor

ExecutorFactory = Callable[[ExecutorUnion], TangentExecutor]

_executor_registry: dict[str, ExecutorFactory] = {}


def register_executor(kind: str):
    def deco(fn: ExecutorFactory):
        _executor_registry[kind] = fn
        return fn

    return deco


def make_executor(cfg: ExecutorUnion) -> TangentExecutor:
    try:
        factory = _executor_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown executor kind {cfg.kind!r}")
    return factory(cfg)


@register_executor("serial")
def _make_serial(cfg: ExecutorSerialModel):
    return SerialExecutor()


@register_executor("threaded")
def _make_threaded(cfg: ExecutorThreadedModel):
    return ThreadedExecutor(workers=cfg.workers, min_chunk=cfg.min_chunk)
