# path_tangents/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from path_tangents.app.protocols import TangentExecutor, TangentHooks
from path_tangents.config.models import AppModel
from path_tangents.io.tangent_logging import TangentLogging  # JSON logs
from path_tangents.runtime.executor_factory import make_executor
from path_tangents.runtime.hooks import NoopHooks
from path_tangents.services.tangents import TangentService


@dataclass
class App:
    config: AppModel
    executor: TangentExecutor
    hooks: TangentHooks
    service: TangentService


def build(cfg: AppModel | Mapping | None = None, *, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        model = AppModel()
    else:
        model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    # 1) Executor
    executor = make_executor(model.executor)

    # 2) Hooks
    hooks = (
        TangentLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 3) Service
    service = TangentService(executor=executor, hooks=hooks, closed_default=model.tangents.closed)

    return App(model, executor, hooks, service)
