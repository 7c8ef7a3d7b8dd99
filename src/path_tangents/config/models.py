from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class TangentsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    closed: bool = False  # default when a call does not say


# ----------------- EXECUTORS ---------------------


class ExecutorSerialModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["serial"] = "serial"


class ExecutorThreadedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["threaded"] = "threaded"
    workers: int = Field(default=4, ge=1)
    min_chunk: int = Field(default=1024, ge=1)  # indices per task, at least


ExecutorUnion = Annotated[
    ExecutorSerialModel | ExecutorThreadedModel, Field(discriminator="kind")
]


# ------------------------------------------------------------------


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "path-tangents"
    run_id: str = "local"
    log: LogModel = LogModel()
    tangents: TangentsModel = TangentsModel()
    executor: ExecutorUnion = Field(default_factory=ExecutorSerialModel)
