# io/tangent_logging.py
import json
import logging
import sys

from path_tangents.runtime.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="path_tangents", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class TangentLogging(NoopHooks):
    """
    Structured JSON logs for tangent computations.
    compute_end at INFO; compute_start only in debug mode; bad input at ERROR.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def compute_start(self, *, kind, n, closed):
        if self.debug:
            self._emit("DEBUG", "compute_start", kind=kind, n=n, closed=closed)

    def compute_end(self, *, kind, n, closed, degenerate, wall_ms):
        self._emit(
            "INFO",
            "compute_end",
            kind=kind,
            n=n,
            closed=closed,
            degenerate=degenerate,
            wall_ms=round(wall_ms, 3),
        )

    def error(self, *, reason: str, index=None, **extra):
        self._emit("ERROR", "invalid_input", reason=reason, index=index, **extra)
