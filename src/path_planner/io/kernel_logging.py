# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, fields, is_dataclass

from path_planner.io.business_events import to_biz_event
from path_planner.io.recorder import Recorder
from path_planner.engine.hooks import NoopHooks

LOGGER_NAME = "path_planner"


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
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def initialize_logging(level: str = "INFO", stream=None) -> logging.Logger:
    """
    One-time setup of the package logger. Safe to call more than once: a logger
    that already has handlers is returned untouched apart from its level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class KernelLogging(NoopHooks):
    """
    One place to shape and emit structured logs for both engine and business events.
    """

    BUSINESS = {
        "PathStarted",
        "PathCleared",
        "PathPlanned",
        "DebugModeChanged",
        "HighlightsChanged",
    }

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or logging.getLogger(f"{LOGGER_NAME}.kernel")
        if logger is None:
            initialize_logging(level)
        self._processed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _shape_event(self, ev, want_name: bool = False):
        # Flatten the event dataclass; nested dataclasses (pixels, sizes) become dicts
        name = type(ev).__name__
        base = {"t": getattr(ev, "t", None)}
        if is_dataclass(ev):
            for f in fields(ev):
                if f.name == "t":
                    continue
                v = getattr(ev, f.name)
                base[f.name] = asdict(v) if is_dataclass(v) else v
        return (name, base) if want_name else base

    # --------------------------------------------------------

    # engine lifecycle

    def run_start(self, *, qsize: int):
        if self.debug:
            self._emit("DEBUG", "run_start", qsize=qsize)

    def run_end(self, *, processed: int, **extra):
        if self.debug:
            self._emit("DEBUG", "run_end", processed=processed, **extra)

    def schedule(self, ev, *, now: float, qsize: int):
        if self.debug and (qsize % self.sample_every) == 0:
            self._emit("DEBUG", "schedule", **self._shape_event(ev), now=now, qsize=qsize)

    def dispatch_start(self, ev, *, seq: int, qsize: int, handlers: int):
        self._processed += 1
        name, extra = self._shape_event(ev, want_name=True)
        business = name in self.BUSINESS
        level = "INFO" if business else ("DEBUG" if self.debug else None)
        if level:
            self._emit(level, name, **extra, seq=seq, qsize=qsize, handlers=handlers)
        if business:
            self.biz(name, extra, seq=seq)

    def dispatch_end(self, ev, *, out_events: int, ms: float, **extra):
        if self.debug and (self._processed % self.sample_every) == 0:
            self._emit("DEBUG", "dispatch_done", out_events=out_events, ms=ms, **extra)

    def error(self, ev, *, reason: str, **extra):
        name, shaped = self._shape_event(ev, want_name=True)
        self._emit("ERROR", "kernel_error", event=name, reason=reason, **shaped, **extra)

    # ------------- Business Event Reporting --------------------------

    def biz(self, name: str, fields_: dict, *, seq: int):
        if self.recorder:
            self.recorder.emit(to_biz_event(self.run_id, name, seq, fields_))
