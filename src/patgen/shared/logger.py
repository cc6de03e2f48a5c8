from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, TextIO


class RunLogger:
    """Run logger for pattern generation with three sinks.

    - console   : INFO+ (or ``min_level``), human-readable
    - log_file  : INFO+, same lines as the console, persisted
    - trace_file: everything, including per-worker debug lines

    Library modules keep using ``logging.getLogger(__name__)``; call
    ``install_stdlib_bridge`` to route their records here.
    """

    LEVELS: dict[str, int] = {
        "TRACE": -1,
        "DEBUG": 0,
        "INFO": 1,
        "METRIC": 1,
        "WARN": 2,
        "ERROR": 3,
    }

    def __init__(
        self,
        log_file: str | Path | None = None,
        trace_file: str | Path | None = None,
        console: bool = True,
        min_level: str = "INFO",
    ) -> None:
        self.console = console
        self.min_level = self.LEVELS.get(min_level.upper(), 1)
        self.log_path = Path(log_file) if log_file else None
        self.trace_path = Path(trace_file) if trace_file else None
        self._start = time.perf_counter()
        self._timings: dict[str, float] = {}
        self._saved_levels: dict[str, int] = {}
        self._log: TextIO | None = self._open(self.log_path, "patgen log")
        self._trace: TextIO | None = self._open(self.trace_path, "patgen trace")

    @staticmethod
    def _open(path: Path | None, title: str) -> TextIO | None:
        if path is None:
            return None
        path.parent.mkdir(parents=True, exist_ok=True)
        f = open(path, "w", encoding="utf-8", buffering=1)
        f.write(f"# {title} {time.strftime('%Y-%m-%d %H:%M:%S')}\n")
        return f

    def _write(self, line: str, persist: bool, show: bool) -> None:
        if show and self.console:
            print(line, flush=True)
        if persist and self._log:
            self._log.write(line + "\n")
        if self._trace:
            self._trace.write(line + "\n")

    def _emit(self, level: str, msg: str) -> None:
        level_int = self.LEVELS.get(level, 1)
        elapsed = time.perf_counter() - self._start
        line = f"[{elapsed:8.2f}s] {level:6} | {msg}"
        self._write(line, persist=level_int >= 1, show=level_int >= self.min_level)

    def trace(self, msg: str) -> None:
        self._emit("TRACE", msg)

    def debug(self, msg: str) -> None:
        self._emit("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._emit("INFO", msg)

    def warn(self, msg: str) -> None:
        self._emit("WARN", msg)

    def error(self, msg: str) -> None:
        self._emit("ERROR", msg)

    def section(self, title: str) -> None:
        sep = "=" * 72
        for line in ("", sep, f"  {title}", sep):
            self._write(line, persist=True, show=True)

    def metric(self, name: str, value: Any, unit: str = "") -> None:
        vstr = f"{value:.3f}" if isinstance(value, float) else str(value)
        self._emit("METRIC", f"{name} = {vstr}{' ' + unit if unit else ''}")

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - t0
            self._timings[name] = elapsed
            self._emit("METRIC", f"timer:{name} = {elapsed:.3f}s")

    def summary(self) -> None:
        self.section("RUN SUMMARY")
        self.info(f"Total wall time: {time.perf_counter() - self._start:.2f}s")
        for name, elapsed in sorted(self._timings.items(), key=lambda x: -x[1]):
            self.info(f"  {name:<40} {elapsed:>8.3f}s")
        if self.log_path:
            self.info(f"Info log : {self.log_path}")
        if self.trace_path:
            self.info(f"Trace log: {self.trace_path}")

    def install_stdlib_bridge(self, root_logger: str = "", level: int = logging.INFO) -> None:
        handler = _BridgeHandler(self)
        handler.setLevel(level)
        root = logging.getLogger(root_logger)
        if any(isinstance(h, _BridgeHandler) for h in root.handlers):
            return
        self._saved_levels[root_logger] = root.level
        root.setLevel(min(root.level or logging.DEBUG, level))
        root.addHandler(handler)

    def remove_stdlib_bridge(self, root_logger: str = "") -> None:
        root = logging.getLogger(root_logger)
        for h in [h for h in root.handlers if isinstance(h, _BridgeHandler) and h.run_logger is self]:
            root.removeHandler(h)
        if root_logger in self._saved_levels:
            root.setLevel(self._saved_levels.pop(root_logger))

    def close(self) -> None:
        for f in (self._log, self._trace):
            if f:
                f.close()
        self._log = self._trace = None

    def __enter__(self) -> RunLogger:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class _BridgeHandler(logging.Handler):
    _MAP = {
        logging.DEBUG: "trace",
        logging.INFO: "info",
        logging.WARNING: "warn",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def __init__(self, run_logger: RunLogger) -> None:
        super().__init__()
        self.run_logger = run_logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            getattr(self.run_logger, self._MAP.get(record.levelno, "info"))(
                f"[{record.name}] {msg}"
            )
        except Exception:
            self.handleError(record)
