"""Run log duplicated to the console and a log file.

Every notable event of a build is one line, written both to the console and
to a log file that is truncated when the run starts.
"""
from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from datetime import datetime
from typing import IO, TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class TeeStream:
    """Text sink forwarding every write to several streams."""

    def __init__(self, *streams: IO[str]) -> None:
        self.streams = streams

    def write(self, text: str) -> int:
        for stream in self.streams:
            stream.write(text)
        return len(text)

    def flush(self) -> None:
        for stream in self.streams:
            stream.flush()


def level_number(level: str) -> int:
    """Map a level name (``"INFO"``) to its numeric value."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def make_logger(sink: IO[str] | TeeStream, *, level: str = "INFO") -> Any:
    """Create a bound logger rendering one plain line per event to `sink`."""
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sink),  # type: ignore[arg-type]
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_number(level)),
    )


@contextmanager
def open_run_log(
    log_path: Path | None = None,
    *,
    level: str = "INFO",
    console: IO[str] | None = None,
) -> Iterator[Any]:
    """Open the run log for the duration of a build.

    Args:
        log_path: Log file, truncated on open. None logs to the console only.
        level: Minimum level written.
        console: Console stream (stdout by default).

    Yields:
        Bound logger writing to the console and the log file.
    """
    log_file: IO[str] | None = None
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_file = log_path.open("w", encoding="utf-8")

    streams: list[IO[str]] = [console if console is not None else sys.stdout]
    if log_file is not None:
        streams.append(log_file)
    sink = TeeStream(*streams)

    log = make_logger(sink, level=level)
    log.info("manifest_compiler_starting", log_file=str(log_path) if log_path else None)
    try:
        yield log
    finally:
        log.info("run_finished", ended_at=datetime.now().isoformat(timespec="seconds"))
        sink.flush()
        if log_file is not None:
            log_file.close()
