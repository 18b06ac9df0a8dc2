"""Logging setup for the HEARTH CLI.

Everything the ``hearth`` command configures is described by one
`LoggingSettings` value, built from the top-level CLI options, and applied
by `configure_logging`:

- a Rich console handler on stderr whose threshold follows ``-v``/``-q``;
- an optional "flight recorder" that keeps a run's DEBUG records (thermostat
  changes included) in memory and writes them to a file once something
  worth a WARNING happens;
- per-logger level overrides from ``-L NAME=LEVEL``.

`log_startup` then records which room and thermostat limits the run works
with, so a flushed flight-recorder file is self-describing.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from hearth.domain import ALLOWED_RANGE, DEFAULT_TEMPERATURE

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "hearth"
BASE_LEVEL = logging.WARNING
LEVEL_STEP = 10

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Console level after applying ``-v``/``-q`` counts to WARNING.

    Each ``-v`` lowers the threshold one level, each ``-q`` raises it one;
    the result is clamped to DEBUG..CRITICAL.
    """
    level = BASE_LEVEL + LEVEL_STEP * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True)
class LoggingSettings:
    """What the CLI asked for, before any handler exists.

    A `log_path` of None means the flight recorder is off.
    """

    level: int = BASE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """Effective console threshold (debug mode always shows DEBUG)."""
        return logging.DEBUG if self.debug else self.level

    @property
    def flight_recorder(self) -> bool:
        """Whether records are buffered for the log file."""
        return self.log_path is not None


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag console records that do not come from HEARTH.

    Sets ``record.prefix`` to the top-level logger name in brackets for
    foreign loggers ("vendor.sensor" -> "[vendor]") and to "" for ``hearth.*``.
    Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def console_handler(settings: LoggingSettings) -> RichHandler:
    """Build the stderr handler.

    Debug mode adds timestamps, logger names and clickable source paths;
    otherwise lines are short and foreign records are prefixed.
    """
    color_system: ColorSystem | None = "auto" if settings.color else None
    handler = RichHandler(
        level=settings.console_level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Buffer up to `capacity` records and dump them to `path` on WARNING.

    The file is truncated when the handler is built, so it only ever holds
    the most recent run. With `flush_on_close` whatever is still buffered is
    written at shutdown as well.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the handlers described by `settings` on the root logger.

    Any handlers from a previous configuration are replaced.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(
            flight_recorder(
                settings.log_path,
                capacity=settings.capacity,
                flush_on_close=settings.force_flush,
            )
        )

    # root passes everything; each handler applies its own threshold
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in settings.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    *,
    app_version: str,
    room_name: str,
) -> None:
    """Log a one-line INFO summary of the run, then DEBUG diagnostics.

    The summary names the default room and the thermostat limits in force;
    the diagnostics cover the interpreter, library versions, handlers, the
    flight recorder and per-logger overrides.
    """
    logger.info(
        "HEARTH %s - room=%r, range=%d-%d, console=%s, flight-recorder=%s",
        app_version,
        room_name,
        ALLOWED_RANGE.minimum,
        ALLOWED_RANGE.maximum,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug(
        "Thermostat: start=%d, allowed=%d-%d",
        DEFAULT_TEMPERATURE,
        ALLOWED_RANGE.minimum,
        ALLOWED_RANGE.maximum,
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s, CWD: %s", os.getpid(), Path.cwd())
    logger.debug("Click: %s, Rich: %s", version("click"), version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()},
    )
