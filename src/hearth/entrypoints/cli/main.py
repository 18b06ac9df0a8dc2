"""HEARTH CLI entry point.

Defines the top-level ``hearth`` command (via Click-Extra). The group itself
only turns its options into a `LoggingSettings` and installs it; the
``room`` subcommands do the work.

Notes
- The CLI version is sourced from `hearth.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Every option can also be set through a ``HEARTH_*`` environment variable.

Examples
    $ hearth --version
    $ hearth room run on up up
    $ hearth -v room run --name Kitchen --json set=68
    $ hearth --force-flush --log-path run.log room run set=95
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from hearth import __version__, config
from hearth.logging import (
    LoggingSettings,
    configure_logging,
    log_startup,
    verbosity_level,
)

from .helpers import parse_log_level
from .room import room_cli

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("hearth", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """HEARTH command-line interface.

    HEARTH models a room and its thermostat. The thermostat keeps its target
    temperature within 50-90 degrees and switches between off and heat; the
    commands here let you inspect that state and drive it step by step.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show more on stderr: -v adds INFO (startup summary), -vv adds DEBUG (every thermostat change).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show less on stderr: -q hides warnings, -qq hides errors too.",
)
@click.option(
    "--debug/--no-debug",
    help="Log everything to stderr with timestamps, logger names and source locations.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes a run's log to.",
    default=DEFAULT_LOG_PATH,
    envvar="HEARTH_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="HEARTH_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="How many log records of one run the flight recorder holds.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    help=(
        "Keep this run's log, down to each DEBUG thermostat change, in memory "
        "and write it to --log-path once a WARNING is logged. Verbosity flags "
        "do not affect it."
    ),
    default=True,
    envvar="HEARTH_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    help=(
        "Always write the flight recorder to --log-path when the command ends, "
        "so even a clean `room run` leaves a record of every step."
    ),
    default=False,
    show_default=True,
    envvar="HEARTH_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Minimum level for one logger, as NAME=LEVEL; affects stderr and the "
        "flight recorder alike. E.g. -L hearth.domain=INFO drops per-degree "
        "thermostat changes. Repeatable."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    envvar="HEARTH_LOGGER_LEVEL",
    show_envvar=True,
)
@clickx.pass_context
def hearth(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """HEARTH command-line interface."""
    settings = LoggingSettings(
        level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(
        logger,
        settings,
        handlers,
        app_version=__version__,
        room_name=config.get_room_name(),
    )
    ctx.call_on_close(logging.shutdown)


hearth.add_command(room_cli)
