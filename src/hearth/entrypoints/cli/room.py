"""HEARTH room CLI: inspect and drive a room's thermostat.

Each invocation builds a fresh `Room` (nothing is persisted between runs),
optionally applies a sequence of steps to its thermostat, and prints the
resulting state.

Behavior
- State goes to **stdout** (plain ``NAME: temperature=T mode=M`` or JSON with
  ``--json``); human-oriented notices go to **stderr**.
- The room name defaults to ``HEARTH_ROOM_NAME`` (see `hearth.config`); a
  blank value falls back to the default name with a warning on stderr.

Failure modes
- Malformed step → usage error (exit 2).
- Step rejected by the thermostat → error line on stderr, state reached so far
  is still printed, exit 1. Later steps are not applied.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable

import click

from hearth import config
from hearth.domain import Room, TemperatureOutOfRangeError
from hearth.interfaces import TemperatureControl

from .helpers import Step, error, parse_steps, success, warn

logger = logging.getLogger(__name__)

STEP_OPERATIONS: dict[str, Callable[[TemperatureControl], None]] = {
    "on": lambda control: control.turn_on(),
    "off": lambda control: control.turn_off(),
    "up": lambda control: control.increase_temp(),
    "down": lambda control: control.decrease_temp(),
}


def _resolve_name(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | None,
) -> str:
    if value is not None:
        return value
    if config.room_name_is_blank():
        warn(
            f"{config.ROOM_NAME_ENV_VAR} is empty; "
            f"using {config.DEFAULT_ROOM_NAME!r}."
        )
    return config.get_room_name()


name_option = click.option(
    "--name",
    "name",
    default=None,
    callback=_resolve_name,
    help="Room name (defaults to $HEARTH_ROOM_NAME, then 'Living Room').",
)
json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the room state as a JSON object.",
)


def apply_step(control: TemperatureControl, step: Step) -> None:
    """Apply a single parsed step to a thermostat.

    Raises:
        TemperatureOutOfRangeError: If the step would leave the allowed range.
    """
    if step.value is not None:
        control.set_temperature(step.value)
    else:
        STEP_OPERATIONS[step.action](control)


def format_state(room: Room, as_json: bool = False) -> str:
    """Render a room's thermostat state for stdout."""
    thermostat = room.thermostat
    if as_json:
        return json.dumps(
            {
                "room": room.name,
                "temperature": thermostat.temperature,
                "mode": thermostat.mode.value,
            }
        )
    return (
        f"{room.name}: temperature={thermostat.temperature} "
        f"mode={thermostat.mode.value}"
    )


@click.group(name="room")
def room_cli() -> None:
    """Room and thermostat commands."""


@room_cli.command()
@name_option
@json_option
def show(name: str, as_json: bool) -> None:
    """Show the initial thermostat state of a room."""
    click.echo(format_state(Room(name), as_json))


@room_cli.command()
@name_option
@json_option
@click.argument("steps", nargs=-1, required=True, callback=parse_steps)
@click.pass_context
def run(ctx: click.Context, name: str, as_json: bool, steps: list[Step]) -> None:
    """Apply STEPS to a fresh room's thermostat, in order.

    STEPS are any of: on, off, up, down, set=N.
    """
    target = Room(name)
    logger.debug("Running %d step(s) on %r", len(steps), target)
    for index, step in enumerate(steps, start=1):
        try:
            apply_step(target.thermostat, step)
        except TemperatureOutOfRangeError as e:
            logger.info("Step %d (%s) rejected: %s", index, step, e)
            error(f"Step {index} ({step}) rejected: {e}")
            click.echo(format_state(target, as_json))
            ctx.exit(1)
        logger.debug("Step %d (%s) -> %r", index, step, target.thermostat)

    click.echo(format_state(target, as_json))
    success(f"Applied {len(steps)} step(s) to {target.name!r}.")
