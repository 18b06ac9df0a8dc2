"""Parsing of thermostat steps given on the command line.

A step is one thermostat operation: ``on``, ``off``, ``up``, ``down`` or
``set=N``. Names are case-insensitive; steps may be passed as separate
arguments or as one comma/space separated string.
"""

from dataclasses import dataclass

import click

from .tokens import split_tokens

SIMPLE_ACTIONS = ("on", "off", "up", "down")
SET_ACTION = "set"


@dataclass(frozen=True)
class Step:
    """A single parsed thermostat operation."""

    action: str
    value: int | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.action
        return f"{self.action}={self.value}"


def parse_step(item: str) -> Step:
    """Parse one step token.

    Raises:
        click.BadParameter: If the token names no known action, or ``set``
            is missing an integer value.
    """
    action, sep, raw_value = item.strip().partition("=")
    action = action.lower()
    if action in SIMPLE_ACTIONS and not sep:
        return Step(action)
    if action == SET_ACTION and sep:
        try:
            return Step(action, int(raw_value))
        except ValueError as e:
            raise click.BadParameter(
                f"Expected an integer temperature, got {item!r}"
            ) from e
    choices = ", ".join([*SIMPLE_ACTIONS, f"{SET_ACTION}=N"])
    raise click.BadParameter(f"Unknown step {item!r}; expected one of: {choices}")


def parse_steps(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> list[Step]:
    """Click callback that turns raw step arguments into `Step` objects.

    Returns:
        list[Step]: The steps, in the order given.

    Raises:
        click.BadParameter: On the first malformed step.
    """
    return [parse_step(item) for item in split_tokens(value)]
