"""Helpers for parsing logger-level CLI options.

Options of the form NAME=LEVEL may be repeated or given as one comma/space
separated string (as they arrive from the ``HEARTH_LOGGER_LEVEL`` environment
variable). They are merged over `DEFAULT_LIB_LEVELS`.
"""

import logging

import click

from .tokens import split_tokens

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Args:
        ctx: Click context (unused).
        param: Click parameter (unused).
        value: The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.
        Later entries override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_tokens(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        if not isinstance(lvl := logging.getLevelName(level_str.strip().upper()), int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
