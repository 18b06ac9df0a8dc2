"""Configuration utilities for HEARTH.

This module centralizes small helpers and constants related to application configuration.
"""

import os

ROOM_NAME_ENV_VAR = "HEARTH_ROOM_NAME"  # pragma: no mutate
DEFAULT_ROOM_NAME = "Living Room"  # pragma: no mutate


def get_room_name() -> str:
    """Get the default room name from the environment.

    Returns:
        The value of the `HEARTH_ROOM_NAME` environment variable, or
        `DEFAULT_ROOM_NAME` when it is unset or empty.
    """
    if not (name := os.environ.get(ROOM_NAME_ENV_VAR, "").strip()):
        return DEFAULT_ROOM_NAME
    return name


def room_name_is_blank() -> bool:
    """Return True if `HEARTH_ROOM_NAME` is set but holds only whitespace."""
    value = os.environ.get(ROOM_NAME_ENV_VAR)
    return value is not None and not value.strip()
