"""Global pytest fixtures for HEARTH."""

import pytest

from hearth.domain import Room, Thermostat

# pylint: disable=redefined-outer-name


@pytest.fixture
def thermostat() -> Thermostat:
    """A freshly constructed thermostat (70 degrees, off)."""
    return Thermostat()


@pytest.fixture
def room() -> Room:
    """A freshly constructed room named 'Living Room'."""
    return Room("Living Room")
