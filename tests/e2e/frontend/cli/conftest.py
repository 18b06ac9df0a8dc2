"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that drives a room's thermostat
through an accepted change and a rejected one, logging at every level from
both a HEARTH logger and a foreign "vendor.sensor" logger. Fixtures register
that command, build a CliRunner and isolate the filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from hearth.domain import Room, TemperatureOutOfRangeError
from hearth.entrypoints.cli.main import hearth

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log a short thermostat session the way a real run would."""
    logger = logging.getLogger("hearth.demo")
    room = Room("Demo Room")
    logger.debug("Demo start: %r.", room.thermostat)
    room.thermostat.increase_temp()
    logger.info("Demo room at %d.", room.thermostat.temperature)
    try:
        room.thermostat.set_temperature(95)
    except TemperatureOutOfRangeError as e:
        logger.warning("Rejected: %s", e)
    logger.error("Demo error.")
    logger.critical("Demo critical.")
    sensor = logging.getLogger("vendor.sensor")
    sensor.debug("Vendor sensor debug.")
    sensor.info("Vendor sensor info.")
    sensor.warning("Vendor sensor warning.")
    # after the last WARNING, so only a forced flush writes it
    room.thermostat.turn_on()


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `hearth` for the duration of a test."""
    hearth.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(hearth, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side-effects (flight recorder logs) to a temp dir."""
    with runner.isolated_filesystem():
        yield
