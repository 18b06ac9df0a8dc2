"""Unit tests for the Thermostat entity."""

import logging

import pytest

from hearth.domain import Mode, TemperatureOutOfRangeError, Thermostat

# pylint: disable=redefined-outer-name


# ============================================================================
#                               Construction
# ============================================================================


def test_new_thermostat_defaults():
    """A new thermostat starts at 70 degrees and off."""
    thermostat = Thermostat()
    assert thermostat.temperature == 70
    assert thermostat.mode is Mode.OFF


def test_instances_do_not_share_state():
    """Mutating one thermostat leaves another untouched."""
    first, second = Thermostat(), Thermostat()
    first.set_temperature(55)
    first.turn_on()
    assert second.temperature == 70
    assert second.mode is Mode.OFF


def test_repr(thermostat):
    """repr shows temperature and mode."""
    assert repr(thermostat) == "Thermostat(temperature=70, mode=off)"


@pytest.mark.parametrize("attribute", ["temperature", "mode"])
def test_state_is_read_only(thermostat, attribute):
    """State can only change through the thermostat's operations."""
    with pytest.raises(AttributeError):
        setattr(thermostat, attribute, None)


# ============================================================================
#                             set_temperature
# ============================================================================


def test_set_temperature_valid(thermostat):
    """An in-range value is stored."""
    thermostat.set_temperature(72)
    assert thermostat.temperature == 72


@pytest.mark.parametrize("value", [50, 90])
def test_set_temperature_accepts_bounds(thermostat, value):
    """Both endpoints of the allowed range are accepted."""
    thermostat.set_temperature(value)
    assert thermostat.temperature == value


@pytest.mark.parametrize("value", [45, 49, 91, 100, 200, -1, 0])
def test_set_temperature_out_of_range_raises(thermostat, value):
    """Out-of-range values raise and leave the temperature unchanged."""
    with pytest.raises(TemperatureOutOfRangeError, match="out of range") as exc_info:
        thermostat.set_temperature(value)
    assert exc_info.value.value == value
    assert thermostat.temperature == 70


def test_rejected_value_keeps_previous_valid_value(thermostat):
    """A failed set keeps the last accepted value, not the default."""
    thermostat.set_temperature(85)
    with pytest.raises(TemperatureOutOfRangeError):
        thermostat.set_temperature(100)
    assert thermostat.temperature == 85


def test_set_temperature_does_not_change_mode(thermostat):
    """Temperature changes never touch the mode."""
    thermostat.turn_on()
    thermostat.set_temperature(60)
    assert thermostat.mode is Mode.HEAT


def test_set_temperature_logs_change(thermostat, caplog):
    """Accepted changes are logged at DEBUG on the domain logger."""
    with caplog.at_level(logging.DEBUG, logger="hearth.domain.thermostat"):
        thermostat.set_temperature(68)
    assert "Temperature 70 -> 68" in caplog.text


# ============================================================================
#                         increase_temp / decrease_temp
# ============================================================================


def test_increase_temp_by_one(thermostat):
    """increase_temp adds one degree."""
    before = thermostat.temperature
    thermostat.increase_temp()
    assert thermostat.temperature - before == 1


def test_decrease_temp_by_one(thermostat):
    """decrease_temp removes one degree."""
    before = thermostat.temperature
    thermostat.decrease_temp()
    assert thermostat.temperature - before == -1


def test_increase_temp_at_maximum_raises(thermostat):
    """At 90, increasing fails and the temperature stays at 90."""
    thermostat.set_temperature(90)
    with pytest.raises(TemperatureOutOfRangeError, match="91"):
        thermostat.increase_temp()
    assert thermostat.temperature == 90


def test_decrease_temp_at_minimum_raises(thermostat):
    """At 50, decreasing fails and the temperature stays at 50."""
    thermostat.set_temperature(50)
    with pytest.raises(TemperatureOutOfRangeError, match="49"):
        thermostat.decrease_temp()
    assert thermostat.temperature == 50


def test_walk_up_to_maximum(thermostat):
    """Twenty increments from 70 reach exactly 90; the next one fails."""
    for _ in range(20):
        thermostat.increase_temp()
    assert thermostat.temperature == 90
    with pytest.raises(TemperatureOutOfRangeError):
        thermostat.increase_temp()


# ============================================================================
#                                   Mode
# ============================================================================


def test_turn_on_changes_mode_from_off_to_heat(thermostat):
    """turn_on moves the mode from off to heat."""
    assert thermostat.mode is Mode.OFF
    thermostat.turn_on()
    assert thermostat.mode is Mode.HEAT


def test_turn_on_does_not_change_temperature(thermostat):
    """turn_on never alters the temperature."""
    thermostat.turn_on()
    assert thermostat.temperature == 70


def test_turn_off_changes_mode_from_heat_to_off(thermostat):
    """turn_off moves the mode from heat to off."""
    thermostat.turn_on()
    thermostat.turn_off()
    assert thermostat.mode is Mode.OFF


def test_turn_off_does_not_change_temperature(thermostat):
    """turn_off never alters the temperature."""
    thermostat.set_temperature(64)
    thermostat.turn_on()
    thermostat.turn_off()
    assert thermostat.temperature == 64


def test_turn_on_is_idempotent(thermostat):
    """Calling turn_on twice leaves the mode at heat after each call."""
    thermostat.turn_on()
    assert thermostat.mode is Mode.HEAT
    thermostat.turn_on()
    assert thermostat.mode is Mode.HEAT


def test_turn_off_is_idempotent(thermostat):
    """turn_off on an already-off thermostat keeps it off."""
    thermostat.turn_off()
    thermostat.turn_off()
    assert thermostat.mode is Mode.OFF


def test_mode_is_off_or_heat(thermostat):
    """The mode is always one of the two defined values."""
    for operation in (thermostat.turn_on, thermostat.turn_off, thermostat.turn_on):
        operation()
        assert thermostat.mode in (Mode.OFF, Mode.HEAT)


def test_temperature_within_range_after_set(thermostat):
    """Compound check: a set value lies strictly between 60 and 80."""
    thermostat.set_temperature(75)
    assert 60 < thermostat.temperature < 80


def test_temperature_parity_predicate(thermostat):
    """Custom predicate on the stored value."""
    thermostat.set_temperature(68)
    assert thermostat.temperature % 2 == 0
