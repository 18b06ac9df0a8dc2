"""Structural interface for anything that behaves like a thermostat."""

from typing import Protocol

from hearth.domain.value_objects import Mode


class TemperatureControl(Protocol):
    """Capabilities expected of a thermostat-like object.

    Conformance is structural and checked by the type checker; no runtime
    registration or inheritance is required.
    """

    @property
    def temperature(self) -> int:
        """The current target temperature."""

    @property
    def mode(self) -> Mode:
        """The current operating mode."""

    def set_temperature(self, value: int) -> None:
        """Set the target temperature, rejecting out-of-range values."""

    def increase_temp(self) -> None:
        """Raise the temperature by one degree."""

    def decrease_temp(self) -> None:
        """Lower the temperature by one degree."""

    def turn_on(self) -> None:
        """Switch heating on."""

    def turn_off(self) -> None:
        """Switch heating off."""
