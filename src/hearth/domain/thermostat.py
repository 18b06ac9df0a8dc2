"""The thermostat entity.

A `Thermostat` owns a temperature and an operating mode. The temperature is
validated against `ALLOWED_RANGE` on every mutation: a rejected value raises
`TemperatureOutOfRangeError` and leaves the thermostat exactly as it was.
Mode transitions are unconditional and idempotent.
"""

import logging

from .errors import TemperatureOutOfRangeError
from .value_objects import ALLOWED_RANGE, DEFAULT_TEMPERATURE, Mode

logger = logging.getLogger(__name__)


class Thermostat:
    """A bounds-checked thermostat with an off/heat mode switch.

    New thermostats start at `DEFAULT_TEMPERATURE` with the mode set to
    `Mode.OFF`.

    Note: This is NOT thread-safe. Callers sharing an instance across threads
    must synchronize access themselves.
    """

    def __init__(self) -> None:
        self._temperature: int = DEFAULT_TEMPERATURE
        self._mode: Mode = Mode.OFF

    def __repr__(self) -> str:
        return f"Thermostat(temperature={self._temperature}, mode={self._mode.value})"

    # --- Temperature ---

    @property
    def temperature(self) -> int:
        """The current target temperature."""
        return self._temperature

    def set_temperature(self, value: int) -> None:
        """Set the target temperature.

        Args:
            value: The new temperature.

        Raises:
            TemperatureOutOfRangeError: If `value` is outside `ALLOWED_RANGE`.
                The current temperature is left unchanged.
        """
        if value not in ALLOWED_RANGE:
            raise TemperatureOutOfRangeError(
                value, ALLOWED_RANGE.minimum, ALLOWED_RANGE.maximum
            )
        logger.debug("Temperature %s -> %s", self._temperature, value)
        self._temperature = value

    def increase_temp(self) -> None:
        """Raise the temperature by one degree.

        Raises:
            TemperatureOutOfRangeError: If already at the maximum.
        """
        self.set_temperature(self._temperature + 1)

    def decrease_temp(self) -> None:
        """Lower the temperature by one degree.

        Raises:
            TemperatureOutOfRangeError: If already at the minimum.
        """
        self.set_temperature(self._temperature - 1)

    # --- Mode ---

    @property
    def mode(self) -> Mode:
        """The current operating mode."""
        return self._mode

    def turn_on(self) -> None:
        """Switch to `Mode.HEAT`."""
        self._set_mode(Mode.HEAT)

    def turn_off(self) -> None:
        """Switch to `Mode.OFF`."""
        self._set_mode(Mode.OFF)

    def _set_mode(self, mode: Mode) -> None:
        logger.debug("Mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode
