"""The room entity."""

from .thermostat import Thermostat


class Room:
    """A named room that owns exactly one thermostat.

    The thermostat is created with the room and is never replaced or shared;
    all thermostat operations go through `room.thermostat`.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._thermostat = Thermostat()

    def __repr__(self) -> str:
        return f"Room(name={self._name!r})"

    @property
    def name(self) -> str:
        """The room's name."""
        return self._name

    @property
    def thermostat(self) -> Thermostat:
        """The thermostat owned by this room."""
        return self._thermostat
