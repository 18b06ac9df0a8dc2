"""Domain layer for HEARTH.

Contains the business rules: the `Thermostat` and `Room` entities, the value
objects they are built from, and the errors they raise. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `hearth.entrypoints`.
"""

from .errors import DomainError, TemperatureOutOfRangeError
from .room import Room
from .thermostat import Thermostat
from .value_objects import ALLOWED_RANGE, DEFAULT_TEMPERATURE, Mode, TemperatureRange

__all__ = [
    "ALLOWED_RANGE",
    "DEFAULT_TEMPERATURE",
    "DomainError",
    "Mode",
    "Room",
    "TemperatureOutOfRangeError",
    "TemperatureRange",
    "Thermostat",
]
