"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    """Enumeration of thermostat operating modes"""

    OFF = "off"
    HEAT = "heat"


@dataclass(frozen=True)
class TemperatureRange:
    """Value object representing an inclusive range of allowed temperatures."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"Range minimum {self.minimum} exceeds maximum {self.maximum}."
            )

    def __contains__(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


ALLOWED_RANGE = TemperatureRange(minimum=50, maximum=90)
"""Temperatures a thermostat will accept, in degrees Fahrenheit."""

DEFAULT_TEMPERATURE = 70
"""Temperature every new thermostat starts at."""
