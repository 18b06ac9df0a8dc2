"""Interfaces (ports) describing capabilities the rest of HEARTH relies on."""

from .temperature_control import TemperatureControl

__all__ = ["TemperatureControl"]
