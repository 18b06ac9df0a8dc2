"""HEARTH

A small, strictly validated domain model of a room and its thermostat,
with a command-line front end for driving a room through a sequence of
thermostat operations.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
