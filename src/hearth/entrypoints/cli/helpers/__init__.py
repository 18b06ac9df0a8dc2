"""Helpers shared by the HEARTH CLI commands."""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .step_parser import Step, parse_steps

__all__ = ["Step", "error", "parse_log_level", "parse_steps", "success", "warn"]
