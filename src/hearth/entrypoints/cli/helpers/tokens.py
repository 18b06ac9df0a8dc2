"""Normalization of repeatable, comma/space separated CLI values."""

import re

_SEPARATORS = re.compile(r"[,\s]+")


def split_tokens(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an input value into a flat list of items.

    Accepts either a single string (e.g. from an environment variable) or the
    tuple Click builds for repeatable options and arguments. Every string is
    split on commas and whitespace; empty fragments are dropped.

    Args:
        value: The option or argument value from Click.

    Returns:
        list[str]: A flat list of non-empty item strings.
    """
    parts = [value] if isinstance(value, str) else list(value)
    return [s for part in parts for s in _SEPARATORS.split(part) if s]
