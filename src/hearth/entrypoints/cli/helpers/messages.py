"""Terminal message helpers for the HEARTH CLI.

Small helpers for rendering user-visible status lines with emoji→ASCII
fallbacks. Messages go to stderr so stdout only ever carries room state,
which keeps `hearth room run --json` pipeable.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call, so a redirected or re-encoded
    stderr is always honoured.

    Args:
        character: A single Unicode character to check (e.g., "⚠️", "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Warning marker: "⚠️" when stderr can encode it, otherwise "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Success marker: "✅" when stderr can encode it, otherwise "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Error marker: "❌" when stderr can encode it, otherwise "[X]"."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  HEARTH_ROOM_NAME is empty; using 'Living Room'.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Example:
        ``✅  Applied 3 steps to 'Kitchen'.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Example:
        ``❌  Step 'set=95' rejected: Temperature out of range: 95 (allowed 50-90).``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
