"""Console input helpers: every read is a plain text line, numbers are parsed from it."""

from collections.abc import Callable

from fitlog.core.errors import InvalidNumber, MissingInput

Reader = Callable[[str], str]


def safe_read(prompt: str, reader: Reader = input) -> str:
    """Show prompt and return the line. Raises MissingInput at end of input."""
    try:
        return reader(prompt)
    except EOFError:
        raise MissingInput() from None


def _to_int(text: str) -> int:
    # ASCII digits with an optional sign only: int() alone also takes "1_000" and non-Latin digits
    digits = text.strip()
    if not (digits.isascii() and digits.lstrip("+-").isdigit()):
        raise ValueError(text)
    return int(digits)


def parse_int(text: str) -> int:
    try:
        return _to_int(text)
    except ValueError:
        raise InvalidNumber(text) from None


def parse_int_or_zero(text: str) -> int:
    """Lenient parse used for the goal prompt: anything non-numeric counts as 0."""
    try:
        return _to_int(text)
    except ValueError:
        return 0


def read_int(prompt: str, reader: Reader = input) -> int:
    return parse_int(safe_read(prompt, reader))
