"""Errors raised while reading workout input from the console."""


class FitlogError(Exception):
    """Base class for recoverable fitness log errors."""


class MissingInput(FitlogError):
    """An input line could not be read (end of stream)."""

    def __init__(self, message: str = "Input required"):
        super().__init__(message)


class InvalidNumber(FitlogError):
    """A numeric field (duration, calories, id) was not an integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid number: '{text}'")
