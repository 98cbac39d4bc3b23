"""Exceptions raised by the color code engine."""


class ColorCodeError(ValueError):
    """Base class for color code errors."""


class InvalidFormatError(ColorCodeError):
    """The input is not a recognised CSS3 color code."""

    def __init__(self, code: str, reason: str = "unrecognised color code"):
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid color code {code!r}: {reason}")
