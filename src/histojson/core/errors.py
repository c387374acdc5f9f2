"""Errors raised by the histogram wire codec."""


class HistogramCodecError(ValueError):
    """Base class for all decode and encode failures."""


class FormatError(HistogramCodecError):
    """A scalar has the wrong JSON kind or does not parse."""


class ArityError(HistogramCodecError):
    """A positional array has the wrong number of elements.

    Attributes:
        expected: Number of elements the array must hold.
        got: Number of elements actually found.
    """

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"wrong number of fields: {got} != {expected}")
        self.expected = expected
        self.got = got


class MissingHistogramError(HistogramCodecError):
    """A sample pair holds no histogram."""

    def __init__(self, message: str = "histogram is null") -> None:
        super().__init__(message)
