"""Millisecond-precision sample timestamp."""

import time
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal, DecimalException

from histojson.core.errors import FormatError

_MILLIS_PER_SECOND = 1000
_NANOS_PER_MILLI = 1_000_000
_MIN_MILLIS = -(2**63)
_MAX_MILLIS = 2**63 - 1


@dataclass(frozen=True, order=True)
class Time:
    """A point in time as milliseconds since the Unix epoch.

    On the wire a Time is a bare JSON number of seconds with at most three
    fractional digits, so it stays sortable by tools that treat it as a
    number.

    Attributes:
        milliseconds: Milliseconds since the Unix epoch.
    """

    milliseconds: int

    def __post_init__(self) -> None:
        if not _MIN_MILLIS <= self.milliseconds <= _MAX_MILLIS:
            raise FormatError(
                f"time {self.milliseconds} out of signed 64-bit millisecond range"
            )

    @classmethod
    def now(cls) -> "Time":
        """Return the current wall-clock time."""
        return cls(time.time_ns() // _NANOS_PER_MILLI)

    @classmethod
    def from_unix(cls, seconds: int, nanoseconds: int = 0) -> "Time":
        """Build a Time from Unix seconds plus nanoseconds.

        Sub-millisecond nanoseconds are dropped.
        """
        return cls(seconds * _MILLIS_PER_SECOND + nanoseconds // _NANOS_PER_MILLI)

    @classmethod
    def from_json_number(cls, value: object) -> "Time":
        """Decode a timestamp from an already-parsed JSON number.

        Args:
            value: An int, a Decimal (as produced by json.loads with
                parse_float=Decimal) or a float.

        Returns:
            The Time, with digits past the millisecond truncated toward zero.

        Raises:
            FormatError: If the value is not a finite JSON number or falls
                outside the signed 64-bit millisecond range.
        """
        if isinstance(value, bool):
            raise FormatError(f"invalid time {value!r}")
        if isinstance(value, int):
            return cls(value * _MILLIS_PER_SECOND)
        if isinstance(value, float):
            value = Decimal(repr(value))
        if not isinstance(value, Decimal) or not value.is_finite():
            raise FormatError(f"invalid time {value!r}")
        try:
            millis = (value * _MILLIS_PER_SECOND).to_integral_value(rounding=ROUND_DOWN)
        except DecimalException as exc:
            raise FormatError(f"invalid time {value!r}") from exc
        if not _MIN_MILLIS <= millis <= _MAX_MILLIS:
            raise FormatError(f"time {value} out of signed 64-bit millisecond range")
        return cls(int(millis))

    def encode_as_number(self) -> str:
        """Return the seconds as bare JSON number text, e.g. "1234.567"."""
        seconds = Decimal(self.milliseconds).scaleb(-3).normalize()
        return format(seconds, "f")

    def unix(self) -> int:
        """Return whole seconds since the epoch, truncated toward zero."""
        seconds, _ = divmod(abs(self.milliseconds), _MILLIS_PER_SECOND)
        return -seconds if self.milliseconds < 0 else seconds

    def unix_nano(self) -> int:
        """Return nanoseconds since the epoch."""
        return self.milliseconds * _NANOS_PER_MILLI

    def __str__(self) -> str:
        return self.encode_as_number()
