"""Wire-format profiles and bucket boundary rules."""

from enum import Enum, IntEnum

from histojson.core.errors import FormatError


class BucketBoundaries(IntEnum):
    """Which ends of a bucket's range are inclusive.

    The numeric values are the boundary codes written on the wire.
    """

    OPEN_LEFT = 0
    OPEN_RIGHT = 1
    OPEN_BOTH = 2
    CLOSED_BOTH = 3


def lower_inclusive(boundaries: int) -> bool:
    """Return True if the boundary code includes the lower bound."""
    return boundaries in (BucketBoundaries.OPEN_RIGHT, BucketBoundaries.CLOSED_BOTH)


def upper_inclusive(boundaries: int) -> bool:
    """Return True if the boundary code includes the upper bound."""
    return boundaries in (BucketBoundaries.OPEN_LEFT, BucketBoundaries.CLOSED_BOTH)


class HistogramCodecProfile(Enum):
    """Selectable variants of the histogram wire format.

    LEGACY_FLOAT_COUNT carries bucket and histogram counts as quoted floats
    and allows any signed 32-bit boundary code. INTEGER_COUNT carries counts
    as quoted unsigned 64-bit integers and limits the boundary code to an
    unsigned byte. Both share the same array and object shapes.
    """

    LEGACY_FLOAT_COUNT = "legacy_float_count"
    INTEGER_COUNT = "integer_count"

    @property
    def integer_counts(self) -> bool:
        return self is HistogramCodecProfile.INTEGER_COUNT

    @property
    def boundaries_range(self) -> tuple[int, int]:
        """Inclusive (min, max) range of the boundary code."""
        if self.integer_counts:
            return (0, 0xFF)
        return (-(2**31), 2**31 - 1)

    def check_boundaries(self, boundaries: int) -> int:
        """Validate a boundary code against this profile's integer width.

        Raises:
            FormatError: If the code does not fit.
        """
        low, high = self.boundaries_range
        if not low <= boundaries <= high:
            raise FormatError(
                f"boundary code {boundaries} out of range [{low}, {high}] "
                f"for profile {self.value}"
            )
        return boundaries


DEFAULT_PROFILE = HistogramCodecProfile.LEGACY_FLOAT_COUNT
