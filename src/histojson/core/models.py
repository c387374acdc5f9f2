"""Core domain models for histogram samples."""

from dataclasses import dataclass

from histojson.core.display import format_bucket, format_histogram, format_pair
from histojson.core.encoding.numeric import Count
from histojson.core.errors import MissingHistogramError
from histojson.core.timestamp import Time


@dataclass(frozen=True)
class HistogramBucket:
    """One count range of a histogram.

    Attributes:
        boundaries: Boundary code selecting the inclusive ends
            (see BucketBoundaries).
        lower: Lower bound of the range.
        upper: Upper bound of the range.
        count: Number of observations in the range.
    """

    boundaries: int
    lower: float
    upper: float
    count: Count

    def __str__(self) -> str:
        return format_bucket(self)


HistogramBucketList = tuple[HistogramBucket, ...]


@dataclass(frozen=True)
class SampleHistogram:
    """A count/sum/buckets summary of an observed distribution.

    Attributes:
        count: Total number of observations.
        sum: Sum of all observed values.
        buckets: Buckets in encoding order. Lists are frozen into a tuple.
    """

    count: Count = 0
    sum: float = 0.0
    buckets: HistogramBucketList = ()

    def __post_init__(self) -> None:
        if not isinstance(self.buckets, tuple):
            object.__setattr__(self, "buckets", tuple(self.buckets))

    def __str__(self) -> str:
        return format_histogram(self)


@dataclass(frozen=True)
class SampleHistogramPair:
    """A histogram observed at a point in time.

    Attributes:
        timestamp: When the histogram was sampled.
        histogram: The histogram. Never None.
    """

    timestamp: Time
    histogram: SampleHistogram

    def __post_init__(self) -> None:
        if self.histogram is None:
            raise MissingHistogramError("histogram is nil")

    def __str__(self) -> str:
        return format_pair(self)
