"""Shared test fixtures for all test modules."""

import pytest

from histojson.adapters.streams import StringStream
from histojson.core.models import HistogramBucket, SampleHistogram, SampleHistogramPair
from histojson.core.timestamp import Time


@pytest.fixture
def example_bucket() -> HistogramBucket:
    """Single open-left bucket used across codec tests."""
    return HistogramBucket(
        boundaries=0,
        lower=4466.7196729968955,
        upper=4870.992343051145,
        count=1,
    )


@pytest.fixture
def example_histogram(example_bucket: HistogramBucket) -> SampleHistogram:
    """Histogram holding only example_bucket."""
    return SampleHistogram(count=1, sum=4500, buckets=(example_bucket,))


@pytest.fixture
def example_pair(example_histogram: SampleHistogram) -> SampleHistogramPair:
    """Histogram sampled at 1234.567 seconds."""
    return SampleHistogramPair(timestamp=Time(1234567), histogram=example_histogram)


@pytest.fixture
def example_wire() -> str:
    """Exact wire form of example_pair."""
    return (
        '[1234.567,{"count":"1","sum":"4500","buckets":'
        '[[0,"4466.7196729968955","4870.992343051145","1"]]}]'
    )


@pytest.fixture
def stream() -> StringStream:
    """Fresh in-memory JSON sink."""
    return StringStream()
