"""Positional array codec for [timestamp, histogram] sample pairs.

This is the per-sample hot path of query responses: write_pair streams
each field straight into the sink without building a document first.
"""

from histojson.core.encoding.histogram import decode_histogram, write_histogram
from histojson.core.errors import (
    ArityError,
    FormatError,
    MissingHistogramError,
)
from histojson.core.models import SampleHistogramPair
from histojson.core.ports import JSONStreamPort
from histojson.core.profiles import DEFAULT_PROFILE, HistogramCodecProfile
from histojson.core.timestamp import Time

PAIR_FIELDS = 2


def write_pair(
    pair: SampleHistogramPair,
    stream: JSONStreamPort,
    profile: HistogramCodecProfile = DEFAULT_PROFILE,
) -> None:
    """Write a pair as [timestamp, histogram] into the stream.

    The timestamp is the one bare JSON number of the format.

    Raises:
        MissingHistogramError: If the pair holds no histogram.
    """
    if pair.histogram is None:
        raise MissingHistogramError("histogram is nil")
    stream.write_array_start()
    stream.write_raw(pair.timestamp.encode_as_number())
    stream.write_more()
    write_histogram(pair.histogram, stream, profile)
    stream.write_array_end()


def decode_pair(
    value: object, profile: HistogramCodecProfile = DEFAULT_PROFILE
) -> SampleHistogramPair:
    """Decode a pair from an already-parsed JSON value.

    Raises:
        FormatError: If the value is not an array or an element is malformed.
        ArityError: If the array does not hold exactly 2 elements.
        MissingHistogramError: If the histogram element is null.
    """
    if not isinstance(value, list):
        raise FormatError("sample histogram pair must be a JSON array")
    if len(value) != PAIR_FIELDS:
        raise ArityError(PAIR_FIELDS, len(value))
    raw_timestamp, raw_histogram = value
    timestamp = Time.from_json_number(raw_timestamp)
    if raw_histogram is None:
        raise MissingHistogramError()
    return SampleHistogramPair(
        timestamp=timestamp,
        histogram=decode_histogram(raw_histogram, profile),
    )
