"""Positional array codec for a single histogram bucket.

A bucket travels as [boundaries, "lower", "upper", "count"]. The boundary
code is a bare JSON integer; the other three fields are quoted numbers.
"""

from histojson.core.encoding.numeric import (
    count_from_json,
    encode_count,
    encode_float,
    float_from_json,
)
from histojson.core.errors import ArityError, FormatError
from histojson.core.models import HistogramBucket
from histojson.core.ports import JSONStreamPort
from histojson.core.profiles import DEFAULT_PROFILE, HistogramCodecProfile

BUCKET_FIELDS = 4


def write_bucket(
    bucket: HistogramBucket,
    stream: JSONStreamPort,
    profile: HistogramCodecProfile = DEFAULT_PROFILE,
) -> None:
    """Write a bucket as a 4-element array into the stream.

    Raises:
        FormatError: If the boundary code or count does not fit the profile.
    """
    stream.write_array_start()
    stream.write_int(profile.check_boundaries(bucket.boundaries))
    stream.write_more()
    stream.write_raw(encode_float(bucket.lower))
    stream.write_more()
    stream.write_raw(encode_float(bucket.upper))
    stream.write_more()
    stream.write_raw(encode_count(bucket.count, profile))
    stream.write_array_end()


def decode_bucket(
    value: object, profile: HistogramCodecProfile = DEFAULT_PROFILE
) -> HistogramBucket:
    """Decode a bucket from an already-parsed JSON value.

    Raises:
        FormatError: If the value is not an array or an element has the
            wrong JSON kind or does not parse.
        ArityError: If the array does not hold exactly 4 elements.
    """
    if not isinstance(value, list):
        raise FormatError("bucket must be a JSON array")
    if len(value) != BUCKET_FIELDS:
        raise ArityError(BUCKET_FIELDS, len(value))
    boundaries, lower, upper, count = value
    # bool is an int subclass but arrives from JSON true/false
    if isinstance(boundaries, bool) or not isinstance(boundaries, int):
        raise FormatError("bucket boundary code must be a JSON integer")
    return HistogramBucket(
        boundaries=profile.check_boundaries(boundaries),
        lower=float_from_json(lower),
        upper=float_from_json(upper),
        count=count_from_json(count, profile),
    )
