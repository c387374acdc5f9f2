"""Object codec for a histogram's count, sum and buckets."""

from histojson.core.encoding.bucket import decode_bucket, write_bucket
from histojson.core.encoding.numeric import (
    count_from_json,
    encode_count,
    encode_float,
    float_from_json,
)
from histojson.core.errors import FormatError
from histojson.core.models import SampleHistogram
from histojson.core.ports import JSONStreamPort
from histojson.core.profiles import DEFAULT_PROFILE, HistogramCodecProfile


def write_histogram(
    histogram: SampleHistogram,
    stream: JSONStreamPort,
    profile: HistogramCodecProfile = DEFAULT_PROFILE,
) -> None:
    """Write a histogram as {"count":..,"sum":..,"buckets":[..]}.

    Keys are always written in that order; an empty bucket list is
    written as [].
    """
    stream.write_object_start()
    stream.write_object_field("count")
    stream.write_raw(encode_count(histogram.count, profile))
    stream.write_more()
    stream.write_object_field("sum")
    stream.write_raw(encode_float(histogram.sum))
    stream.write_more()
    stream.write_object_field("buckets")
    stream.write_array_start()
    for i, bucket in enumerate(histogram.buckets):
        if i:
            stream.write_more()
        write_bucket(bucket, stream, profile)
    stream.write_array_end()
    stream.write_object_end()


def decode_histogram(
    value: object, profile: HistogramCodecProfile = DEFAULT_PROFILE
) -> SampleHistogram:
    """Decode a histogram from an already-parsed JSON object.

    Unknown keys are ignored. Missing count and sum decode to zero; a
    missing or null bucket list decodes to no buckets.

    Raises:
        FormatError: If the value is not an object or a field is malformed.
        ArityError: If a bucket array has the wrong length.
    """
    if not isinstance(value, dict):
        raise FormatError("histogram must be a JSON object")
    count = count_from_json(value["count"], profile) if "count" in value else 0
    total = float_from_json(value["sum"]) if "sum" in value else 0.0
    raw_buckets = value.get("buckets")
    if raw_buckets is None:
        raw_buckets = []
    elif not isinstance(raw_buckets, list):
        raise FormatError("histogram buckets must be a JSON array")
    return SampleHistogram(
        count=count,
        sum=total,
        buckets=tuple(decode_bucket(b, profile) for b in raw_buckets),
    )
