"""histojson - compact JSON wire codec for histogram samples."""

from histojson.adapters.streams import StringStream, TextIOStream
from histojson.codec import HistogramCodec, marshal_pair, unmarshal_pair
from histojson.config import CodecConfig, DisplayOptions
from histojson.core.encoding.bucket import decode_bucket, write_bucket
from histojson.core.encoding.histogram import decode_histogram, write_histogram
from histojson.core.encoding.numeric import (
    decode_count,
    decode_float,
    encode_count,
    encode_float,
    format_count,
    format_float,
)
from histojson.core.encoding.pair import decode_pair, write_pair
from histojson.core.errors import (
    ArityError,
    FormatError,
    HistogramCodecError,
    MissingHistogramError,
)
from histojson.core.models import (
    HistogramBucket,
    HistogramBucketList,
    SampleHistogram,
    SampleHistogramPair,
)
from histojson.core.ports import JSONStreamPort
from histojson.core.profiles import BucketBoundaries, HistogramCodecProfile
from histojson.core.timestamp import Time

__all__ = [
    # Models
    "HistogramBucket",
    "HistogramBucketList",
    "SampleHistogram",
    "SampleHistogramPair",
    "Time",
    # Profiles and config
    "BucketBoundaries",
    "CodecConfig",
    "DisplayOptions",
    "HistogramCodecProfile",
    # Errors
    "ArityError",
    "FormatError",
    "HistogramCodecError",
    "MissingHistogramError",
    # Codec
    "HistogramCodec",
    "marshal_pair",
    "unmarshal_pair",
    "decode_bucket",
    "decode_histogram",
    "decode_pair",
    "write_bucket",
    "write_histogram",
    "write_pair",
    # Numeric codecs
    "decode_count",
    "decode_float",
    "encode_count",
    "encode_float",
    "format_count",
    "format_float",
    # Streams
    "JSONStreamPort",
    "StringStream",
    "TextIOStream",
]
