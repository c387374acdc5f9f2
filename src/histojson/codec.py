"""Configured entry point for encoding and decoding histogram samples."""

import logging
from collections.abc import Callable
from typing import TypeVar

from histojson.adapters.streams import StringStream
from histojson.config import CodecConfig
from histojson.core import display
from histojson.core.encoding.bucket import decode_bucket, write_bucket
from histojson.core.encoding.document import load_document
from histojson.core.encoding.histogram import decode_histogram, write_histogram
from histojson.core.encoding.pair import decode_pair, write_pair
from histojson.core.errors import HistogramCodecError
from histojson.core.models import HistogramBucket, SampleHistogram, SampleHistogramPair
from histojson.core.ports import JSONStreamPort
from histojson.core.profiles import HistogramCodecProfile

logger = logging.getLogger(__name__)

T = TypeVar("T")

RawJSON = str | bytes | bytearray


class HistogramCodec:
    """Encodes and decodes histogram samples under one configuration.

    Example:
        ```python
        from histojson import CodecConfig, HistogramCodec, HistogramCodecProfile

        codec = HistogramCodec(CodecConfig(profile=HistogramCodecProfile.INTEGER_COUNT))
        pair = codec.unmarshal_pair(b'[1.5,{"count":"2","sum":"3","buckets":[]}]')
        codec.marshal_pair(pair)
        ```
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize the codec.

        Args:
            config: Profile and display options. Defaults to CodecConfig().
        """
        self.config = config or CodecConfig()

    @property
    def profile(self) -> HistogramCodecProfile:
        return self.config.profile

    def _marshal(
        self, writer: Callable[[T, JSONStreamPort, HistogramCodecProfile], None], value: T
    ) -> bytes:
        stream = StringStream()
        writer(value, stream, self.profile)
        return stream.to_bytes()

    def _unmarshal(
        self,
        decoder: Callable[[object, HistogramCodecProfile], T],
        raw: RawJSON,
        kind: str,
    ) -> T:
        try:
            return decoder(load_document(raw), self.profile)
        except HistogramCodecError as exc:
            logger.debug("rejecting %s: %s", kind, exc)
            raise

    def write_pair(self, pair: SampleHistogramPair, stream: JSONStreamPort) -> None:
        """Stream a pair into a caller-supplied sink."""
        write_pair(pair, stream, self.profile)

    def marshal_pair(self, pair: SampleHistogramPair) -> bytes:
        """Encode a pair as [timestamp, histogram] JSON bytes."""
        return self._marshal(write_pair, pair)

    def unmarshal_pair(self, raw: RawJSON) -> SampleHistogramPair:
        """Decode a pair from raw JSON.

        Raises:
            FormatError: On malformed JSON or a malformed element.
            ArityError: On an array with the wrong number of elements.
            MissingHistogramError: If the histogram element is null.
        """
        return self._unmarshal(decode_pair, raw, "sample histogram pair")

    def decode_pair(self, value: object) -> SampleHistogramPair:
        """Decode a pair from a value an enclosing document already parsed."""
        return decode_pair(value, self.profile)

    def marshal_histogram(self, histogram: SampleHistogram) -> bytes:
        return self._marshal(write_histogram, histogram)

    def unmarshal_histogram(self, raw: RawJSON) -> SampleHistogram:
        return self._unmarshal(decode_histogram, raw, "histogram")

    def marshal_bucket(self, bucket: HistogramBucket) -> bytes:
        return self._marshal(write_bucket, bucket)

    def unmarshal_bucket(self, raw: RawJSON) -> HistogramBucket:
        return self._unmarshal(decode_bucket, raw, "histogram bucket")

    def format_pair(self, pair: SampleHistogramPair) -> str:
        return display.format_pair(pair, self.config.display)

    def format_histogram(self, histogram: SampleHistogram) -> str:
        return display.format_histogram(histogram, self.config.display)

    def format_bucket(self, bucket: HistogramBucket) -> str:
        return display.format_bucket(bucket, self.config.display)


_default_codec = HistogramCodec()


def marshal_pair(pair: SampleHistogramPair) -> bytes:
    """Encode a pair with the default configuration."""
    return _default_codec.marshal_pair(pair)


def unmarshal_pair(raw: RawJSON) -> SampleHistogramPair:
    """Decode a pair with the default configuration."""
    return _default_codec.unmarshal_pair(raw)
