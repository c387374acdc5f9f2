"""Tests for the sample histogram pair codec."""

import io
import json
from decimal import Decimal

import pytest

from histojson.adapters.streams import StringStream, TextIOStream
from histojson.core.encoding.pair import decode_pair, write_pair
from histojson.core.errors import ArityError, FormatError, MissingHistogramError
from histojson.core.models import SampleHistogram, SampleHistogramPair
from histojson.core.timestamp import Time


class TestWritePair:
    """Tests for write_pair()."""

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Encode")
    def test_writes_exact_wire_form(
        self, example_pair: SampleHistogramPair, example_wire: str, stream: StringStream
    ) -> None:
        write_pair(example_pair, stream)

        assert stream.getvalue() == example_wire

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Encode.BareTimestamp")
    def test_timestamp_is_bare_number(
        self, example_pair: SampleHistogramPair, stream: StringStream
    ) -> None:
        """The timestamp parses as a JSON number, not a string."""
        write_pair(example_pair, stream)

        timestamp = json.loads(stream.getvalue())[0]
        assert timestamp == 1234.567

    @pytest.mark.tier(1)
    @pytest.mark.tra("Codec.Pair.Encode.TextIO")
    def test_streams_into_text_file(
        self, example_pair: SampleHistogramPair, example_wire: str
    ) -> None:
        out = io.StringIO()

        write_pair(example_pair, TextIOStream(out))

        assert out.getvalue() == example_wire

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Encode.NilHistogram")
    def test_refuses_pair_without_histogram(self, stream: StringStream) -> None:
        """A pair smuggled past construction without a histogram is not written."""
        pair = object.__new__(SampleHistogramPair)
        object.__setattr__(pair, "timestamp", Time(1))
        object.__setattr__(pair, "histogram", None)

        with pytest.raises(MissingHistogramError):
            write_pair(pair, stream)
        assert stream.getvalue() == ""


class TestDecodePair:
    """Tests for decode_pair()."""

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Decode")
    def test_decodes_parsed_value(self, example_pair: SampleHistogramPair) -> None:
        value = [
            Decimal("1234.567"),
            {
                "count": "1",
                "sum": "4500",
                "buckets": [[0, "4466.7196729968955", "4870.992343051145", "1"]],
            },
        ]

        assert decode_pair(value) == example_pair

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Decode.NullHistogram")
    def test_null_histogram_raises(self) -> None:
        with pytest.raises(MissingHistogramError, match="histogram is null"):
            decode_pair([Decimal("1234.567"), None])

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Decode.Arity")
    @pytest.mark.parametrize(
        "value",
        [
            [],
            [1],
            [1, {}, 3],
            [1, None, 3],
        ],
    )
    def test_wrong_length_raises_arity_error(self, value: list[object]) -> None:
        """Arity is checked before the histogram slot is inspected."""
        with pytest.raises(ArityError) as exc_info:
            decode_pair(value)

        assert exc_info.value.expected == 2
        assert exc_info.value.got == len(value)

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Decode.NotArray")
    @pytest.mark.parametrize("value", [{}, "[1,{}]", None, 1])
    def test_non_array_raises_format_error(self, value: object) -> None:
        with pytest.raises(FormatError, match="JSON array"):
            decode_pair(value)

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Decode.Timestamp")
    @pytest.mark.parametrize("timestamp", ["1234.567", None, True])
    def test_timestamp_must_be_number(self, timestamp: object) -> None:
        with pytest.raises(FormatError, match="invalid time"):
            decode_pair([timestamp, {"count": "1", "sum": "1", "buckets": []}])

    @pytest.mark.tier(0)
    @pytest.mark.tra("Codec.Pair.Decode.HistogramKind")
    def test_histogram_must_be_object(self) -> None:
        with pytest.raises(FormatError, match="JSON object"):
            decode_pair([1, []])


class TestPairModel:
    """Tests for SampleHistogramPair construction and equality."""

    @pytest.mark.core
    def test_construction_without_histogram_raises(self) -> None:
        with pytest.raises(MissingHistogramError):
            SampleHistogramPair(timestamp=Time(1), histogram=None)  # type: ignore[arg-type]

    @pytest.mark.core
    def test_equality_delegates_to_fields(self, example_pair: SampleHistogramPair) -> None:
        same = SampleHistogramPair(Time(1234567), example_pair.histogram)
        later = SampleHistogramPair(Time(1234568), example_pair.histogram)
        other = SampleHistogramPair(Time(1234567), SampleHistogram(count=2))

        assert same == example_pair
        assert later != example_pair
        assert other != example_pair
        assert example_pair == example_pair
