"""BDD step definitions for the pair wire format features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from histojson import (
    HistogramBucket,
    HistogramCodec,
    HistogramCodecError,
    SampleHistogram,
    SampleHistogramPair,
    Time,
)
from histojson.core.encoding.numeric import parse_float_text


@dataclass
class PairScenarioContext:
    """Shared state between steps in a wire format scenario."""

    codec: HistogramCodec = field(default_factory=HistogramCodec)
    timestamp: Time | None = None
    count: float = 0.0
    sum: float = 0.0
    buckets: list[HistogramBucket] = field(default_factory=list)
    output: bytes = b""
    decoded: SampleHistogramPair | None = None
    error: HistogramCodecError | None = None

    def pair(self) -> SampleHistogramPair:
        assert self.timestamp is not None
        return SampleHistogramPair(
            timestamp=self.timestamp,
            histogram=SampleHistogram(count=self.count, sum=self.sum, buckets=self.buckets),
        )


@pytest.fixture
def ctx() -> PairScenarioContext:
    """Fresh scenario context for each test."""
    return PairScenarioContext()


@given("the default histogram codec")
def step_default_codec(ctx: PairScenarioContext) -> None:
    ctx.codec = HistogramCodec()


@given(
    parsers.parse(
        'a sample at {millis:d} milliseconds with count "{count}" and sum "{total}"'
    )
)
def step_sample(ctx: PairScenarioContext, millis: int, count: str, total: str) -> None:
    ctx.timestamp = Time(millis)
    ctx.count = parse_float_text(count)
    ctx.sum = parse_float_text(total)


@given(
    parsers.parse(
        'a bucket with boundaries {boundaries:d} from "{lower}" to "{upper}" '
        'holding "{count}"'
    )
)
def step_bucket(
    ctx: PairScenarioContext, boundaries: int, lower: str, upper: str, count: str
) -> None:
    ctx.buckets.append(
        HistogramBucket(
            boundaries=boundaries,
            lower=parse_float_text(lower),
            upper=parse_float_text(upper),
            count=parse_float_text(count),
        )
    )


@when("the sample is encoded")
def step_encode(ctx: PairScenarioContext) -> None:
    ctx.output = ctx.codec.marshal_pair(ctx.pair())


@when("the output is decoded")
def step_decode_output(ctx: PairScenarioContext) -> None:
    ctx.decoded = ctx.codec.unmarshal_pair(ctx.output)


@when(parsers.parse("the payload '{payload}' is decoded"))
def step_decode_payload(ctx: PairScenarioContext, payload: str) -> None:
    try:
        ctx.decoded = ctx.codec.unmarshal_pair(payload)
    except HistogramCodecError as exc:
        ctx.error = exc


@when(parsers.parse("a payload with a {digits:d} digit timestamp is decoded"))
def step_decode_long_timestamp(ctx: PairScenarioContext, digits: int) -> None:
    step_decode_payload(ctx, "[" + "1" * digits + ',{"count":"1","sum":"1","buckets":[]}]')


@when(parsers.parse("a payload with arrays nested {depth:d} deep is decoded"))
def step_decode_nested_arrays(ctx: PairScenarioContext, depth: int) -> None:
    step_decode_payload(ctx, "[" * depth + "]" * depth)


@then(parsers.parse("the output is '{expected}'"))
def step_output_is(ctx: PairScenarioContext, expected: str) -> None:
    assert ctx.output.decode() == expected


@then("the decoded sample equals the original")
def step_decoded_equals(ctx: PairScenarioContext) -> None:
    assert ctx.decoded == ctx.pair()


@then(parsers.parse("decoding fails with {error_name}"))
def step_decoding_fails(ctx: PairScenarioContext, error_name: str) -> None:
    assert ctx.decoded is None
    assert type(ctx.error).__name__ == error_name
