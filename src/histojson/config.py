"""Configuration for the histogram codec."""

from dataclasses import dataclass, field

from histojson.core.profiles import DEFAULT_PROFILE, HistogramCodecProfile


@dataclass(frozen=True)
class DisplayOptions:
    """Options for the human-readable (non-wire) rendering of values.

    Attributes:
        float_precision: Significant digits for bucket bounds. None renders
            the shortest text that identifies the float, switching to
            exponent form outside [1e-4, 1e6). An integer uses that many
            significant digits with the same switching rule.
        redact_buckets: Replace the bucket list in histogram text with a
            bucket count, keeping log lines bounded.
    """

    float_precision: int | None = None
    redact_buckets: bool = False

    def __post_init__(self) -> None:
        if self.float_precision is not None and self.float_precision < 1:
            raise ValueError("float_precision must be a positive integer or None")


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for HistogramCodec.

    Attributes:
        profile: Wire-format profile used to encode and decode counts and
            boundary codes.
        display: Options for human-readable rendering.
    """

    profile: HistogramCodecProfile = DEFAULT_PROFILE
    display: DisplayOptions = field(default_factory=DisplayOptions)


DEFAULT_DISPLAY = DisplayOptions()
