"""Human-readable rendering of histogram values.

These renderings are for logs and debugging only; they have no decoder.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

from histojson.config import DEFAULT_DISPLAY, DisplayOptions
from histojson.core.encoding.numeric import Count, format_float
from histojson.core.profiles import lower_inclusive, upper_inclusive

if TYPE_CHECKING:
    from histojson.core.models import (
        HistogramBucket,
        SampleHistogram,
        SampleHistogramPair,
    )

# Shortest form switches to exponent notation at 1e6
_SHORTEST_EXPONENT_LIMIT = 6


def _shortest_g(value: float) -> str:
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    prefix = "-" if sign else ""
    if digits == [0]:
        return prefix + "0"
    exp = len(digits) + exponent - 1
    if exp < -4 or exp >= _SHORTEST_EXPONENT_LIMIT:
        text = "".join(str(d) for d in digits)
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    return prefix + format(Decimal((0, tuple(digits), exponent)), "f")


def format_display_float(value: float, precision: int | None = None) -> str:
    """Render a float in %g style.

    Args:
        value: The float to render.
        precision: Significant digits, or None for the shortest exact text.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if precision is None:
        return _shortest_g(value)
    return format(value, f".{precision}g")


def format_display_count(count: Count) -> str:
    if isinstance(count, int) and not isinstance(count, bool):
        return str(count)
    return format_float(count)


def format_bucket(
    bucket: HistogramBucket, options: DisplayOptions = DEFAULT_DISPLAY
) -> str:
    """Render a bucket in interval notation, e.g. "(0.5,1]:3".

    The bracket on each side shows whether that bound is inclusive.
    Unknown boundary codes render as open on both sides.
    """
    precision = options.float_precision
    return "{}{},{}{}:{}".format(
        "[" if lower_inclusive(bucket.boundaries) else "(",
        format_display_float(bucket.lower, precision),
        format_display_float(bucket.upper, precision),
        "]" if upper_inclusive(bucket.boundaries) else ")",
        format_display_count(bucket.count),
    )


def format_histogram(
    histogram: SampleHistogram, options: DisplayOptions = DEFAULT_DISPLAY
) -> str:
    """Render a histogram as "Count: C, Sum: S, Buckets: [...]"."""
    if options.redact_buckets:
        buckets = f"[{len(histogram.buckets)} buckets]"
    else:
        buckets = "[" + " ".join(format_bucket(b, options) for b in histogram.buckets) + "]"
    return (
        f"Count: {format_display_count(histogram.count)}, "
        f"Sum: {format_float(histogram.sum)}, "
        f"Buckets: {buckets}"
    )


def format_pair(
    pair: SampleHistogramPair, options: DisplayOptions = DEFAULT_DISPLAY
) -> str:
    """Render a pair as "<histogram> @[<timestamp>]"."""
    return f"{format_histogram(pair.histogram, options)} @[{pair.timestamp}]"
