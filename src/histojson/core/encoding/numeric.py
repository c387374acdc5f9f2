"""String codecs for floats and counts.

Numbers travel as JSON strings rather than JSON numbers so that no 64-bit
precision is lost in clients whose JSON parsers use narrower floats.
"""

import math
import re
from decimal import Decimal

from histojson.core.encoding.document import EscapedString
from histojson.core.errors import FormatError
from histojson.core.profiles import DEFAULT_PROFILE, HistogramCodecProfile

_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|[+-]?(?:inf|infinity)"
    r"|nan",
    re.IGNORECASE | re.ASCII,
)
_INFINITY_LITERAL = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE | re.ASCII)
_UINT_LITERAL = re.compile(r"[0-9]+", re.ASCII)

MAX_UINT64 = 2**64 - 1

Count = float | int


def format_float(value: float) -> str:
    """Format a float as the shortest decimal that parses back to it.

    No exponent is used, however large or small the value.

    Args:
        value: The float (ints are accepted and converted).

    Returns:
        Decimal text, e.g. "4500" or "4466.7196729968955". Special values
        render as "NaN", "+Inf" and "-Inf".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def parse_float_text(text: str) -> float:
    """Parse the inner text of a quoted float.

    Raises:
        FormatError: If the text is not a base-10 float literal or is out
            of the 64-bit range.
    """
    if not _FLOAT_LITERAL.fullmatch(text):
        raise FormatError(f"invalid float value {text!r}")
    value = float(text)
    if math.isinf(value) and not _INFINITY_LITERAL.fullmatch(text):
        raise FormatError(f"float value {text!r} out of range")
    return value


def encode_float(value: float) -> str:
    """Encode a float as a quoted JSON string token."""
    return f'"{format_float(value)}"'


def _unquote(token: str | bytes, kind: str) -> str:
    if isinstance(token, bytes):
        token = token.decode("utf-8", errors="replace")
    if len(token) < 2 or token[0] != '"' or token[-1] != '"':
        raise FormatError(f"{kind} value must be a quoted string")
    return token[1:-1]


def decode_float(token: str | bytes) -> float:
    """Decode a raw JSON token holding a quoted float.

    Raises:
        FormatError: If the token is not quoted or the text does not parse.
    """
    return parse_float_text(_unquote(token, "float"))


def float_from_json(value: object) -> float:
    """Decode a float from an already-parsed JSON value.

    Raises:
        FormatError: If the value is not a JSON string or does not parse.
    """
    if not isinstance(value, str):
        raise FormatError("float value must be a quoted string")
    if isinstance(value, EscapedString):
        raise FormatError(f"float value {value!r} must not use escape sequences")
    return parse_float_text(value)


def format_uint(value: int) -> str:
    """Format an unsigned 64-bit integer as bare decimal digits."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"count {value!r} is not an integer")
    if not 0 <= value <= MAX_UINT64:
        raise FormatError(f"count {value} out of unsigned 64-bit range")
    return str(value)


def parse_uint_text(text: str) -> int:
    """Parse bare decimal digits into an unsigned 64-bit integer.

    Raises:
        FormatError: On signs, non-digits, or values above 2**64 - 1.
    """
    if not _UINT_LITERAL.fullmatch(text):
        raise FormatError(f"invalid unsigned integer value {text!r}")
    value = int(text)
    if value > MAX_UINT64:
        raise FormatError(f"unsigned integer value {text!r} out of range")
    return value


def format_count(value: Count, profile: HistogramCodecProfile = DEFAULT_PROFILE) -> str:
    """Format a count for the given profile, without quotes."""
    if profile.integer_counts:
        return format_uint(value)
    return format_float(value)


def parse_count_text(text: str, profile: HistogramCodecProfile = DEFAULT_PROFILE) -> Count:
    """Parse the inner text of a quoted count for the given profile."""
    if profile.integer_counts:
        return parse_uint_text(text)
    return parse_float_text(text)


def encode_count(value: Count, profile: HistogramCodecProfile = DEFAULT_PROFILE) -> str:
    """Encode a count as a quoted JSON string token."""
    return f'"{format_count(value, profile)}"'


def decode_count(
    token: str | bytes, profile: HistogramCodecProfile = DEFAULT_PROFILE
) -> Count:
    """Decode a raw JSON token holding a quoted count.

    Raises:
        FormatError: If the token is not quoted or the text does not parse.
    """
    return parse_count_text(_unquote(token, "count"), profile)


def count_from_json(
    value: object, profile: HistogramCodecProfile = DEFAULT_PROFILE
) -> Count:
    """Decode a count from an already-parsed JSON value."""
    if not isinstance(value, str):
        raise FormatError("count value must be a quoted string")
    if isinstance(value, EscapedString):
        raise FormatError(f"count value {value!r} must not use escape sequences")
    return parse_count_text(value, profile)
