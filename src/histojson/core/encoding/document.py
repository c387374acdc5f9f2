"""Raw JSON document parsing shared by the unmarshal entry points."""

import json
import json.decoder
import json.scanner
import logging
from decimal import Decimal
from typing import Any

from histojson.core.errors import FormatError

logger = logging.getLogger(__name__)


class EscapedString(str):
    """A JSON string value whose source text used escape sequences.

    Numeric fields are read from the raw text between the quotes, so a
    value such as "\\u0031" must not pass for "1".
    """

    __slots__ = ()


def _reject_constant(name: str) -> Any:
    raise FormatError(f"invalid JSON literal {name}")


def _parse_string(s: str, end: int, strict: bool = True) -> tuple[str, int]:
    value, next_end = json.decoder.scanstring(s, end, strict)
    if "\\" in s[end:next_end]:
        value = EscapedString(value)
    return value, next_end


def _escape_tracking_decoder() -> json.JSONDecoder:
    decoder = json.JSONDecoder(parse_float=Decimal, parse_constant=_reject_constant)
    decoder.parse_string = _parse_string
    decoder.scan_once = json.scanner.py_make_scanner(decoder)
    return decoder


_decoder = json.JSONDecoder(parse_float=Decimal, parse_constant=_reject_constant)
_escaped_decoder = _escape_tracking_decoder()


def load_document(raw: str | bytes | bytearray) -> Any:
    """Parse a raw JSON document for decoding.

    JSON numbers with a fraction or exponent are parsed as Decimal so that
    timestamps keep every digit. The non-standard NaN and Infinity literals
    are rejected. String values written with escape sequences come back as
    EscapedString.

    Raises:
        FormatError: If the input is not valid JSON, nests too deeply, or
            holds an integer literal too long to convert.
    """
    try:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode(json.detect_encoding(raw), "surrogatepass")
        decoder = _escaped_decoder if "\\" in raw else _decoder
        return decoder.decode(raw)
    except FormatError:
        raise
    except (ValueError, RecursionError) as exc:
        logger.debug("rejecting malformed JSON document: %s", exc)
        raise FormatError(f"malformed JSON: {exc}") from exc
