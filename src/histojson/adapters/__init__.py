"""Adapters implementing core ports."""

from histojson.adapters.streams import StringStream, TextIOStream

__all__ = [
    "StringStream",
    "TextIOStream",
]
