"""JSON stream sinks implementing JSONStreamPort."""

import json
from typing import TextIO


class TextIOStream:
    """Writes JSON tokens directly to a text file-like object.

    Example:
        ```python
        import sys

        from histojson import write_pair
        from histojson.adapters import TextIOStream

        write_pair(pair, TextIOStream(sys.stdout))
        ```
    """

    def __init__(self, out: TextIO) -> None:
        self._write = out.write

    def write_array_start(self) -> None:
        self._write("[")

    def write_array_end(self) -> None:
        self._write("]")

    def write_object_start(self) -> None:
        self._write("{")

    def write_object_end(self) -> None:
        self._write("}")

    def write_object_field(self, name: str) -> None:
        self._write(json.dumps(name))
        self._write(":")

    def write_more(self) -> None:
        self._write(",")

    def write_int(self, value: int) -> None:
        self._write(str(int(value)))

    def write_raw(self, text: str) -> None:
        self._write(text)


class StringStream(TextIOStream):
    """Accumulates JSON tokens in memory.

    Tokens are collected in a list and joined once on getvalue(), so a
    single stream can be reused across many values by calling reset().
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._write = self._parts.append

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def to_bytes(self) -> bytes:
        """Return everything written so far as UTF-8 bytes."""
        return self.getvalue().encode()

    def reset(self) -> None:
        """Discard everything written so far."""
        self._parts.clear()
