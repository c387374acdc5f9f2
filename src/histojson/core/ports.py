"""Port interfaces for encode sinks.

Encoders write primitive JSON tokens straight into a sink instead of
building an intermediate document, so the caller decides where the bytes
end up.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class JSONStreamPort(Protocol):
    """Port for a streaming JSON writer.

    Adapters implementing this protocol receive tokens in document order.
    Examples: StringStream, TextIOStream.
    """

    def write_array_start(self) -> None:
        """Write "["."""
        ...

    def write_array_end(self) -> None:
        """Write "]"."""
        ...

    def write_object_start(self) -> None:
        """Write "{"."""
        ...

    def write_object_end(self) -> None:
        """Write "}"."""
        ...

    def write_object_field(self, name: str) -> None:
        """Write a quoted key followed by ":"."""
        ...

    def write_more(self) -> None:
        """Write the "," separating array elements or object members."""
        ...

    def write_int(self, value: int) -> None:
        """Write a bare JSON integer."""
        ...

    def write_raw(self, text: str) -> None:
        """Write pre-formatted JSON text verbatim."""
        ...
