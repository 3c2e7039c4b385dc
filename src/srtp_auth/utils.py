from __future__ import annotations

# Longest hex dump emitted by debug tracing, in characters.
MAX_PRINT_STRING_LEN = 1024


def secure_wipe(buf: bytearray) -> None:
    """
    Overwrite the provided bytearray with zeros in-place.
    """
    for i in range(len(buf)):
        buf[i] = 0


def octet_string_hex_string(data: bytes | bytearray | memoryview) -> str:
    """Hex-encode ``data`` for tracing, truncated to MAX_PRINT_STRING_LEN characters."""
    return bytes(data[: MAX_PRINT_STRING_LEN // 2]).hex()


class HexString:
    """Lazily hex-encoded octet string; formatting happens only if a log record is emitted."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = data

    def __str__(self) -> str:
        return octet_string_hex_string(self._data)
