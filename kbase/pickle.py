"""A compact binary serialization buffer with 4-byte aligned segments.

Layout: a little-endian ``uint32`` header holding the payload size, then the
payload. Every segment starts at a payload offset that is a multiple of four,
with zero bytes as padding between segments. Lengths of strings and
containers are stored as unsigned 64-bit integers; wide strings hold 32-bit
code units.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")

_HEADER = struct.Struct("<I")
_SIZE = struct.Struct("<Q")
_ALIGNMENT = 4
_MAX_PAYLOAD = 0xFFFFFFFF
_WIDE_UNIT = 4
_WIDE_CODEC = "utf-32-le"

_BOOL = struct.Struct("<?")
_INT8 = struct.Struct("<b")
_UINT8 = struct.Struct("<B")
_INT16 = struct.Struct("<h")
_UINT16 = struct.Struct("<H")
_INT32 = struct.Struct("<i")
_UINT32 = struct.Struct("<I")
_INT64 = struct.Struct("<q")
_UINT64 = struct.Struct("<Q")
_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")


def _round_up(n: int, factor: int = _ALIGNMENT) -> int:
    return -(-n // factor) * factor


class Pickle:
    """A growable buffer that values are serialized into, in order."""

    def __init__(self, data: bytes | bytearray | memoryview | Pickle | None = None):
        if data is None:
            self._buffer = bytearray(_HEADER.size)
            return
        raw = data.data() if isinstance(data, Pickle) else bytes(data)
        if not raw:
            raise ValueError("cannot build a pickle from empty data")
        if len(raw) < _HEADER.size:
            raise ValueError("data is shorter than a pickle header")
        (payload_size,) = _HEADER.unpack_from(raw)
        if payload_size > len(raw) - _HEADER.size:
            raise ValueError("header claims more payload than the data holds")
        self._buffer = bytearray(raw[:_HEADER.size + payload_size])

    def __bytes__(self) -> bytes:
        return self.data()

    def __repr__(self) -> str:
        return f"Pickle(payload_size={self.payload_size()})"

    def data(self) -> bytes:
        """Return the serialized bytes, header included."""
        return bytes(self._buffer)

    def size(self) -> int:
        """Return the size of the serialized data, header included."""
        return len(self._buffer)

    def payload(self) -> bytes:
        """Return the payload bytes, without the header."""
        return bytes(self._buffer[_HEADER.size:])

    def payload_size(self) -> int:
        return _HEADER.unpack_from(self._buffer)[0]

    def payload_empty(self) -> bool:
        return self.payload_size() == 0

    # -- writing ------------------------------------------------------------

    def _append(self, blob: bytes) -> None:
        current = self.payload_size()
        offset = _round_up(current)
        required = offset + len(blob)
        if required > _MAX_PAYLOAD:
            raise ValueError(f"payload size {required} exceeds the 32-bit limit")
        self._buffer += bytes(offset - current)
        self._buffer += blob
        _HEADER.pack_into(self._buffer, 0, required)

    def _write_packed(self, layout: struct.Struct, value) -> Pickle:
        try:
            blob = layout.pack(value)
        except struct.error as exc:
            raise ValueError(f"cannot serialize {value!r}: {exc}") from exc
        self._append(blob)
        return self

    def write_bool(self, value: bool) -> Pickle:
        return self._write_packed(_BOOL, bool(value))

    def write_int8(self, value: int) -> Pickle:
        return self._write_packed(_INT8, value)

    def write_uint8(self, value: int) -> Pickle:
        return self._write_packed(_UINT8, value)

    def write_int16(self, value: int) -> Pickle:
        return self._write_packed(_INT16, value)

    def write_uint16(self, value: int) -> Pickle:
        return self._write_packed(_UINT16, value)

    def write_int32(self, value: int) -> Pickle:
        return self._write_packed(_INT32, value)

    def write_uint32(self, value: int) -> Pickle:
        return self._write_packed(_UINT32, value)

    def write_int64(self, value: int) -> Pickle:
        return self._write_packed(_INT64, value)

    def write_uint64(self, value: int) -> Pickle:
        return self._write_packed(_UINT64, value)

    def write_float(self, value: float) -> Pickle:
        return self._write_packed(_FLOAT, value)

    def write_double(self, value: float) -> Pickle:
        return self._write_packed(_DOUBLE, value)

    def _write_size(self, size: int) -> None:
        self._write_packed(_SIZE, size)

    def write_string(self, value: str) -> Pickle:
        """Write a string as its UTF-8 byte count followed by the bytes."""
        encoded = value.encode("utf-8")
        self._write_size(len(encoded))
        if encoded:
            self._append(encoded)
        return self

    def write_wstring(self, value: str) -> Pickle:
        """Write a string as its character count followed by 32-bit code units."""
        self._write_size(len(value))
        if value:
            self._append(value.encode(_WIDE_CODEC))
        return self

    def write_bytes(self, data: bytes | bytearray | memoryview) -> Pickle:
        """Write raw bytes; there must be at least one."""
        blob = bytes(data)
        if not blob:
            raise ValueError("cannot write zero bytes")
        self._append(blob)
        return self

    def write_list(self, values: Iterable[T], write_item: Callable[[T], object]) -> Pickle:
        """Write the item count, then each item through ``write_item``."""
        items = list(values)
        self._write_size(len(items))
        for item in items:
            write_item(item)
        return self


class PickleReader:
    """Reads values back from a pickle in the order they were written."""

    def __init__(self, source: Pickle | bytes | bytearray | memoryview):
        if isinstance(source, Pickle):
            self._payload = source.payload()
        else:
            raw = bytes(source)
            if len(raw) < _HEADER.size:
                raise ValueError("data is shorter than a pickle header")
            self._payload = raw[_HEADER.size:]
        self._pos = 0

    def __bool__(self) -> bool:
        return self._pos < len(self._payload)

    def _seek(self, size: int) -> None:
        rounded = _round_up(size)
        if self._pos + rounded > len(self._payload):
            self._pos += size
        else:
            self._pos += rounded

    def _take(self, size: int) -> bytes:
        if self._pos + size > len(self._payload):
            raise EOFError(f"cannot read {size} bytes: not enough data left")
        chunk = self._payload[self._pos:self._pos + size]
        self._seek(size)
        return chunk

    def _read_packed(self, layout: struct.Struct):
        return layout.unpack(self._take(layout.size))[0]

    def read_bool(self) -> bool:
        return self._read_packed(_BOOL)

    def read_int8(self) -> int:
        return self._read_packed(_INT8)

    def read_uint8(self) -> int:
        return self._read_packed(_UINT8)

    def read_int16(self) -> int:
        return self._read_packed(_INT16)

    def read_uint16(self) -> int:
        return self._read_packed(_UINT16)

    def read_int32(self) -> int:
        return self._read_packed(_INT32)

    def read_uint32(self) -> int:
        return self._read_packed(_UINT32)

    def read_int64(self) -> int:
        return self._read_packed(_INT64)

    def read_uint64(self) -> int:
        return self._read_packed(_UINT64)

    def read_float(self) -> float:
        return self._read_packed(_FLOAT)

    def read_double(self) -> float:
        return self._read_packed(_DOUBLE)

    def _read_size(self) -> int:
        return self._read_packed(_SIZE)

    def read_string(self) -> str:
        length = self._read_size()
        if length == 0:
            return ""
        return self.read_bytes(length).decode("utf-8")

    def read_wstring(self) -> str:
        length = self._read_size()
        if length == 0:
            return ""
        return self.read_bytes(length * _WIDE_UNIT).decode(_WIDE_CODEC)

    def read_bytes(self, size: int) -> bytes:
        """Read ``size`` raw bytes; ``size`` must be positive and data must remain."""
        if size <= 0:
            raise ValueError("size must be positive")
        if not self:
            raise EOFError("no data left to read")
        return self._take(size)

    def read_list(self, read_item: Callable[[], T]) -> list[T]:
        """Read an item count, then that many items through ``read_item``."""
        count = self._read_size()
        return [read_item() for _ in range(count)]

    def skip_data(self, size: int) -> None:
        """Advance past at least ``size`` bytes, skipping any padding."""
        if size < 0:
            raise ValueError("size must not be negative")
        self._seek(size)