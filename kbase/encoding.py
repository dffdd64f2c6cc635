"""Conversions between text and UTF-8 or ASCII bytes."""

from __future__ import annotations


def wide_to_utf8(text: str) -> bytes:
    """Encode ``text`` as UTF-8, joining any UTF-16 surrogate pairs it holds.

    Raises ValueError for an unpaired surrogate.
    """
    try:
        normalized = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    except UnicodeDecodeError as exc:
        raise ValueError(f"text holds an unpaired surrogate: {exc}") from exc
    return normalized.encode("utf-8")


def utf8_to_wide(data: bytes | bytearray | memoryview) -> str:
    """Decode UTF-8 ``data``; raises ValueError if it is not valid UTF-8."""
    return bytes(data).decode("utf-8")


def ascii_to_wide(data: bytes | bytearray | memoryview | str) -> str:
    """Return ASCII-only ``data`` as text; raises ValueError otherwise."""
    if isinstance(data, str):
        if not data.isascii():
            raise ValueError("data holds non-ASCII characters")
        return data
    raw = bytes(data)
    if not raw.isascii():
        raise ValueError("data holds non-ASCII bytes")
    return raw.decode("ascii")


def wide_to_ascii(text: str) -> bytes:
    """Return ASCII-only ``text`` as bytes; raises ValueError otherwise."""
    if not text.isascii():
        raise ValueError("text holds non-ASCII characters")
    return text.encode("ascii")