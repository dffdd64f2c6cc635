"""A non-owning window onto a string, with search helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterator

NPOS = -1

_FNV_OFFSET_BASIS = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1


def hash_byte_sequence(data: bytes | bytearray | memoryview) -> int:
    """Return the 64-bit FNV-1a hash of a byte sequence."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    value = _FNV_OFFSET_BASIS
    for byte in bytes(data):
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK64
    return value


def _as_text(value: StringView | str) -> str:
    if isinstance(value, StringView):
        return value.to_string()
    if isinstance(value, str):
        return value
    raise TypeError(f"expected str or StringView, got {type(value).__name__}")


class StringView:
    """A view of ``length`` characters of ``text`` starting at ``start``.

    Searches return positions relative to the view, or ``NPOS`` when nothing
    matches.
    """

    __slots__ = ("_text", "_start", "_length")

    def __init__(self, text: StringView | str = "", start: int = 0, length: int | None = None):
        if isinstance(text, StringView):
            base, offset, available = text._text, text._start, text._length
        elif isinstance(text, str):
            base, offset, available = text, 0, len(text)
        else:
            raise TypeError(f"expected str or StringView, got {type(text).__name__}")

        if start < 0 or start > available:
            raise IndexError("StringView start out of range")
        if length is None:
            length = available - start
        elif length < 0 or start + length > available:
            raise IndexError("StringView length out of range")

        self._text = base
        self._start = offset + start
        self._length = length

    # -- basic protocol -----------------------------------------------------

    def to_string(self) -> str:
        """Return a copy of the viewed characters as a new string."""
        return self._text[self._start:self._start + self._length]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"StringView({self.to_string()!r})"

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length != 0

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_string())

    def __getitem__(self, index: int | slice) -> str | StringView:
        if isinstance(index, slice):
            start, stop, step = index.indices(self._length)
            if step != 1:
                raise ValueError("StringView slices must have a step of 1")
            return StringView(self, start, max(0, stop - start))
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("StringView index out of range")
        return self._text[self._start + index]

    def __hash__(self) -> int:
        return hash(self.to_string())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (StringView, str)):
            return self.to_string() == _as_text(other)
        return NotImplemented

    def __lt__(self, other: StringView | str) -> bool:
        if not isinstance(other, (StringView, str)):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: StringView | str) -> bool:
        if not isinstance(other, (StringView, str)):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: StringView | str) -> bool:
        if not isinstance(other, (StringView, str)):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: StringView | str) -> bool:
        if not isinstance(other, (StringView, str)):
            return NotImplemented
        return self.compare(other) >= 0

    # -- element access -----------------------------------------------------

    def at(self, pos: int) -> str:
        """Return the character at ``pos``; raise IndexError if out of range."""
        if not 0 <= pos < self._length:
            raise IndexError("StringView.at")
        return self._text[self._start + pos]

    def front(self) -> str:
        """Return the first character."""
        if not self._length:
            raise IndexError("front() on an empty StringView")
        return self._text[self._start]

    def back(self) -> str:
        """Return the last character."""
        if not self._length:
            raise IndexError("back() on an empty StringView")
        return self._text[self._start + self._length - 1]

    # -- modifiers ----------------------------------------------------------

    def remove_prefix(self, n: int) -> None:
        """Shrink the view by moving its start forward ``n`` characters."""
        if not 0 <= n <= self._length:
            raise ValueError("cannot remove more characters than the view holds")
        self._start += n
        self._length -= n

    def remove_suffix(self, n: int) -> None:
        """Shrink the view by dropping its last ``n`` characters."""
        if not 0 <= n <= self._length:
            raise ValueError("cannot remove more characters than the view holds")
        self._length -= n

    # -- operations ---------------------------------------------------------

    def substr(self, pos: int, count: int | None = None) -> StringView:
        """Return a view of at most ``count`` characters starting at ``pos``."""
        if not 0 <= pos <= self._length:
            raise IndexError("StringView.substr")
        remaining = self._length - pos
        if count is None or count == NPOS:
            real_count = remaining
        elif count < 0:
            raise ValueError("count must not be negative")
        else:
            real_count = min(count, remaining)
        return StringView(self, pos, real_count)

    def compare(self, other: StringView | str) -> int:
        """Return -1, 0 or 1 as this view sorts before, equal to or after ``other``."""
        mine, theirs = self.to_string(), _as_text(other)
        return (mine > theirs) - (mine < theirs)

    # -- searching ----------------------------------------------------------

    def _last_index(self, pos: int | None) -> int:
        if pos is None or pos == NPOS or pos >= self._length:
            return self._length - 1
        if pos < 0:
            raise ValueError("position must not be negative")
        return pos

    def _scan_forward(self, pos: int, accept: Callable[[str], bool]) -> int:
        if pos < 0:
            raise ValueError("position must not be negative")
        text = self.to_string()
        return next(
            (index for index, ch in enumerate(text[pos:], start=pos) if accept(ch)),
            NPOS,
        )

    def _scan_backward(self, pos: int | None, accept: Callable[[str], bool]) -> int:
        last = self._last_index(pos)
        text = self.to_string()
        return next(
            (index for index, ch in reversed(list(enumerate(text[:last + 1]))) if accept(ch)),
            NPOS,
        )

    def find(self, needle: StringView | str, pos: int = 0) -> int:
        """Return the first position at or after ``pos`` where ``needle`` occurs."""
        target = _as_text(needle)
        if pos < 0:
            raise ValueError("position must not be negative")
        if self._length < len(target) + pos:
            return NPOS
        found = self._text.find(target, self._start + pos, self._start + self._length)
        if found < 0:
            return NPOS
        found -= self._start
        # An empty needle matched at the very end counts as no match.
        return NPOS if found == self._length else found

    def rfind(self, needle: StringView | str, pos: int | None = None) -> int:
        """Return the last position of ``needle`` lying wholly within ``[0, pos]``."""
        target = _as_text(needle)
        if not self._length or not target:
            return NPOS
        last = self._last_index(pos)
        if last < len(target) - 1:
            return NPOS
        found = self._text.rfind(target, self._start, self._start + last + 1)
        return NPOS if found < 0 else found - self._start

    def find_first_of(self, chars: StringView | str, pos: int = 0) -> int:
        """Return the first position at or after ``pos`` holding any of ``chars``."""
        charset = set(_as_text(chars))
        if not self._length or not charset or pos >= self._length:
            return NPOS
        return self._scan_forward(pos, lambda ch: ch in charset)

    def find_last_of(self, chars: StringView | str, pos: int | None = None) -> int:
        """Return the last position at or before ``pos`` holding any of ``chars``."""
        charset = set(_as_text(chars))
        if not self._length or not charset:
            return NPOS
        return self._scan_backward(pos, lambda ch: ch in charset)

    def find_first_not_of(self, chars: StringView | str, pos: int = 0) -> int:
        """Return the first position at or after ``pos`` holding none of ``chars``."""
        charset = set(_as_text(chars))
        if not self._length or not charset or pos >= self._length:
            return NPOS
        return self._scan_forward(pos, lambda ch: ch not in charset)

    def find_last_not_of(self, chars: StringView | str, pos: int | None = None) -> int:
        """Return the last position at or before ``pos`` holding none of ``chars``."""
        charset = set(_as_text(chars))
        if not self._length or not charset:
            return NPOS
        return self._scan_backward(pos, lambda ch: ch not in charset)