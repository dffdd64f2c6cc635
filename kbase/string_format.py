"""Printf-style and brace-style string formatting.

``string_format`` takes placeholders of the form
``{index[:[fill align][sign][width][.precision][type]]}``:

* ``index``: 0-based position of the argument; one argument may feed
  several placeholders.
* ``fill align``: any single character followed by ``<`` (left) or ``>``
  (right); the two always come together.
* ``sign``: ``+`` puts a plus sign before non-negative decimal numbers.
* ``width``: minimum field width.
* ``.precision``: fixed-point precision for floating-point values.
* ``type``: one of ``b`` (booleans as words), ``x``/``X`` (hexadecimal),
  ``o`` (octal), ``e``/``E`` (scientific notation).

The marks are optional but must appear in the order above. A mark with no
meaning for its argument is ignored. ``{{`` and ``}}`` stand for literal
braces. Malformed formats raise :class:`FormatError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

_PLACEHOLDER_MARK = "@"
_TYPE_SPECIFIERS = "bxXoeE"
_DIGITS = re.compile(r"[0-9]*", re.ASCII)
_FORMAT_PIECE = re.compile(
    r"(?P<open>\{\{)"
    r"|(?P<close>\}\})"
    r"|\{(?P<index>[0-9]+)(?::(?P<spec>[^{}]*))?\}"
    r"|(?P<stray>[{}])"
    r"|(?P<text>[^{}]+)",
    re.ASCII,
)


class FormatError(ValueError):
    """Raised when a format string or its arguments are malformed."""


@dataclass
class Placeholder:
    """One ``{index:spec}`` occurrence found in a format string."""

    index: int = -1
    pos: int = -1
    format_specifier: str = ""
    formatted: str = ""


class _Category(IntEnum):
    NONE = 0
    PADDING_ALIGN = 1
    SIGN = 2
    WIDTH = 3
    PRECISION = 4
    TYPE = 5


@dataclass
class _Flags:
    fill: str = " "
    left: bool = False
    showpos: bool = False
    width: int = 0
    precision: int = 6
    floatfield: str | None = None
    base: int = 10
    boolalpha: bool = False
    uppercase: bool = False


# -- printf style -------------------------------------------------------------


def string_printf(fmt: str, *args: object) -> str:
    """Return ``fmt`` formatted printf-style with ``args``."""
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise FormatError(f"cannot format {fmt!r}: {exc}") from exc


def string_append_printf(text: str, fmt: str, *args: object) -> str:
    """Return ``text`` followed by ``fmt`` formatted printf-style with ``args``."""
    return text + string_printf(fmt, *args)


# -- brace style --------------------------------------------------------------


def analyze_format(fmt: str) -> tuple[str, list[Placeholder]]:
    """Split ``fmt`` into a simplified format and its placeholders.

    In the simplified format every placeholder is replaced by a single ``@``
    and escaped braces by the brace itself. Placeholders come back sorted by
    argument index, each recording where its mark sits.
    """
    pieces: list[str] = []
    length = 0
    placeholders: list[Placeholder] = []

    for match in _FORMAT_PIECE.finditer(fmt):
        kind = match.lastgroup
        if kind == "open":
            piece = "{"
        elif kind == "close":
            piece = "}"
        elif kind == "stray":
            raise FormatError(f"unbalanced {match.group()!r} at offset {match.start()} in {fmt!r}")
        elif kind == "text":
            piece = match.group()
        else:
            placeholders.append(
                Placeholder(
                    index=int(match.group("index")),
                    pos=length,
                    format_specifier=match.group("spec") or "",
                )
            )
            piece = _PLACEHOLDER_MARK
        pieces.append(piece)
        length += len(piece)

    placeholders.sort(key=lambda placeholder: placeholder.index)
    return "".join(pieces), placeholders


def _guess_category(spec: str, pos: int) -> _Category:
    ch = spec[pos]
    if spec[pos + 1:pos + 2] in ("<", ">"):
        return _Category.PADDING_ALIGN
    if ch == "+":
        return _Category.SIGN
    if "0" <= ch <= "9":
        return _Category.WIDTH
    if ch == ".":
        return _Category.PRECISION
    if ch in _TYPE_SPECIFIERS:
        return _Category.TYPE
    raise FormatError(f"unknown format specifier {ch!r} in {spec!r}")


def _parse_specifier(spec: str) -> _Flags:
    flags = _Flags()
    last = _Category.NONE
    pos = 0
    while pos < len(spec):
        category = _guess_category(spec, pos)
        if category <= last:
            raise FormatError(f"format specifier marks out of order in {spec!r}")
        if category is _Category.PADDING_ALIGN:
            flags.fill = spec[pos]
            flags.left = spec[pos + 1] == "<"
            pos += 2
        elif category is _Category.SIGN:
            flags.showpos = True
            pos += 1
        elif category is _Category.WIDTH:
            digits = _DIGITS.match(spec, pos).group()
            flags.width = int(digits)
            pos += len(digits)
        elif category is _Category.PRECISION:
            digits = _DIGITS.match(spec, pos + 1).group()
            flags.precision = int(digits) if digits else 0
            flags.floatfield = "fixed"
            pos += 1 + len(digits)
        else:
            mark = spec[pos]
            if mark == "b":
                flags.boolalpha = True
            elif mark in "xX":
                flags.base = 16
            elif mark == "o":
                flags.base = 8
            else:
                flags.floatfield = "scientific"
            flags.uppercase = mark in "XE"
            pos += 1
        last = category
    return flags


def _render_int(value: int, flags: _Flags) -> str:
    magnitude = abs(value)
    if flags.base == 16:
        digits = format(magnitude, "X" if flags.uppercase else "x")
    elif flags.base == 8:
        digits = format(magnitude, "o")
    else:
        digits = str(magnitude)
    if value < 0:
        sign = "-"
    elif flags.showpos and flags.base == 10:
        sign = "+"
    else:
        sign = ""
    return sign + digits


def _render_float(value: float, flags: _Flags) -> str:
    conversion = {"fixed": "f", "scientific": "e"}.get(flags.floatfield or "", "g")
    if flags.uppercase:
        conversion = conversion.upper()
    sign_flag = "+" if flags.showpos else ""
    return f"%{sign_flag}.{flags.precision}{conversion}" % value


def _format_arg(arg: object, specifier: str) -> str:
    flags = _parse_specifier(specifier)
    if isinstance(arg, bool):
        body = ("true" if arg else "false") if flags.boolalpha else _render_int(int(arg), flags)
    elif isinstance(arg, int):
        body = _render_int(arg, flags)
    elif isinstance(arg, float):
        body = _render_float(arg, flags)
    else:
        body = str(arg)

    if len(body) >= flags.width:
        return body
    padding = flags.fill * (flags.width - len(body))
    return body + padding if flags.left else padding + body


def string_format(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its ``{index:spec}`` placeholders filled from ``args``."""
    analyzed, placeholders = analyze_format(fmt)
    missing = [p.index for p in placeholders if p.index >= len(args)]
    if missing:
        raise FormatError(
            f"placeholder index {max(missing)} has no argument; {len(args)} given"
        )

    for placeholder in placeholders:
        placeholder.formatted = _format_arg(args[placeholder.index], placeholder.format_specifier)

    pieces: list[str] = []
    last = 0
    for placeholder in sorted(placeholders, key=lambda p: p.pos):
        pieces.append(analyzed[last:placeholder.pos])
        pieces.append(placeholder.formatted)
        last = placeholder.pos + 1
    pieces.append(analyzed[last:])
    return "".join(pieces)