"""A mutable string type with the semantics of the Wiring/Arduino ``String``.

An :class:`ArduinoString` holds text, or nothing at all: a string made from
``None`` is *invalid*, is false in a boolean context and behaves as empty
in most operations. Numbers given to the constructor or to :meth:`concat`
are formatted as the C library would format them. Indexes are unsigned;
passing a negative one raises ``ValueError``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

from .conversions import (
    DBL_MAX_DECIMAL_PLACES,
    format_fixed,
    format_integer,
    parse_double,
    parse_long,
    to_float32,
)

__all__ = ["ArduinoString"]

_TextLike = Union["ArduinoString", str, bytes, bytearray, None]

_SPACE = " \t\n\v\f\r"
_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)


def _unsigned(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, not {value}")
    return value


def _integer_text(value: int, base: int) -> str:
    if value >= 0:
        return format_integer(value, base, max(32, value.bit_length()), False)
    bits = 32 if value >= -(1 << 31) else 64
    return format_integer(value, base, bits, True)


def _text_of(value: object) -> str | None:
    """Return the text of a string-like value, or None for a missing one."""
    if isinstance(value, ArduinoString):
        return value._buf
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    raise TypeError(f"expected a string, not {type(value).__name__}")


def _is_text_like(value: object) -> bool:
    return value is None or isinstance(value, (ArduinoString, str, bytes, bytearray))


def _strcmp(left: str, right: str) -> int:
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) == len(right):
        return 0
    if len(left) > len(right):
        return ord(left[len(right)])
    return -ord(right[len(left)])


def _last_index_of_text(text: str, needle: str, from_index: int) -> int:
    if not needle or not text or len(needle) > len(text):
        return -1
    from_index = min(from_index, len(text) - 1)
    return text.rfind(needle, 0, from_index + len(needle))


class ArduinoString:
    """Mutable text that may also be invalid (holding nothing)."""

    __slots__ = ("_buf",)

    def __init__(
        self,
        value: object = "",
        base: int | None = None,
        decimal_places: int | None = None,
    ) -> None:
        self._buf: str | None = None
        if isinstance(value, int):
            if decimal_places is not None:
                raise TypeError("decimal_places applies to floats only")
            self._buf = _integer_text(value, 10 if base is None else base)
        elif isinstance(value, float):
            if base is not None:
                raise TypeError("base applies to integers only")
            places = 2 if decimal_places is None else decimal_places
            places = min(_unsigned("decimal_places", places), DBL_MAX_DECIMAL_PLACES)
            self._buf = format_fixed(value, places + 2, places)
        else:
            if base is not None or decimal_places is not None:
                raise TypeError("base and decimal_places apply to numbers only")
            self._buf = _text_of(value)

    # -- Python protocols -------------------------------------------------

    def __bool__(self) -> bool:
        return self._buf is not None

    def __len__(self) -> int:
        return len(self._buf) if self._buf is not None else 0

    def __str__(self) -> str:
        return self._buf or ""

    def __repr__(self) -> str:
        return f"ArduinoString({self._buf!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(self._buf or "")

    def __getitem__(self, index: int | slice) -> str | ArduinoString:
        if isinstance(index, slice):
            return ArduinoString(str(self)[index])
        return self.char_at(index)

    def __eq__(self, other: object) -> bool:
        if not _is_text_like(other):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not _is_text_like(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not _is_text_like(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not _is_text_like(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not _is_text_like(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __add__(self, other: object) -> ArduinoString:
        if not (_is_text_like(other) or isinstance(other, (int, float))):
            return NotImplemented
        result = ArduinoString(self)
        if not result.concat(other):
            result._buf = None
        return result

    def __radd__(self, other: object) -> ArduinoString:
        if not (_is_text_like(other) or isinstance(other, (int, float))):
            return NotImplemented
        result = ArduinoString(other)
        if not result.concat(self):
            result._buf = None
        return result

    def __iadd__(self, other: object) -> ArduinoString:
        if not (_is_text_like(other) or isinstance(other, (int, float))):
            return NotImplemented
        self.concat(other)
        return self

    # -- state --------------------------------------------------------------

    def is_valid(self) -> bool:
        """Return True unless the string holds nothing."""
        return self._buf is not None

    def is_empty(self) -> bool:
        """Return True if the string has no characters."""
        return len(self) == 0

    def reserve(self, size: int) -> bool:
        """Make room for *size* characters; validates an invalid string."""
        _unsigned("size", size)
        if self._buf is None:
            self._buf = ""
        return True

    def assign(self, value: _TextLike) -> ArduinoString:
        """Replace the contents with a copy of *value*; None invalidates."""
        self._buf = _text_of(value)
        return self

    def take(self, other: ArduinoString) -> ArduinoString:
        """Move the contents of *other* into this string, leaving *other* invalid."""
        if other is not self:
            self._buf = other._buf
            other._buf = None
        return self

    def concat(self, value: object) -> bool:
        """Append *value*; return False (leaving the string unchanged) on failure."""
        if isinstance(value, int):
            text: str | None = _integer_text(value, 10)
        elif isinstance(value, float):
            text = format_fixed(value, 4, 2)
        else:
            text = _text_of(value)
        if text is None:
            return False
        if text:
            self._buf = (self._buf or "") + text
        return True

    # -- comparison ---------------------------------------------------------

    def compare_to(self, other: _TextLike) -> int:
        """Return a negative, zero or positive number as ``strcmp`` does."""
        mine, theirs = self._buf, _text_of(other)
        if mine is None or theirs is None:
            if theirs:
                return -ord(theirs[0])
            if mine:
                return ord(mine[0])
            return 0
        return _strcmp(mine, theirs)

    def equals(self, other: _TextLike) -> bool:
        """Return True if both hold the same text; invalid equals empty."""
        theirs = _text_of(other)
        if len(self) == 0:
            return not theirs
        if theirs is None:
            return False
        return self._buf == theirs

    def equals_ignore_case(self, other: _TextLike) -> bool:
        """Compare ignoring ASCII letter case."""
        if other is self:
            return True
        theirs = _text_of(other) or ""
        mine = self._buf or ""
        if len(mine) != len(theirs):
            return False
        return mine.translate(_TO_LOWER) == theirs.translate(_TO_LOWER)

    def starts_with(self, prefix: _TextLike, offset: int | None = None) -> bool:
        """Return True if *prefix* occurs at *offset* (default 0)."""
        theirs = _text_of(prefix)
        if offset is None:
            if len(self) < len(theirs or ""):
                return False
            offset = 0
        _unsigned("offset", offset)
        if self._buf is None or theirs is None:
            return False
        if offset > len(self._buf) - len(theirs):
            return False
        return self._buf.startswith(theirs, offset)

    def ends_with(self, suffix: _TextLike) -> bool:
        """Return True if the string ends with *suffix*."""
        theirs = _text_of(suffix)
        if self._buf is None or theirs is None or len(self._buf) < len(theirs):
            return False
        return self._buf.endswith(theirs)

    # -- character access ---------------------------------------------------

    def char_at(self, index: int) -> str:
        """Return the character at *index*, or ``"\\0"`` when out of range."""
        _unsigned("index", index)
        if self._buf is None or index >= len(self._buf):
            return "\0"
        return self._buf[index]

    def set_char_at(self, index: int, char: str) -> None:
        """Replace the character at *index*; out-of-range indexes are ignored."""
        _unsigned("index", index)
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("char must be a single character")
        if self._buf is not None and index < len(self._buf):
            self._buf = self._buf[:index] + char + self._buf[index + 1 :]

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Return what a buffer of *bufsize* bytes would receive, less the terminator."""
        _unsigned("bufsize", bufsize)
        _unsigned("index", index)
        if bufsize == 0 or index >= len(self):
            return b""
        count = min(bufsize - 1, len(self) - index)
        return self._buf[index : index + count].encode("latin-1")

    # -- search -------------------------------------------------------------

    def index_of(self, target: _TextLike, from_index: int = 0) -> int:
        """Return the first position of *target* at or after *from_index*, or -1."""
        _unsigned("from_index", from_index)
        needle = _text_of(target)
        if needle is None or from_index >= len(self):
            return -1
        return self._buf.find(needle, from_index)

    def last_index_of(self, target: _TextLike, from_index: int | None = None) -> int:
        """Return the last position of *target* starting at or before *from_index*.

        A one-character ``str`` is searched as a character: a *from_index*
        past the end gives -1. Any other target is searched as a string,
        and a *from_index* past the end is clamped to the last character.
        """
        text = self._buf or ""
        if isinstance(target, str) and len(target) == 1:
            if from_index is None:
                from_index = len(text) - 1
                if from_index < 0:
                    return -1
            _unsigned("from_index", from_index)
            if from_index >= len(text):
                return -1
            return text.rfind(target, 0, from_index + 1)
        needle = _text_of(target) or ""
        if from_index is None:
            if len(needle) > len(text):
                return -1
            from_index = len(text) - len(needle)
        _unsigned("from_index", from_index)
        return _last_index_of_text(text, needle, from_index)

    def substring(self, begin: int, end: int | None = None) -> ArduinoString:
        """Return the text between *begin* and *end*; the bounds may be swapped."""
        _unsigned("begin", begin)
        if end is None:
            end = len(self)
        _unsigned("end", end)
        if begin > end:
            begin, end = end, begin
        if begin >= len(self):
            return ArduinoString()
        return ArduinoString(self._buf[begin : min(end, len(self))])

    # -- modification -------------------------------------------------------

    def replace(self, find: _TextLike, replacement: _TextLike) -> None:
        """Replace occurrences of *find* with *replacement* in place.

        When the lengths differ the replacements are made from the end of
        the string towards its start.
        """
        text = self._buf
        needle = _text_of(find) or ""
        substitute = _text_of(replacement) or ""
        if not text or not needle:
            return
        if len(substitute) == len(needle):
            self._buf = text.replace(needle, substitute)
            return
        if text.count(needle) == 0:
            return
        index = len(text) - 1
        while index >= 0:
            index = _last_index_of_text(text, needle, index)
            if index < 0:
                break
            text = text[:index] + substitute + text[index + len(needle) :]
            index -= 1
        self._buf = text

    def remove(self, index: int, count: int | None = None) -> None:
        """Remove *count* characters from *index* (default: to the end)."""
        _unsigned("index", index)
        if count is not None:
            _unsigned("count", count)
        if index >= len(self) or count == 0:
            return
        stop = len(self) if count is None else min(index + count, len(self))
        self._buf = self._buf[:index] + self._buf[stop:]

    def to_lower_case(self) -> None:
        """Lower-case the ASCII letters in place."""
        if self._buf is not None:
            self._buf = self._buf.translate(_TO_LOWER)

    def to_upper_case(self) -> None:
        """Upper-case the ASCII letters in place."""
        if self._buf is not None:
            self._buf = self._buf.translate(_TO_UPPER)

    def trim(self) -> None:
        """Strip leading and trailing whitespace in place."""
        if self._buf:
            self._buf = self._buf.strip(_SPACE)

    # -- parsing ------------------------------------------------------------

    def to_int(self) -> int:
        """Read a leading decimal integer; 0 if there is none."""
        return parse_long(self._buf) if self._buf is not None else 0

    def to_float(self) -> float:
        """Read a leading number, rounded to single precision."""
        return to_float32(self.to_double())

    def to_double(self) -> float:
        """Read a leading floating-point number; 0.0 if there is none."""
        return parse_double(self._buf) if self._buf is not None else 0.0