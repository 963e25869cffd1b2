"""Number-to-text and text-to-number conversions used by the string type.

The formatting helpers follow the classic C library routines: integers are
written in any base from 2 to 36 with lower-case digits, and fixed-point
numbers are written as ``printf("%*.*f")`` would write them. The parsers
follow ``atol`` and ``atof``: they read the longest valid prefix and return
zero when there is none.
"""

from __future__ import annotations

import math
import re
import struct

__all__ = [
    "ARDUINO_API_VERSION",
    "DBL_MAX_DECIMAL_PLACES",
    "FLT_MAX_DECIMAL_PLACES",
    "LONG_MAX",
    "LONG_MIN",
    "format_fixed",
    "format_integer",
    "parse_double",
    "parse_long",
    "to_float32",
]

ARDUINO_API_VERSION = 10501
"""API version number (1.5.1)."""

FLT_MAX_DECIMAL_PLACES = 10
"""Most decimal places a single-precision value is formatted with."""

DBL_MAX_DECIMAL_PLACES = FLT_MAX_DECIMAL_PLACES
"""Most decimal places a double-precision value is formatted with."""

LONG_MAX = (1 << 63) - 1
LONG_MIN = -(1 << 63)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_SPACE = r"[ \t\n\v\f\r]*"

_LONG_PATTERN = re.compile(_SPACE + r"([+-]?[0-9]+)", re.ASCII)

_DOUBLE_PATTERN = re.compile(
    _SPACE
    + r"""
    (?P<sign>[+-]?)
    (?:
        (?P<special>inf(?:inity)?|nan(?:\([0-9a-z_]*\))?)
      | (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
      | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)
    )
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE,
)


def _digits(value: int, base: int) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, digit = divmod(value, base)
        out.append(_DIGITS[digit])
    return "".join(reversed(out))


def format_integer(
    value: int, base: int = 10, bits: int = 32, signed: bool = True
) -> str:
    """Write *value* in *base* as a C integer of the given width would be.

    The value is first wrapped to a *bits*-wide integer, signed or not.
    A negative signed value gets a leading minus sign in base 10 only;
    in any other base its two's-complement bit pattern is written.
    """
    if not isinstance(value, int):
        raise TypeError(f"value must be an int, not {type(value).__name__}")
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, not {base}")
    if bits < 1:
        raise ValueError(f"bits must be positive, not {bits}")
    modulus = 1 << bits
    wrapped = value % modulus
    if signed and base == 10 and wrapped >= modulus >> 1:
        return "-" + _digits(modulus - wrapped, base)
    return _digits(wrapped, base)


def format_fixed(value: float, width: int, precision: int) -> str:
    """Write *value* with *precision* decimals, padded to *width* characters.

    A positive width pads on the left, a negative one on the right; the
    result is never truncated.
    """
    if precision < 0:
        raise ValueError(f"precision must not be negative, not {precision}")
    align = "<" if width < 0 else ">"
    return f"{float(value):{align}{abs(width)}.{precision}f}"


def parse_long(text: str) -> int:
    """Read a decimal integer from the start of *text*, as ``atol`` does.

    Leading whitespace and a sign are accepted; reading stops at the first
    non-digit. Returns 0 when no digits are found. Results outside the
    64-bit range are clamped to it.
    """
    match = _LONG_PATTERN.match(text)
    if match is None:
        return 0
    number = int(match.group(1))
    return max(LONG_MIN, min(LONG_MAX, number))


def parse_double(text: str) -> float:
    """Read a floating-point number from the start of *text*, as ``atof`` does.

    Accepts decimal and hexadecimal notation, ``inf``/``infinity`` and
    ``nan``. Returns 0.0 when no number is found.
    """
    match = _DOUBLE_PATTERN.match(text)
    if match is None:
        return 0.0
    negative = match.group("sign") == "-"
    special = match.group("special")
    if special is not None:
        number = math.nan if special[0] in "nN" else math.inf
    elif match.group("hex") is not None:
        try:
            number = float.fromhex(match.group("hex"))
        except OverflowError:
            number = math.inf
    else:
        number = float(match.group("dec"))
    return -number if negative else number


def to_float32(value: float) -> float:
    """Round *value* to the nearest single-precision float.

    Values too large for single precision become infinities of the same sign.
    """
    value = float(value)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)