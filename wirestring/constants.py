"""Named binary constants of the form ``B0`` … ``B11111111``.

Each name is the letter ``B`` followed by one to eight binary digits, and
its value is the number those digits spell. The names are deprecated in
favour of ordinary ``0b`` literals, so looking one up issues a
``DeprecationWarning`` that names the literal to use instead.
"""

from __future__ import annotations

import re
import warnings
from collections.abc import Mapping
from types import MappingProxyType

__all__ = ["BINARY_CONSTANTS", "MAX_DIGITS", "binary_value", "is_binary_name"]

MAX_DIGITS = 8

_NAME_PATTERN = re.compile(rf"B([01]{{1,{MAX_DIGITS}}})")


def _build_table() -> Mapping[str, int]:
    table = {
        f"B{value:0{width}b}": value
        for width in range(1, MAX_DIGITS + 1)
        for value in range(1 << width)
    }
    return MappingProxyType(table)


BINARY_CONSTANTS: Mapping[str, int] = _build_table()
"""Every binary constant name mapped to its value (read-only)."""


def is_binary_name(name: object) -> bool:
    """Return True if *name* is one of the binary constant names."""
    return isinstance(name, str) and _NAME_PATTERN.fullmatch(name) is not None


def binary_value(name: str) -> int:
    """Return the value of the binary constant *name*.

    Raises ``TypeError`` for a non-string and ``ValueError`` for a string
    that is not a binary constant name. Issues a ``DeprecationWarning``
    recommending the equivalent ``0b`` literal.
    """
    if not isinstance(name, str):
        raise TypeError(f"constant name must be a str, not {type(name).__name__}")
    match = _NAME_PATTERN.fullmatch(name)
    if match is None:
        raise ValueError(f"not a binary constant name: {name!r}")
    digits = match.group(1)
    warnings.warn(f"use 0b{digits} instead", DeprecationWarning, stacklevel=2)
    return BINARY_CONSTANTS[name]