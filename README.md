# wirestring

A mutable string type that behaves like the `String` class found in
microcontroller frameworks, together with the number-formatting and parsing
helpers it relies on and the classic `Bxxxxxxxx` binary constants.

It is useful when you need to reproduce, test or simulate firmware string
handling in Python: the same search results, the same `-1` "not found" values,
the same behaviour around invalid (null) strings, and the same number
formatting.

## Installation

```
pip install wirestring
```

No runtime dependencies. Python 3.10 or later.

## ArduinoString

```python
from wirestring.arduino_string import ArduinoString

s = ArduinoString("Hello ")
s += "Arduino"
assert s == "Hello Arduino"
assert s.index_of("Arduino") == 6
assert s.index_of("l") == 2
assert s.last_index_of("o") == 12

s.to_upper_case()
s.replace("ARDUINO", "World")
assert str(s) == "HELLO World"

# Numbers are formatted as the C library routines would format them
assert ArduinoString(255, base=16) == "ff"
assert ArduinoString(1.234) == "1.23"
assert ArduinoString("Hello ") + 5.678 == "Hello 5.68"

# Parsing
assert ArduinoString("-1").to_int() == -1
assert ArduinoString("abc").to_int() == 0
```

A string built from `None` is *invalid*: it is falsy and behaves as empty in
most operations. `reserve()` or assigning a value makes it valid again.

```python
s = ArduinoString(None)
assert not s.is_valid()
s.assign("text")
assert s.is_valid()
```

Indexes are unsigned: passing a negative index, offset or count raises
`ValueError`. Out-of-range reads return `"\0"` and out-of-range writes are
ignored, rather than raising `IndexError`.

Main methods: `concat`, `compare_to`, `equals`, `equals_ignore_case`,
`starts_with`, `ends_with`, `char_at`, `set_char_at`, `get_bytes`, `index_of`,
`last_index_of`, `substring`, `replace`, `remove`, `to_lower_case`,
`to_upper_case`, `trim`, `to_int`, `to_float`, `to_double`, `reserve`,
`assign`, `take`, `is_valid`, `is_empty`. The usual comparison operators,
`+`, `+=`, `len()`, iteration and indexing (including slices) also work.

## Conversions

```python
from wirestring.conversions import format_integer, format_fixed, parse_long, parse_double, to_float32

format_integer(-1, 10, 32, True)   # "-1"
format_integer(-1, 16, 32, True)   # "ffffffff" (minus sign in base 10 only)
format_fixed(3.14159, 6, 2)        # "  3.14"
parse_long("  42abc")              # 42
parse_double("1.5e2x")             # 150.0
to_float32(0.1)                    # 0.10000000149011612
```

## Binary constants

```python
from wirestring.constants import BINARY_CONSTANTS, binary_value, is_binary_name

binary_value("B00000101")   # 5, with a DeprecationWarning suggesting 0b00000101
is_binary_name("B102")      # False
BINARY_CONSTANTS["B11"]     # 3 (read-only mapping, no warning)
```

## What it does not do

This is a library only: there is no command-line tool, and it provides no
streams, printing or I/O of any kind, just the string type and its helpers.

## Running the tests

```
pip install "wirestring[test]"
pytest
```