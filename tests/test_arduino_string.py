import pytest

from wirestring.arduino_string import ArduinoString


# -- indexOf -----------------------------------------------------------------

def test_index_of_char_empty():
    assert ArduinoString().index_of("a") == -1


def test_index_of_char_missing():
    assert ArduinoString("Hello").index_of("a") == -1


def test_index_of_char_found():
    assert ArduinoString("Hello").index_of("l") == 2


def test_index_of_char_from_index():
    assert ArduinoString().index_of("a", 5) == -1
    assert ArduinoString("Hallo").index_of("a", 3) == -1
    assert ArduinoString("Hello").index_of("l", 3) == 3


def test_index_of_string():
    search = ArduinoString("Arduino")
    assert ArduinoString().index_of(search) == -1
    assert ArduinoString("Hallo").index_of(search) == -1
    assert ArduinoString("Hello Arduino!").index_of(search) == 6


def test_index_of_string_from_index():
    search = ArduinoString("Arduino")
    assert ArduinoString().index_of(search, 3) == -1
    assert ArduinoString("Hallo").index_of(search, 3) == -1
    assert ArduinoString("Hello Arduino!").index_of(search, 3) == 6
    assert ArduinoString("Hello Arduino!").index_of(search, 8) == -1


# -- operators -----------------------------------------------------------------

def test_add_string():
    assert ArduinoString("Hello Arduino") == ArduinoString("Hello ") + ArduinoString("Arduino")


def test_add_str():
    assert ArduinoString("Hello Arduino") == ArduinoString("Hello ") + "Arduino"


def test_add_char():
    assert ArduinoString("Hello!") == ArduinoString("Hello") + "!"


@pytest.mark.parametrize(
    "number, expected",
    [(65, "Hello 65"), (1, "Hello 1"), (-1, "Hello -1"), (1.234, "Hello 1.23"), (5.678, "Hello 5.68")],
)
def test_add_numbers(number, expected):
    assert ArduinoString(expected) == ArduinoString("Hello ") + number


def test_assign_from_sum():
    result = ArduinoString("Hello ") + "Arduino"
    assert result == "Hello Arduino"


def test_assign_invalid_second():
    first = ArduinoString("Hello")
    second = ArduinoString(None)
    first.assign(second)
    assert first == second
    assert not first


def test_assign_none_changes_string():
    s = ArduinoString("Hello")
    s.assign(None)
    assert s.equals("Hello") is False
    assert len(s) == 0


def test_assign_none_invalidates():
    s = ArduinoString("Hello")
    s.assign(None)
    assert not s


def test_assign_to_invalid_first():
    first = ArduinoString(None)
    second = ArduinoString("Hello")
    first.assign(second)
    assert first == second


def test_take_moves_contents():
    source = ArduinoString("Hello")
    target = ArduinoString("Arduino")
    target.take(source)
    assert target == "Hello"
    assert not source


def test_take_sum():
    target = ArduinoString("Arduino")
    target.take(ArduinoString("Hello") + "!")
    assert target == "Hello!"


def test_radd_and_iadd():
    assert "Hi " + ArduinoString("there") == "Hi there"
    s = ArduinoString("a")
    s += "b"
    s += 3
    assert str(s) == "ab3"


def test_add_none_gives_invalid():
    result = ArduinoString("x") + None
    assert result.is_valid() is False
    assert len(result) == 0


# -- toInt -----------------------------------------------------------------

def test_to_int_empty():
    assert ArduinoString().to_int() == 0


def test_to_int_no_number():
    assert ArduinoString("abc").to_int() == 0


def test_to_int_number():
    assert ArduinoString("-1").to_int() == -1


def test_to_int_invalid():
    assert ArduinoString(None).to_int() == 0


# -- further behaviour ------------------------------------------------------

def test_integer_constructor_bases():
    assert str(ArduinoString(255, 16)) == "ff"
    assert str(ArduinoString(5, 2)) == "101"
    assert str(ArduinoString(-1, 16)) == "ffffffff"
    assert str(ArduinoString(-42)) == "-42"


def test_float_constructor():
    assert str(ArduinoString(1.5)) == "1.50"
    assert str(ArduinoString(3.14159, decimal_places=20)) == "3.1415900000"


def test_constructor_rejects_mismatched_options():
    with pytest.raises(TypeError):
        ArduinoString("abc", 16)
    with pytest.raises(TypeError):
        ArduinoString(1.5, 16)


def test_concat_results():
    s = ArduinoString(None)
    assert s.concat("") is True
    assert not s
    assert s.concat("x") is True
    assert s == "x"
    assert s.concat(None) is False
    assert s == "x"


def test_reserve_validates():
    s = ArduinoString(None)
    assert s.reserve(10) is True
    assert s.is_valid()
    assert s.is_empty()


def test_comparisons():
    assert ArduinoString("a").compare_to("b") < 0
    assert ArduinoString("abc").compare_to("ab") > 0
    assert ArduinoString("abc").compare_to(ArduinoString("abc")) == 0
    assert ArduinoString("abc") < "abd"
    assert "abd" > ArduinoString("abc")
    assert ArduinoString("b") >= "b"
    assert ArduinoString(None).compare_to("a") == -ord("a")


def test_equals_ignore_case():
    assert ArduinoString("HeLLo").equals_ignore_case("hello")
    assert not ArduinoString("Hello").equals_ignore_case("Help!")


def test_starts_and_ends_with():
    s = ArduinoString("Hello")
    assert s.starts_with("He")
    assert s.starts_with("ll", 2)
    assert not s.starts_with("Hello!")
    assert s.ends_with("lo")
    assert not s.ends_with("He")


def test_char_access():
    s = ArduinoString("Hello")
    assert s.char_at(1) == "e"
    assert s[10] == "\0"
    s.set_char_at(0, "J")
    s.set_char_at(9, "x")
    assert s == "Jello"
    assert list(s) == ["J", "e", "l", "l", "o"]


def test_negative_index_raises():
    with pytest.raises(ValueError):
        ArduinoString("Hello").char_at(-1)
    with pytest.raises(ValueError):
        ArduinoString("Hello").remove(-1)


def test_get_bytes():
    s = ArduinoString("Hello")
    assert s.get_bytes(3) == b"He"
    assert s.get_bytes(10, 1) == b"ello"
    assert s.get_bytes(10, 7) == b""


def test_last_index_of():
    s = ArduinoString("Hello")
    assert s.last_index_of("l") == 3
    assert s.last_index_of("l", 2) == 2
    assert s.last_index_of("l", 5) == -1
    assert s.last_index_of(ArduinoString("l"), 10) == 3
    assert s.last_index_of("ll") == 2


def test_substring():
    s = ArduinoString("Hello")
    assert s.substring(3, 1) == "el"
    assert s.substring(2) == "llo"
    empty = s.substring(10)
    assert empty.is_valid() and empty.is_empty()


def test_replace():
    s = ArduinoString("Hello World")
    s.replace("o", "0")
    assert s == "Hell0 W0rld"
    s = ArduinoString("Hello World")
    s.replace("l", "LL")
    assert s == "HeLLLLo WorLLd"
    s = ArduinoString("aaa")
    s.replace("aa", "b")
    assert s == "ab"


def test_remove():
    s = ArduinoString("Hello")
    s.remove(1, 2)
    assert s == "Hlo"
    s = ArduinoString("Hello")
    s.remove(2)
    assert s == "He"


def test_case_and_trim():
    s = ArduinoString("  \t Hi There \n")
    s.trim()
    assert s == "Hi There"
    s.to_upper_case()
    assert s == "HI THERE"
    s.to_lower_case()
    assert s == "hi there"


def test_to_float_and_double():
    assert ArduinoString("1.5").to_float() == 1.5
    assert ArduinoString("3.25abc").to_double() == 3.25
    assert ArduinoString(None).to_double() == 0.0