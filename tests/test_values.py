import pytest

from optspec.errors import ArgumentIncorrectType
from optspec.values import (
    CHAR,
    Value,
    integer,
    list_value,
    parse_bool,
    parse_char,
    parse_integer,
    parse_value,
    value,
)


@pytest.mark.parametrize("n", [0, 1, 7, 42, 1000, 123456789])
def test_integer_decimal_round_trip(n):
    assert parse_integer(str(n)) == n
    assert parse_integer(str(-n)) == -n


@pytest.mark.parametrize("n", [0, 5, 15, 31, 4096, 65535])
def test_integer_hex_round_trip(n):
    assert parse_integer(hex(n), 32, False) == n
    assert parse_integer(hex(n).upper().replace("X", "x"), 32, False) == n


def test_negative_hex():
    assert parse_integer(hex(-20)) == -20


def test_zero_forms():
    assert parse_integer("0") == 0
    assert parse_integer("0x0") == 0


def test_signed_8_bit_bounds():
    assert parse_integer("127", 8, True) == 127
    assert parse_integer("-128", 8, True) == -128
    with pytest.raises(ArgumentIncorrectType):
        parse_integer("128", 8, True)
    with pytest.raises(ArgumentIncorrectType):
        parse_integer("-129", 8, True)


def test_unsigned_8_bit_bounds():
    assert parse_integer("255", 8, False) == 255
    with pytest.raises(ArgumentIncorrectType):
        parse_integer("256", 8, False)


def test_unsigned_rejects_negative():
    with pytest.raises(ArgumentIncorrectType):
        parse_integer("-1", 32, False)


@pytest.mark.parametrize("text", ["", "abc", "12a", "-", "1.5", " 3", "0x"])
def test_integer_rejects_bad_text(text):
    with pytest.raises(ArgumentIncorrectType):
        parse_integer(text)


def test_integer_kind_validation():
    with pytest.raises(ValueError):
        integer(0)


@pytest.mark.parametrize("text", ["t", "T", "true", "True", "1"])
def test_bool_truthy(text):
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["f", "F", "false", "False", "0"])
def test_bool_falsy(text):
    assert parse_bool(text) is False


@pytest.mark.parametrize("text", ["TRUE", "yes", "", "2", "tru"])
def test_bool_rejects(text):
    with pytest.raises(ArgumentIncorrectType):
        parse_bool(text)


def test_char():
    assert parse_char("z") == "z"
    for bad in ["", "ab"]:
        with pytest.raises(ArgumentIncorrectType):
            parse_char(bad)


def test_parse_value_dispatch():
    assert parse_value("hello", str) == "hello"
    assert parse_value("True", bool) is True
    assert parse_value("-12", int) == -12
    assert parse_value("q", CHAR) == "q"
    assert parse_value("2.5", float) == 2.5
    assert parse_value("100", integer(8, False)) == 100


def test_parse_value_callable_error():
    with pytest.raises(ArgumentIncorrectType):
        parse_value("x", float)


def test_bool_value_defaults():
    v = value(bool)
    assert v.is_boolean
    assert (v.has_default, v.default) == (True, "false")
    assert (v.has_implicit, v.implicit) == (True, "true")
    v.parse_default()
    assert v.get() is False
    v.parse(v.implicit)
    assert v.get() is True


def test_fluent_setters_return_self():
    v = value(int)
    assert v.default_value("5") is v
    assert v.implicit_value("9") is v
    assert v.has_default and v.has_implicit
    v.parse_default()
    assert v.get() == 5
    assert v.no_implicit_value() is v
    assert v.has_implicit is False


def test_plain_value_has_no_defaults():
    v = value(str)
    assert not v.has_default
    assert not v.has_implicit
    assert not v.is_boolean
    assert v.get() == ""


def test_clone_copies_settings_not_storage():
    v = value(int).default_value("3")
    v.parse("11")
    c = v.clone()
    assert c.get() == 0
    assert c.default == "3" and c.has_default
    c.parse("4")
    assert v.get() == 11


def test_list_value_accumulates():
    v = list_value(str)
    assert v.is_container and not v.is_boolean
    v.parse("a,b")
    v.parse("c")
    assert v.get() == ["a", "b", "c"]


def test_list_value_trailing_delimiter():
    v = list_value(str)
    v.parse("x,")
    assert v.get() == ["x"]
    w = list_value(str)
    w.parse("")
    assert w.get() == []


def test_list_of_ints():
    v = list_value(int)
    v.parse("1,2,3")
    assert v.get() == [1, 2, 3]
    with pytest.raises(ArgumentIncorrectType):
        v.parse("4,x")


def test_list_of_bool_is_not_boolean():
    v = Value(bool, container=True)
    assert not v.is_boolean
    assert not v.has_default


def test_value_parse_error_propagates():
    v = value(integer(8, True))
    with pytest.raises(ArgumentIncorrectType):
        v.parse("300")