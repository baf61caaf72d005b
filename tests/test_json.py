import pytest
from hypothesis import given, strategies as st

from miniparsec.Json import (
    JsonArray, JsonBool, JsonDecodeError, JsonNull, JsonNumber, JsonObject, JsonString,
    escaped_char, json_array, json_document, json_object, json_value, key_value, loads, string_literal,
)
from miniparsec.Parsec import Error, Ok
from miniparsec.Prim import parse, run_parser


def run(parser, input_str):
    return run_parser(parser, input_str)


# --- Literals ---

def test_null():
    assert parse(json_value(), "null") == Ok(JsonNull(), None)


def test_bools():
    assert parse(json_value(), "true") == Ok(JsonBool(True), None)
    assert parse(json_value(), "false") == Ok(JsonBool(False), None)


def test_literals_are_trimmed():
    res = parse(json_value(), "  null \n")
    assert res.value == JsonNull()
    assert res.pos == 8


@given(st.integers(min_value=-10 ** 9, max_value=10 ** 9))
def test_integral_numbers(n):
    assert run(json_value(), str(n))[0] == JsonNumber(float(n))


def test_numbers():
    assert run(json_value(), "12.25")[0] == JsonNumber(12.25)
    assert run(json_value(), "-0.5")[0] == JsonNumber(-0.5)
    assert run(json_value(), "1e3")[0] == JsonNumber(1000.0)


# --- Strings ---

def test_string():
    assert run(json_value(), '"hello world"')[0] == JsonString("hello world")
    assert run(json_value(), '""')[0] == JsonString("")


@pytest.mark.parametrize("code, expected", [
    ("0", "\0"), ("b", "\b"), ("t", "\t"), ("n", "\n"),
    ("v", "\v"), ("f", "\f"), ("r", "\r"),
])
def test_escape_codes(code, expected):
    assert run(escaped_char(), code)[0] == expected
    assert run(string_literal(), '"a\\' + code + 'b"')[0] == "a" + expected + "b"


@pytest.mark.parametrize("c", ['"', '\\', '/', 'q', 'u'])
def test_other_escapes_pass_through(c):
    assert run(escaped_char(), c)[0] == c
    assert run(string_literal(), '"\\' + c + '"')[0] == c


@given(st.text(alphabet=st.characters(exclude_characters='"\\', max_codepoint=0xFFFF)))
def test_plain_strings(s):
    assert run(string_literal(), '"' + s + '"')[0] == s


def test_unterminated_string():
    res = parse(json_value(), '"abc')
    assert isinstance(res, Error)


# --- Arrays ---

def test_array():
    assert run(json_value(), "[1, 2]")[0] == JsonArray([JsonNumber(1.0), JsonNumber(2.0)])


def test_empty_array():
    assert run(json_value(), "[]")[0] == JsonArray([])
    assert run(json_value(), "[ ]")[0] == JsonArray([])


def test_nested_array():
    expected = JsonArray([JsonArray([JsonNull()]), JsonBool(True), JsonString("x")])
    assert run(json_array(), ' [ [null] , true, "x" ] ')[0] == expected


def test_array_rejects_trailing_comma():
    res, err = run(json_value(), "[1, 2,]")
    assert res is None
    assert err is not None


def test_array_missing_close():
    res = parse(json_value(), "[1, 2")
    assert isinstance(res, Error)
    assert 0 <= res.pos <= len("[1, 2")


# --- Objects ---

def test_object_key_order_does_not_matter():
    res, err = run(json_value(), '{"xyz": 2, "abc": 1}')
    assert err is None
    assert res == JsonObject({"abc": JsonNumber(1.0), "xyz": JsonNumber(2.0)})
    assert list(res.members) == ["abc", "xyz"]


def test_empty_object():
    assert run(json_object(), "{}")[0] == JsonObject({})
    assert run(json_object(), "{ \n }")[0] == JsonObject({})


def test_object_duplicate_keys_last_wins():
    assert run(json_value(), '{"a": 1, "a": 2}')[0] == JsonObject({"a": JsonNumber(2.0)})


def test_key_value():
    assert run(key_value(), '"k" : [true]')[0] == ("k", JsonArray([JsonBool(True)]))


def test_nested_object():
    text = '{"list": [1, {"inner": null}], "flag": false, "name": "miniparsec"}'
    expected = JsonObject({
        "list": JsonArray([JsonNumber(1.0), JsonObject({"inner": JsonNull()})]),
        "flag": JsonBool(False),
        "name": JsonString("miniparsec"),
    })
    assert run(json_value(), text)[0] == expected


def test_object_rejects_trailing_comma():
    assert run(json_value(), '{"a": 1,}')[0] is None


def test_object_requires_string_keys():
    assert run(json_value(), '{a: 1}')[0] is None


# --- Structural equality ---

def test_equality_checks_the_case():
    assert JsonBool(True) != JsonNumber(1.0)
    assert JsonString("null") != JsonNull()
    assert JsonArray([]) != JsonObject({})


# --- Documents ---

def test_json_value_ignores_trailing_input():
    res = parse(json_value(), "null garbage")
    assert res.value == JsonNull()
    assert res.pos == 5


def test_json_document_requires_end_of_input():
    res = parse(json_document(), "null garbage")
    assert res == Error(["expect end of file"], None)
    assert res.pos == 5


def test_loads():
    assert loads(' {"a": [1, 2.5, "s"]} ') == JsonObject({
        "a": JsonArray([JsonNumber(1.0), JsonNumber(2.5), JsonString("s")])
    })


def test_loads_raises(caplog):
    caplog.set_level("DEBUG", logger="miniparsec.Json")
    with pytest.raises(JsonDecodeError) as excinfo:
        loads("[1, 2,]")
    assert excinfo.value.expected
    assert 0 <= excinfo.value.pos <= len("[1, 2,]")
    assert isinstance(excinfo.value, ValueError)
    assert "rejected JSON document" in caplog.text


def test_loads_empty_input():
    with pytest.raises(JsonDecodeError):
        loads("")


def test_numbers_beyond_float_range():
    assert loads("1" + "0" * 400) == JsonNumber(float("inf"))
    assert loads("[-" + "9" * 400 + "]") == JsonArray([JsonNumber(float("-inf"))])


def test_number_with_large_exponent_in_range():
    assert loads("0.001e310") == JsonNumber(1e307)


def test_json_value_is_reused():
    assert json_value() is json_value()
