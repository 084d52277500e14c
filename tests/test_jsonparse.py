import pytest

from saffron.jsonparse import ParseError, parse_json


def test_parse_null():
    assert parse_json("null") is None


def test_parse_boolean_true():
    assert parse_json("true") is True


def test_parse_boolean_false():
    assert parse_json("false") is False


def test_parse_number_integer():
    result = parse_json("42")
    assert result == 42.0
    assert isinstance(result, float)


def test_parse_number_float():
    assert parse_json("42.195") == 42.195


def test_parse_number_negative():
    assert parse_json("-42.5") == -42.5


def test_parse_string_simple():
    assert parse_json('"hello world"') == "hello world"


def test_parse_string_with_escapes():
    assert parse_json(r'"line1\nline2\ttab"') == "line1\nline2\ttab"


def test_parse_string_with_quotes():
    assert parse_json(r'"He said \"hello\""') == 'He said "hello"'


def test_parse_empty_array():
    assert parse_json("[]") == []


def test_parse_array_numbers():
    assert parse_json("[1, 2, 3, 4, 5]") == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_parse_array_mixed_types():
    result = parse_json('[1, "text", true, null, false]')
    assert result == [1.0, "text", True, None, False]
    assert result[2] is True
    assert result[4] is False


def test_parse_nested_arrays():
    assert parse_json("[[1, 2], [3, 4], [5]]") == [[1.0, 2.0], [3.0, 4.0], [5.0]]


def test_parse_empty_object():
    assert parse_json("{}") == {}


def test_parse_simple_object():
    result = parse_json('{"name": "Saffron", "version": 1}')
    assert len(result) == 2
    assert result["name"] == "Saffron"
    assert result["version"] == 1.0


def test_parse_object_with_all_types():
    result = parse_json('{"string": "value", "number": 42, "bool": true, "null": null}')
    assert len(result) == 4
    assert result["string"] == "value"
    assert result["number"] == 42.0
    assert result["bool"] is True
    assert result["null"] is None


def test_parse_nested_objects():
    result = parse_json('{"user": {"id": 1, "name": "Alice"}, "active": true}')
    assert len(result) == 2
    assert result["active"] is True
    assert result["user"] == {"id": 1.0, "name": "Alice"}


def test_parse_object_with_array():
    result = parse_json('{"items": [1, 2, 3], "count": 3}')
    assert len(result) == 2
    assert result["count"] == 3.0
    assert result["items"] == [1.0, 2.0, 3.0]


def test_parse_complex_structure():
    source = """{
        "project": "Saffron",
        "version": 0.1,
        "features": ["fast", "minimal", "rust"],
        "config": {
            "port": 8080,
            "ssl": true
        }
    }"""
    result = parse_json(source)
    assert result["project"] == "Saffron"
    assert result["version"] == 0.1
    assert len(result["features"]) == 3
    assert result["config"]["port"] == 8080.0
    assert result["config"]["ssl"] is True


def test_parse_whitespace_handling():
    result = parse_json('  \n\t  {  \n  "key"  :  "value"  \n  }  \n  ')
    assert result == {"key": "value"}


@pytest.mark.parametrize(
    "source",
    [
        '"unclosed string',
        "undefined",
        '{"key" "value"}',
        '{"key1": "value1" "key2": "value2"}',
        "[1 2 3]",
        '{"key": "value"',
        "[1, 2, 3",
        '{"key": "value",}',
        "[1, 2, 3,]",
        "123.456.789",
        '{123: "value"}',
    ],
)
def test_errors(source):
    with pytest.raises(ParseError):
        parse_json(source)


def test_parse_single_quotes():
    assert parse_json("'hello'") == "hello"


def test_parse_object_with_single_quotes():
    assert parse_json("{'key': 'value'}") == {"key": "value"}


def test_error_message_prefix():
    with pytest.raises(ParseError) as info:
        parse_json('"unclosed string')
    assert str(info.value).startswith("ParseError: Unterminated string")
    assert info.value.message.startswith("Unterminated string")


def test_unexpected_token_message():
    with pytest.raises(ParseError, match="Unexpected token"):
        parse_json("undefined")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_json("[1 2]")