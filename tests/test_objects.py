import math

import pytest

from utilkit.objects import (
    InvalidInputError,
    ObjectError,
    SerializationError,
    invert,
    map_keys,
    map_values,
    merge,
    omit,
    omit_by,
    pick,
    pick_by,
    remove_non_serializable_props,
    safe_json_stringify,
)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def test_pick():
    obj = {"name": "Alice", "age": 30, "city": "New York"}
    result = pick(obj, ["name", "age"])
    assert result == {"name": "Alice", "age": 30}
    assert "city" not in result


def test_pick_empty_keys():
    assert pick({"name": "Alice"}, []) == {}


def test_pick_missing_key_and_non_object():
    assert pick({"a": 1}, ["a", "zzz"]) == {"a": 1}
    assert pick([1, 2], ["a"]) == {}


def test_pick_copies_values():
    obj = {"inner": {"x": 1}}
    result = pick(obj, ["inner"])
    result["inner"]["x"] = 2
    assert obj["inner"]["x"] == 1


def test_pick_by():
    obj = {"name": "Alice", "age": 30, "score": 85}
    result = pick_by(obj, _is_number)
    assert result == {"age": 30, "score": 85}


def test_pick_by_not_null():
    obj = {"a": 1, "b": None, "c": "hello", "d": False}
    result = pick_by(obj, lambda value: value is not None)
    assert set(result) == {"a", "c", "d"}


def test_omit():
    obj = {"name": "Alice", "age": 30, "city": "New York"}
    result = omit(obj, ["age"])
    assert result == {"name": "Alice", "city": "New York"}


def test_omit_non_object_returns_copy():
    value = [1, 2, 3]
    result = omit(value, ["a"])
    assert result == [1, 2, 3]
    result.append(4)
    assert value == [1, 2, 3]


def test_omit_by():
    obj = {"name": "Alice", "age": 30, "score": 85}
    assert omit_by(obj, _is_number) == {"name": "Alice"}


def test_omit_by_non_object():
    assert omit_by("text", lambda value: True) == {}


def test_map_keys():
    obj = {"firstName": "Alice", "lastName": "Smith"}
    result = map_keys(obj, str.upper)
    assert result == {"FIRSTNAME": "Alice", "LASTNAME": "Smith"}


def test_map_values():
    obj = {"name": "alice", "city": "new york"}
    result = map_values(obj, lambda v: v.upper() if isinstance(v, str) else v)
    assert result == {"name": "ALICE", "city": "NEW YORK"}


def test_map_values_doubles_numbers():
    result = map_values({"a": 1, "b": 2, "c": 3}, lambda v: v * 2)
    assert result == {"a": 2, "b": 4, "c": 6}


def test_map_values_non_object():
    assert map_values(5, lambda v: v * 2) == 5


def test_merge():
    target = {"name": "Alice", "age": 30}
    result = merge(target, {"age": 31, "city": "New York"})
    assert result == {"name": "Alice", "age": 31, "city": "New York"}
    assert target is result


def test_merge_recursive_multiple_sources():
    target = {"a": 1, "b": {"x": 10}}
    result = merge(target, {"b": {"y": 20}, "c": 3}, {"d": 4})
    assert result == {"a": 1, "b": {"x": 10, "y": 20}, "c": 3, "d": 4}


def test_merge_replaces_non_object_values():
    target = {"a": {"x": 1}}
    assert merge(target, {"a": 5}) == {"a": 5}


def test_remove_non_serializable_props_keeps_null():
    obj = {"name": "Alice", "age": 30, "func": None}
    result = remove_non_serializable_props(obj)
    assert result == {"name": "Alice", "age": 30, "func": None}


def test_remove_non_serializable_props_drops_callables():
    obj = {"name": "Alice", "fn": len, "nested": {"s": {1, 2}, "ok": [1, print]}}
    result = remove_non_serializable_props(obj)
    assert result == {"name": "Alice", "nested": {"ok": [1]}}


def test_safe_json_stringify():
    result = safe_json_stringify({"name": "Alice", "age": 30})
    assert "Alice" in result
    assert "30" in result
    assert result == '{"name":"Alice","age":30}'


def test_safe_json_stringify_drops_functions():
    assert safe_json_stringify({"a": 1, "f": len}) == '{"a":1}'


def test_safe_json_stringify_nan_raises():
    with pytest.raises(SerializationError):
        safe_json_stringify({"x": math.nan})


def test_invert():
    result = invert({"a": "1", "b": "2", "c": "1"})
    assert result == {"1": "c", "2": "b"}


def test_invert_with_non_string_values():
    result = invert({"a": 1, "b": True, "c": None})
    assert result == {"1": "a", "true": "b", "null": "c"}


def test_invert_skips_containers():
    assert invert({"a": [1], "b": {"x": 1}, "c": "z"}) == {"z": "c"}
    assert invert("nope") == {}


def test_object_error_display():
    error = SerializationError("test error")
    assert str(error) == "Serialization error: test error"
    assert isinstance(error, ObjectError)
    assert str(InvalidInputError("bad")) == "Invalid input: bad"