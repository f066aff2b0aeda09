"""Tests for JSONObject construction, storage and mutation."""

import pytest

from jsonbase import NULL, JSONArray, JSONError, JSONObject, Reason, WrongTypeError

STRING_KEY = "stringKey"
NUMBER_KEY = "numberKey"
OBJECT_KEY = "objectKey"
ARRAY_KEY = "arrayKey"
BOOLEAN_KEY = "booleanKey"
NOP_KEY = "notAKey"

STRING_VALUE = "stringValue"
NUMBER_VALUE = 12
OBJECT_VALUE = "{object: true}"
ARRAY_VALUE = "[true, false]"
BOOLEAN_VALUE = True

SAMPLE_JSON_OBJECT = (
    "{"
    f'{STRING_KEY}:"{STRING_VALUE}",'
    f"{NUMBER_KEY}:{NUMBER_VALUE},"
    f"{OBJECT_KEY}:{OBJECT_VALUE},"
    f"{ARRAY_KEY}:{ARRAY_VALUE},"
    f"{BOOLEAN_KEY}:true"
    "}"
)

KEY_VALUE_PAIRS = {
    STRING_KEY: STRING_VALUE,
    NUMBER_KEY: NUMBER_VALUE,
    OBJECT_KEY: JSONObject(OBJECT_VALUE),
    ARRAY_KEY: JSONArray(ARRAY_VALUE),
    BOOLEAN_KEY: BOOLEAN_VALUE,
}


def _check(obj: JSONObject) -> None:
    for key in KEY_VALUE_PAIRS:
        assert obj.get(key) is not None
        assert obj.opt(key) is not None
        assert obj.has(key)
    with pytest.raises(JSONError):
        obj.get(NOP_KEY)
    assert obj.opt(NOP_KEY) is None
    assert obj.is_null(NOP_KEY)

    assert obj.get_string(STRING_KEY) == STRING_VALUE
    assert obj.get_int(NUMBER_KEY) == NUMBER_VALUE
    assert obj.get_double(NUMBER_KEY) == pytest.approx(float(NUMBER_VALUE))
    assert obj.get_long(NUMBER_KEY) == NUMBER_VALUE
    assert type(obj.get_json_object(OBJECT_KEY)) is JSONObject
    assert type(obj.get_json_array(ARRAY_KEY)) is JSONArray
    assert obj.get_boolean(BOOLEAN_KEY) is BOOLEAN_VALUE

    assert obj.opt_string(NOP_KEY, "empty") == "empty"
    assert obj.opt_int(NOP_KEY, 20) == 20
    assert obj.opt_double(NOP_KEY, 20.0) == pytest.approx(20.0)
    assert obj.opt_long(NOP_KEY, 20) == 20
    assert obj.opt_boolean(NOP_KEY, True) is True

    assert set(JSONObject.get_names(obj)) == set(KEY_VALUE_PAIRS)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_constructor_with_empty_string():
    with pytest.raises(JSONError) as exc:
        JSONObject("")
    assert exc.value.reason is Reason.SYNTAX


def test_constructor_with_empty_json_object_string():
    assert JSONObject("{}").length() == 0


def test_string_constructor():
    _check(JSONObject(SAMPLE_JSON_OBJECT))


def test_copy_constructor():
    source = JSONObject(SAMPLE_JSON_OBJECT)
    _check(JSONObject(source, JSONObject(SAMPLE_JSON_OBJECT).keys()))


def test_copy_constructor_skips_missing_names():
    copied = JSONObject(JSONObject(SAMPLE_JSON_OBJECT), [STRING_KEY, NOP_KEY])
    assert copied.keys() == [STRING_KEY]


def test_copy_constructor_without_names_copies_all():
    source = JSONObject(SAMPLE_JSON_OBJECT)
    assert JSONObject(source) == source


def test_mapping_constructor():
    _check(JSONObject(KEY_VALUE_PAIRS))


def test_mapping_constructor_skips_none():
    assert not JSONObject({"a": None}).has("a")


def test_constructor_rejects_other_sources():
    with pytest.raises(JSONError) as exc:
        JSONObject(42)
    assert exc.value.reason is Reason.INVALID_ARGUMENT


# ---------------------------------------------------------------------------
# put / remove
# ---------------------------------------------------------------------------

def test_put():
    obj = JSONObject()
    for key, value in KEY_VALUE_PAIRS.items():
        obj.put(key, value)
        assert obj.has(key), f"jsonObject does not have the key, {key}"
        assert obj.get(key) == value


def test_put_wraps_plain_containers():
    obj = JSONObject().put("m", {"x": 1}).put("l", [1, "two"])
    assert obj.get_json_object("m").get_int("x") == 1
    assert obj.get_json_array("l").get_string(1) == "two"


def test_put_none_removes():
    obj = JSONObject({"a": 1})
    obj.put("a", None)
    assert not obj.has("a")


def test_put_null_key():
    with pytest.raises(JSONError) as exc:
        JSONObject().put(None, 1)
    assert exc.value.reason is Reason.INVALID_ARGUMENT


def test_put_non_finite():
    with pytest.raises(JSONError):
        JSONObject().put("n", float("inf"))


def test_put_integer_outside_long_range():
    obj = JSONObject()
    for bad in (2**63, 10**5000):
        with pytest.raises(JSONError) as exc:
            obj.put("n", bad)
        assert exc.value.reason is Reason.INVALID_ARGUMENT
    assert not obj.has("n")


def test_put_then_get_plain_containers_compare_equal():
    obj = JSONObject().put("m", {"x": 1, "y": [2]}).put("l", [1, "two"])
    assert obj.get("m") == {"x": 1, "y": [2]}
    assert {"x": 1, "y": [2]} == obj.get("m")
    assert obj.get("l") == [1, "two"]
    assert obj.get("m") != {"x": 2}
    assert obj.get("m") != {"x": object()}


def test_put_once_duplicate():
    obj = JSONObject().put_once("a", 1)
    with pytest.raises(JSONError) as exc:
        obj.put_once("a", 2)
    assert exc.value.reason is Reason.INVALID_ARGUMENT


def test_put_opt_ignores_none():
    obj = JSONObject().put_opt("a", None).put_opt(None, 1)
    assert obj.length() == 0


def test_remove():
    obj = JSONObject({"a": 1, "b": 2})
    assert obj.remove("a") == 1
    assert obj.remove("a") is None
    assert obj.keys() == ["b"]


def test_insertion_order_kept():
    obj = JSONObject().put("z", 1).put("a", 2).put("m", 3)
    assert list(obj) == ["z", "a", "m"]
    assert str(obj) == '{"z":1,"a":2,"m":3}'


def test_names():
    assert JSONObject().names() is None
    assert JSONObject.get_names(JSONObject()) is None
    assert JSONObject({"a": 1, "b": 2}).names() == JSONArray(["a", "b"])


def test_contains_and_len():
    obj = JSONObject({"a": NULL})
    assert "a" in obj
    assert 1 not in obj
    assert len(obj) == 1


# ---------------------------------------------------------------------------
# increment
# ---------------------------------------------------------------------------

def test_increment_int():
    obj = JSONObject().put("number", 7)
    obj.increment("number")
    assert obj.get("number") == 8
    assert isinstance(obj.get("number"), int)


def test_increment_large_int():
    obj = JSONObject().put("number", 7_000_000_000)
    obj.increment("number")
    assert obj.get("number") == 7_000_000_001


def test_increment_wraps_at_long_max():
    obj = JSONObject().put("number", 2**63 - 1)
    obj.increment("number")
    assert obj.get("number") == -(2**63)


def test_increment_double():
    obj = JSONObject().put("number", 5.6)
    obj.increment("number")
    assert obj.get("number") == pytest.approx(6.6)
    assert isinstance(obj.get("number"), float)


def test_increment():
    obj = JSONObject()
    obj.increment("number")
    assert obj.get("number") == 1
    assert isinstance(obj.get("number"), int)


def test_increment_repeated_keeps_type():
    obj = JSONObject().put("i", 3).put("f", 0.5)
    for _ in range(4):
        obj.increment("i").increment("f")
    assert obj.get("i") == 7 and type(obj.get("i")) is int
    assert obj.get("f") == 4.5 and type(obj.get("f")) is float


@pytest.mark.parametrize("value", ["1", True, NULL, [1]])
def test_increment_wrong_type(value):
    obj = JSONObject().put("x", value)
    with pytest.raises(WrongTypeError) as exc:
        obj.increment("x")
    assert exc.value.reason is Reason.WRONG_TYPE


# ---------------------------------------------------------------------------
# accumulate / conversion / equality
# ---------------------------------------------------------------------------

def test_accumulate():
    obj = JSONObject()
    obj.accumulate("k", 1)
    assert obj.get("k") == 1
    obj.accumulate("k", 2)
    assert obj.get("k") == JSONArray([1, 2])
    obj.accumulate("k", 3)
    assert obj.get("k") == JSONArray([1, 2, 3])


def test_accumulate_array_value_is_nested():
    obj = JSONObject().accumulate("k", JSONArray([1]))
    assert obj.get("k") == JSONArray([[1]])


def test_to_dict():
    obj = JSONObject('{"a": null, "b": [1, {"c": "d"}]}')
    assert obj.to_dict() == {"a": None, "b": [1, {"c": "d"}]}


def test_equality_ignores_key_order():
    assert JSONObject('{"a":1,"b":2}') == JSONObject('{"b":2,"a":1}')
    assert JSONObject('{"a":1}') != JSONObject('{"a":2}')
    assert JSONObject('{"a":1}') != JSONObject('{"a":1,"b":2}')


def test_repr():
    assert repr(JSONObject({"a": 1})) == 'JSONObject({"a":1})'
