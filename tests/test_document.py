import json

import pytest

from jsondom.document import Document, ParseError, dom_from_slice, dom_from_str
from jsondom.jsontype import JsonType
from jsondom.value import Value, to_string

TEST_JSON = """{
    "bool": true,
    "int": -1,
    "uint": 0,
    "float": 1.1,
    "string": "hello",
    "array": [1,2,3],
    "object": {"a":"aaa"},
    "strempty": "",
    "objempty": {},
    "arrempty": []
}"""

BASIC_CASES = [
    '{"name": "John", "age": 30}',
    "[1, 2, 3]",
    """{
        "name": "John",
        "age": 30,
        "cars": [
            { "name": "Ford", "models": ["Fiesta", "Focus", "Mustang"] },
            { "name": "BMW", "models": ["320", "X3", "X5"] },
            { "name": "Fiat", "models": ["500", "Panda"] }
        ],
        "address": {
            "street": "Main Street",
            "city": "New York",
            "state": "NY",
            "zip": "10001"
        }
    }""",
    """{
        "name": "John",
        "age": 30,
        "description": "He said, \\"I'm coming home.\\""
    }""",
]


@pytest.mark.parametrize("data", BASIC_CASES)
def test_node_basic_round_trip(data):
    dom = dom_from_slice(data.encode())
    assert json.loads(to_string(dom)) == json.loads(data)
    assert json.loads(dom.to_string()) == json.loads(data)


@pytest.mark.parametrize(
    "data",
    [
        '{"statuses":[{"id":1,"text":"caf\\u00e9 \\ud83d\\ude00","user":null}],'
        '"search_metadata":{"count":100,"max_id":-5,"ratio":0.25}}',
        '[{"events":[{"type":"PushEvent","public":true}]},[],{},""]',
    ],
)
def test_bench_style_round_trip(data):
    dom = dom_from_slice(data.encode())
    assert json.loads(to_string(dom)) == json.loads(data)


def test_value_is():
    dom = dom_from_str(TEST_JSON)
    value = dom.as_value()
    assert dom.get("bool").is_true()
    assert value.get("bool").is_boolean()
    assert value.get("bool").is_true()
    assert value.get("uint").is_u64()
    assert value.get("uint").is_number()
    assert value.get("int").is_i64()
    assert value.get("float").is_f64()
    assert value.get("string").is_str()
    assert value.get("array").is_array()
    assert value.get("object").is_object()
    assert value.get("strempty").is_str()
    assert value.get("objempty").is_object()
    assert value.get("arrempty").is_array()


def test_value_get():
    dom = dom_from_str(TEST_JSON)
    value = dom.as_value()
    assert dom.get("int").as_i64() == -1
    assert value.get("int").as_i64() == -1
    assert value["array"].get(0).as_i64() == 1

    assert dom.pointer(["array", 2]).as_i64() == 3
    assert value.pointer(["array", 2]).as_u64() == 3

    assert dom.pointer(["object", "a"]).as_str() == "aaa"
    assert value.pointer(["object", "a"]).as_str() == "aaa"
    assert dom.pointer(["objempty", "a"]) is None
    assert value.pointer(["objempty", "a"]) is None
    assert dom.pointer(["arrempty", 1]) is None
    assert value.pointer(["arrempty", 1]) is None
    assert dom.pointer(["unknown"]) is None


def test_value_object():
    dom = dom_from_str(TEST_JSON)
    value = dom.as_value()
    assert value.is_object()

    obj = value.as_object()
    assert len(obj) == 10
    assert obj.get("bool").as_bool() is True

    obj = dom.as_object()
    obj.insert("inserted", Value.from_bool(True))
    assert len(obj) == 11
    assert obj.contains_key("inserted")
    assert obj.remove("inserted").is_true()
    assert not obj.contains_key("inserted")

    obj.reserve(12)
    assert obj.capacity() == 22

    obj.insert("inserted", Value.from_bool(True))
    assert obj.contains_key("inserted")
    assert dom.get("inserted").is_true()


def test_value_object_empty():
    dom = dom_from_str(TEST_JSON)
    assert dom.as_value().is_object()
    empty = dom.as_object().get("objempty").as_object()
    assert len(empty) == 0
    empty.insert("inserted", Value.from_str("new inserted"))
    empty.insert("inserted2", Value.from_bool(True))
    assert len(empty) == 2
    assert empty.remove("inserted2").is_true()
    assert empty.contains_key("inserted")
    taken = empty.get("inserted").take()
    assert taken.as_str() == "new inserted"
    assert dom.pointer(["objempty", "inserted"]).is_null()


def test_value_array():
    dom = dom_from_str(TEST_JSON)
    value = dom.get("array")
    assert value.is_array()
    array = value.as_array()
    assert len(array) == 3
    assert array[1].as_u64() == 2
    array.push(Value.from_str("pushed"))
    assert array[3].is_str()
    array.pop()
    assert array[2].is_number()
    assert len(array) == 3
    assert [v.as_u64() for v in array] == [1, 2, 3]


def test_value_array_empty():
    dom = dom_from_str(TEST_JSON)
    empty = dom.get("arrempty").as_array()
    assert len(empty) == 0
    empty.push(Value.from_str("new inserted"))
    empty.push(Value.from_bool(True))
    assert len(empty) == 2
    assert empty.pop().is_true()
    taken = empty[0].take()
    assert taken.as_str() == "new inserted"


def test_root_array_view():
    dom = dom_from_str("[true, null]")
    assert dom.as_object() is None
    array = dom.as_array()
    array.push(Value.from_i64(-7))
    assert dom.to_string() == "[true,null,-7]"


def test_scalar_root():
    dom = dom_from_str('  "hi"  ')
    assert dom.get_type() == JsonType.STRING
    assert dom.as_str() == "hi"
    assert dom.as_array() is None
    assert dom.get(0) is None


def test_number_kinds():
    dom = dom_from_str("[-1, 18446744073709551615, 2.5, -9223372036854775808]")
    assert dom.get(0).as_i64() == -1
    assert dom.get(0).as_u64() is None
    assert dom.get(1).as_u64() == 18446744073709551615
    assert dom.get(1).as_i64() is None
    assert dom.get(2).as_f64() == 2.5
    assert dom.get(2).as_i64() is None
    assert dom.get(3).as_i64() == -9223372036854775808


def test_integer_beyond_u64_becomes_float():
    dom = dom_from_str("18446744073709551616")
    assert dom.as_u64() is None
    assert dom.as_f64() == 18446744073709551616.0


def test_duplicate_keys_preserved():
    dom = dom_from_str('{"a":1,"a":2}')
    assert dom.to_string() == '{"a":1,"a":2}'
    assert dom.get("a").as_u64() == 1


def test_serialize_compact():
    dom = dom_from_str('{ "a" : [1, 2.5, "x", null, true, false] }')
    assert dom.to_string() == '{"a":[1,2.5,"x",null,true,false]}'


def test_default_document_is_null():
    dom = Document()
    assert dom.is_null()
    assert dom.to_string() == "null"


@pytest.mark.parametrize(
    "text",
    ["", "{", "[1,]", '{"a" 1}', "tru", "[1] x", "NaN", "[Infinity]", "1e400", "01"],
)
def test_invalid_json(text):
    with pytest.raises(ParseError):
        dom_from_str(text)


def test_invalid_utf8():
    with pytest.raises(ParseError):
        dom_from_slice(b'"\xff"')


def test_parse_error_position():
    with pytest.raises(ParseError) as info:
        dom_from_str("[1, 2,")
    assert info.value.position == 6


def test_wrong_input_types():
    with pytest.raises(TypeError):
        dom_from_str(b"[]")
    with pytest.raises(TypeError):
        dom_from_slice("[]")