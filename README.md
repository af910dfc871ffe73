# jsondom

`jsondom` parses JSON text into a tree of `Value` nodes. You can query the tree,
follow paths of keys and indices through it, change it in place and write it
back out as compact JSON.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing

```python
from jsondom.document import dom_from_str, dom_from_slice

doc = dom_from_str('{"name": "John", "age": 30, "cars": ["Ford", "BMW"]}')
doc_from_bytes = dom_from_slice(b"[1, 2, 3]")
```

`dom_from_str` takes a `str`; `dom_from_slice` takes `bytes`, `bytearray` or
`memoryview` holding UTF-8. Both return a `jsondom.document.Document`.

Input that is not valid JSON raises `jsondom.document.ParseError` (a subclass
of `ValueError`); its `position` attribute holds the offset where parsing
failed, when that is known. Invalid UTF-8, the literals `NaN` and `Infinity`,
and numbers that overflow a float are all rejected this way. Integers are kept
as integers when they fit in 64 bits (signed if negative, unsigned otherwise);
larger integers become floats. Object members keep their order, and duplicate
keys are kept as separate members.

## Reading values

`Document` and `Value` both implement `jsondom.jsontype.JsonValue`, so they
answer the same questions:

```python
doc.get("age").as_i64()            # 30
doc.get("age").is_number()         # True
doc.get("name").as_str()           # "John"
doc.pointer(["cars", 1]).as_str()  # "BMW"
doc.pointer(["missing"])           # None
```

- `get(index)` takes a `str` key for an object or an `int` index for an array
  and returns `None` when nothing is there. Any other index type raises
  `TypeError`.
- `pointer(path)` follows an iterable of keys and indices and returns `None`
  as soon as a step leads nowhere.
- `value[index]` on a `Value` does the same as `get`, but raises `KeyError`
  or `IndexError` instead of returning `None`.
- `as_bool`, `as_str` and `as_number` return `None` when the value is of
  another type. `as_i64` and `as_u64` return `None` for floats and for
  integers outside their range; `as_f64` returns any number as a float.
- `is_null`, `is_boolean`, `is_true`, `is_false`, `is_number`, `is_str`,
  `is_array`, `is_object`, `is_i64`, `is_u64` and `is_f64` are the matching
  checks.

`get_type()` returns a member of `jsondom.jsontype.JsonType`
(`NULL`, `BOOLEAN`, `NUMBER`, `STRING`, `OBJECT`, `ARRAY`, `RAW`).
`JsonType.from_code(n)` maps a numeric code to a member and raises
`ValueError` for an unknown code.

## Building values

```python
from jsondom.value import Value

Value.null()
Value.from_bool(True)
Value.from_i64(-1)        # ValueError outside the signed 64-bit range
Value.from_u64(2**63)     # ValueError outside the unsigned 64-bit range
Value.from_f64(1.5)       # ValueError for NaN and infinities
Value.from_str("hello")
Value.new_object()
Value.new_array()
```

`value.take()` moves the contents into a new `Value` and leaves the original
null.

## Changing the tree

`as_object()` and `as_array()` (on `Value` and on `Document`) return views,
`jsondom.containers.Object` and `jsondom.containers.Array`, or `None` when the
value is of another type. Edits through a view change the tree.

```python
obj = doc.as_object()
obj.insert("inserted", Value.from_bool(True))  # returns the old value, if any
obj.remove("inserted")                         # returns the removed value, or None
obj.contains_key("inserted")                   # False

cars = obj.get("cars").as_array()
cars.push(Value.from_str("Fiat"))
cars.pop()
len(cars)                                      # 2
cars[0].as_str()                               # "Ford"
cars[1] = Value.from_str("Audi")
```

`Object` iterates over `(key, value)` pairs in order and also offers `get`,
`pop` (removes the last member), `is_empty`, `capacity` and `reserve`.
`Array` iterates over its elements and offers `is_empty`, `capacity` and
`reserve`. Capacity only grows, through `reserve`, `insert` and `push`.

## Writing JSON

```python
from jsondom.value import to_string

doc.to_string()               # compact JSON text
to_string(doc.as_value())     # the same, for any Value or Document
doc.as_value().to_python()    # plain dicts, lists, str, int, float, bool, None
```

`to_python` turns objects into dicts, so of duplicate keys the last one wins;
`to_string` writes every member, duplicates included.

## Visitors

`jsondom.visitor.JsonVisitor` is a base class for receiving parse events:
`visit_null`, `visit_bool`, `visit_u64`, `visit_i64`, `visit_f64`,
`visit_str`, `visit_key`, `visit_object_start`, `visit_object_end`,
`visit_array_start` and `visit_array_end`. Each returns `True` to go on and
`False` to stop. The defaults all return `False` and record the refused event
and its payload in the `refused` attribute.

## What it does not do

- No parser in the package drives a `JsonVisitor`; the class is only the
  interface for code that produces such events.
- Output is compact only; there is no pretty-printing.
- There is no command-line tool, and no mapping of JSON onto your own classes.