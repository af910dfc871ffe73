"""DOM nodes: scalars, arrays and objects, with lookup and serialization."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional, Union

from .jsontype import I64_MAX, I64_MIN, U64_MAX, JsonType, JsonValue, Number

if TYPE_CHECKING:
    from .containers import Array, Object

Index = Union[int, str]

_CONTAINERS = (JsonType.ARRAY, JsonType.OBJECT)


def _check_int(val: Any, low: int, high: int, kind: str) -> int:
    if not isinstance(val, int) or isinstance(val, bool):
        raise TypeError(f"{kind} value must be an int, not {type(val).__name__}")
    if not low <= val <= high:
        raise ValueError(f"{val} is out of range for {kind}")
    return val


class Value(JsonValue):
    """A node in a JSON document tree.

    Arrays hold a list of child values; objects hold an ordered list of
    ``(key, value)`` pairs, so duplicate keys and insertion order survive.
    Containers also track a capacity, which only grows on reservation.
    """

    def __init__(self) -> None:
        self._type = JsonType.NULL
        self._scalar: Union[None, bool, int, float, str] = None
        self._items: list = []
        self._capacity = 0

    # -- construction -------------------------------------------------------

    @classmethod
    def _make(cls, typ: JsonType, scalar: Any = None) -> "Value":
        node = cls()
        node._type = typ
        node._scalar = scalar
        return node

    @classmethod
    def null(cls) -> "Value":
        """Return a null value."""
        return cls()

    @classmethod
    def from_bool(cls, val: bool) -> "Value":
        return cls._make(JsonType.BOOLEAN, bool(val))

    @classmethod
    def from_i64(cls, val: int) -> "Value":
        """Return a number from a signed 64-bit integer."""
        return cls._make(JsonType.NUMBER, _check_int(val, I64_MIN, I64_MAX, "i64"))

    @classmethod
    def from_u64(cls, val: int) -> "Value":
        """Return a number from an unsigned 64-bit integer."""
        return cls._make(JsonType.NUMBER, _check_int(val, 0, U64_MAX, "u64"))

    @classmethod
    def from_f64(cls, val: float) -> "Value":
        """Return a number from a float; NaN and infinities are rejected."""
        num = float(val)
        if not math.isfinite(num):
            raise ValueError(f"JSON does not support non-finite number {num!r}")
        return cls._make(JsonType.NUMBER, num)

    @classmethod
    def from_str(cls, val: str) -> "Value":
        if not isinstance(val, str):
            raise TypeError(f"string value must be a str, not {type(val).__name__}")
        return cls._make(JsonType.STRING, val)

    @classmethod
    def new_object(cls) -> "Value":
        """Return an empty object with no capacity."""
        return cls._make(JsonType.OBJECT)

    @classmethod
    def new_array(cls) -> "Value":
        """Return an empty array with no capacity."""
        return cls._make(JsonType.ARRAY)

    @classmethod
    def _array_of(cls, items: Iterable["Value"]) -> "Value":
        node = cls.new_array()
        node._items = list(items)
        node._capacity = len(node._items)
        return node

    @classmethod
    def _object_of(cls, pairs: Iterable[tuple[str, "Value"]]) -> "Value":
        node = cls.new_object()
        node._items = [(str(k), v) for k, v in pairs]
        node._capacity = len(node._items)
        return node

    # -- container internals ----------------------------------------------

    def _reserve(self, additional: int) -> None:
        if self._type not in _CONTAINERS:
            raise TypeError(f"cannot reserve space in a {self._type.name.lower()}")
        if additional < 0:
            raise ValueError("additional capacity must not be negative")
        new_cap = len(self._items) + additional
        if new_cap > self._capacity:
            self._capacity = new_cap

    def _key_offset(self, key: str) -> Optional[int]:
        return next((i for i, (k, _) in enumerate(self._items) if k == key), None)

    # -- JsonValue ------------------------------------------------------------

    def get_type(self) -> JsonType:
        return self._type

    def as_number(self) -> Optional[Number]:
        return self._scalar if self._type == JsonType.NUMBER else None  # type: ignore[return-value]

    def as_i64(self) -> Optional[int]:
        return super().as_i64()

    def as_u64(self) -> Optional[int]:
        return super().as_u64()

    def as_f64(self) -> Optional[float]:
        return super().as_f64()

    def as_bool(self) -> Optional[bool]:
        return self._scalar if self._type == JsonType.BOOLEAN else None  # type: ignore[return-value]

    def as_str(self) -> Optional[str]:
        return self._scalar if self._type == JsonType.STRING else None  # type: ignore[return-value]

    def as_array(self) -> Optional["Array"]:
        """Return an array view of this value, or None if it is not an array."""
        if self._type != JsonType.ARRAY:
            return None
        from .containers import Array

        return Array(self)

    def as_object(self) -> Optional["Object"]:
        """Return an object view of this value, or None if it is not an object."""
        if self._type != JsonType.OBJECT:
            return None
        from .containers import Object

        return Object(self)

    def get(self, index: Index) -> Optional["Value"]:
        """Return the array element or object member, or None if absent."""
        if isinstance(index, bool) or not isinstance(index, (int, str)):
            raise TypeError(f"index must be int or str, not {type(index).__name__}")
        if isinstance(index, int):
            if self._type == JsonType.ARRAY and 0 <= index < len(self._items):
                return self._items[index]
            return None
        if self._type == JsonType.OBJECT:
            return next((v for k, v in self._items if k == index), None)
        return None

    def pointer(self, path: Iterable[Index]) -> Optional["Value"]:
        node: Optional[Value] = self
        for step in path:
            node = node.get(step)
            if node is None:
                return None
        return node

    def __getitem__(self, index: Index) -> "Value":
        found = self.get(index)
        if found is None:
            if isinstance(index, str):
                raise KeyError(index)
            raise IndexError(f"index {index} out of range")
        return found

    def take(self) -> "Value":
        """Move the contents out into a new value, leaving this one null."""
        taken = Value()
        taken._type, taken._scalar = self._type, self._scalar
        taken._items, taken._capacity = self._items, self._capacity
        self._type, self._scalar, self._items, self._capacity = JsonType.NULL, None, [], 0
        return taken

    def to_python(self) -> Any:
        """Convert to plain Python data; later duplicate keys win."""
        if self._type == JsonType.ARRAY:
            return [child.to_python() for child in self._items]
        if self._type == JsonType.OBJECT:
            return {k: v.to_python() for k, v in self._items}
        return self._scalar

    def __repr__(self) -> str:
        return to_string(self)


def _scalar_text(node: Value) -> str:
    typ = node.get_type()
    if typ == JsonType.NULL:
        return "null"
    if typ == JsonType.BOOLEAN:
        return "true" if node._scalar else "false"
    if typ == JsonType.NUMBER:
        return repr(node._scalar)
    if typ == JsonType.STRING:
        return json.dumps(node._scalar, ensure_ascii=False)
    raise ValueError(f"unsupported type {typ.name}")


def to_string(value: Any) -> str:
    """Serialize a value (or anything offering ``as_value()``) to compact JSON."""
    if not isinstance(value, Value):
        as_value = getattr(value, "as_value", None)
        if as_value is None:
            raise TypeError(f"cannot serialize {type(value).__name__}")
        value = as_value()
    out: list[str] = []
    stack: list[Union[str, Value]] = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        typ = item.get_type()
        if typ == JsonType.ARRAY:
            out.append("[")
            stack.append("]")
            for i, child in reversed(list(enumerate(item._items))):
                stack.append(child)
                if i:
                    stack.append(",")
        elif typ == JsonType.OBJECT:
            out.append("{")
            stack.append("}")
            for i, (key, child) in reversed(list(enumerate(item._items))):
                stack.append(child)
                stack.append(json.dumps(key, ensure_ascii=False) + ":")
                if i:
                    stack.append(",")
        else:
            out.append(_scalar_text(item))
    return "".join(out)