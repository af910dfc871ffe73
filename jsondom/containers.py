"""Array and object views over container values, with in-place editing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from .jsontype import JsonType
from .value import Value


def _require_value(value: object) -> Value:
    if not isinstance(value, Value):
        raise TypeError(f"expected a Value, not {type(value).__name__}")
    return value


class Object:
    """A view of an object value; edits change the underlying value."""

    __slots__ = ("_node",)

    def __init__(self, node: Value) -> None:
        if not isinstance(node, Value) or node.get_type() != JsonType.OBJECT:
            raise TypeError("Object views require an object value")
        self._node = node

    def __len__(self) -> int:
        return len(self._node._items)

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        """Iterate over ``(key, value)`` pairs in insertion order."""
        return iter(list(self._node._items))

    def __repr__(self) -> str:
        return f"Object({self._node!r})"

    def is_empty(self) -> bool:
        return not self._node._items

    def capacity(self) -> int:
        return self._node._capacity

    def contains_key(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Optional[Value]:
        """Return the first member with this key, or None."""
        if not isinstance(key, str):
            raise TypeError(f"object key must be a str, not {type(key).__name__}")
        return self._node.get(key)

    def insert(self, key: str, value: Value) -> Optional[Value]:
        """Set a member; return the previous value if the key already existed."""
        if not isinstance(key, str):
            raise TypeError(f"object key must be a str, not {type(key).__name__}")
        value = _require_value(value)
        offset = self._node._key_offset(key)
        if offset is not None:
            old = self._node._items[offset][1]
            self._node._items[offset] = (key, value)
            return old
        self._node._reserve(1)
        self._node._items.append((key, value))
        return None

    def remove(self, key: str) -> Optional[Value]:
        """Remove the first member with this key and return its value, or None."""
        if not isinstance(key, str):
            raise TypeError(f"object key must be a str, not {type(key).__name__}")
        offset = self._node._key_offset(key)
        if offset is None:
            return None
        _, value = self._node._items.pop(offset)
        return value

    def pop(self) -> Optional[Value]:
        """Remove the last member and return its value, or None if empty."""
        if not self._node._items:
            return None
        _, value = self._node._items.pop()
        return value

    def reserve(self, additional: int) -> None:
        """Ensure room for at least ``additional`` more members."""
        self._node._reserve(additional)


class Array:
    """A view of an array value; edits change the underlying value."""

    __slots__ = ("_node",)

    def __init__(self, node: Value) -> None:
        if not isinstance(node, Value) or node.get_type() != JsonType.ARRAY:
            raise TypeError("Array views require an array value")
        self._node = node

    def __len__(self) -> int:
        return len(self._node._items)

    def __iter__(self) -> Iterator[Value]:
        return iter(list(self._node._items))

    def __getitem__(self, index: int) -> Value:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"array index must be an int, not {type(index).__name__}")
        try:
            return self._node._items[index]
        except IndexError:
            raise IndexError(f"index {index} out of range") from None

    def __setitem__(self, index: int, value: Value) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"array index must be an int, not {type(index).__name__}")
        value = _require_value(value)
        try:
            self._node._items[index] = value
        except IndexError:
            raise IndexError(f"index {index} out of range") from None

    def __repr__(self) -> str:
        return f"Array({self._node!r})"

    def is_empty(self) -> bool:
        return not self._node._items

    def capacity(self) -> int:
        return self._node._capacity

    def push(self, value: Value) -> None:
        """Append a value, growing capacity as needed."""
        value = _require_value(value)
        self._node._reserve(1)
        self._node._items.append(value)

    def pop(self) -> Optional[Value]:
        """Remove and return the last element, or None if empty."""
        if not self._node._items:
            return None
        return self._node._items.pop()

    def reserve(self, additional: int) -> None:
        """Ensure room for at least ``additional`` more elements."""
        self._node._reserve(additional)