"""Parsing JSON text into a document tree."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable
from typing import Any, Optional, Union

from .containers import Array, Object
from .jsontype import I64_MAX, I64_MIN, U64_MAX, JsonType, JsonValue, Number
from .value import Value, to_string

Index = Union[int, str]


class ParseError(ValueError):
    """Raised when input is not valid JSON."""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message if position is None else f"{message} at offset {position}")
        self.position = position


def _parse_int(text: str) -> Value:
    number = int(text)
    if I64_MIN <= number < 0:
        return Value.from_i64(number)
    if 0 <= number <= U64_MAX:
        return Value.from_u64(number)
    # Integers outside the 64-bit ranges fall back to floating point.
    return _parse_float(text)


def _parse_float(text: str) -> Value:
    number = float(text)
    if not math.isfinite(number):
        raise ParseError(f"number out of range: {text}")
    return Value.from_f64(number)


def _parse_constant(name: str) -> Value:
    raise ParseError(f"invalid literal {name}")


def _wrap(item: Any) -> Value:
    if isinstance(item, Value):
        return item
    if isinstance(item, list):
        return Value._array_of(_wrap(child) for child in item)
    if isinstance(item, str):
        return Value.from_str(item)
    if isinstance(item, bool):
        return Value.from_bool(item)
    if item is None:
        return Value.null()
    raise ParseError(f"unexpected parsed item of type {type(item).__name__}")


def _object_hook(pairs: list[tuple[str, Any]]) -> Value:
    return Value._object_of((key, _wrap(child)) for key, child in pairs)


_DECODER = json.JSONDecoder(
    object_pairs_hook=_object_hook,
    parse_int=_parse_int,
    parse_float=_parse_float,
    parse_constant=_parse_constant,
)


def _parse(text: str) -> Value:
    try:
        return _wrap(_DECODER.decode(text))
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, exc.pos) from None
    except RecursionError:
        raise ParseError("nesting too deep") from None


class Document(JsonValue):
    """Owns the root of a parsed JSON tree."""

    def __init__(self, root: Optional[Value] = None) -> None:
        if root is not None and not isinstance(root, Value):
            raise TypeError(f"document root must be a Value, not {type(root).__name__}")
        self._root = root if root is not None else Value.null()

    def as_value(self) -> Value:
        """Return the root value."""
        return self._root

    def as_object(self) -> Optional[Object]:
        """Return an editable view of the root object, or None."""
        return self._root.as_object()

    def as_array(self) -> Optional[Array]:
        """Return an editable view of the root array, or None."""
        return self._root.as_array()

    def get_type(self) -> JsonType:
        return self._root.get_type()

    def as_number(self) -> Optional[Number]:
        return self._root.as_number()

    def as_bool(self) -> Optional[bool]:
        return self._root.as_bool()

    def as_str(self) -> Optional[str]:
        return self._root.as_str()

    def get(self, index: Index) -> Optional[Value]:
        return self._root.get(index)

    def pointer(self, path: Iterable[Index]) -> Optional[Value]:
        return self._root.pointer(path)

    def to_string(self) -> str:
        """Serialize the document to compact JSON."""
        return to_string(self._root)

    def __repr__(self) -> str:
        return f"Document({self.to_string()})"


def dom_from_str(json: str) -> Document:
    """Parse JSON text into a document, raising ParseError if invalid."""
    if not isinstance(json, str):
        raise TypeError(f"expected str, not {type(json).__name__}")
    return Document(_parse(json))


def dom_from_slice(json: Union[bytes, bytearray, memoryview]) -> Document:
    """Parse UTF-8 encoded JSON bytes into a document."""
    if not isinstance(json, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes, not {type(json).__name__}")
    try:
        text = bytes(json).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError("invalid UTF-8", exc.start) from None
    return Document(_parse(text))