"""JSON value types and the shared interface of JSON values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import IntEnum
from typing import Any, Optional, Union

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1
U64_MAX = (1 << 64) - 1

Number = Union[int, float]


class JsonType(IntEnum):
    """The kind of a JSON value."""

    NULL = 0
    BOOLEAN = 1
    NUMBER = 2
    STRING = 3
    OBJECT = 4
    ARRAY = 5
    RAW = 6

    @classmethod
    def from_code(cls, value: int) -> "JsonType":
        """Return the type for a numeric code, raising ValueError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid JsonType value: {value}") from None


def _is_int(n: Any) -> bool:
    return isinstance(n, int) and not isinstance(n, bool)


class JsonValue(ABC):
    """Interface shared by every JSON value, with derived type checks."""

    @abstractmethod
    def get_type(self) -> JsonType:
        """Return the type of this value."""

    @abstractmethod
    def as_number(self) -> Optional[Number]:
        """Return the number held, or None if this is not a number."""

    @abstractmethod
    def as_str(self) -> Optional[str]:
        """Return the string held, or None if this is not a string."""

    @abstractmethod
    def as_bool(self) -> Optional[bool]:
        """Return the boolean held, or None if this is not a boolean."""

    @abstractmethod
    def get(self, index: Union[int, str]) -> Optional["JsonValue"]:
        """Return the child at an array index or object key, or None."""

    @abstractmethod
    def pointer(self, path: Iterable[Union[int, str]]) -> Optional["JsonValue"]:
        """Follow a path of keys and indices, returning None if it leads nowhere."""

    def is_boolean(self) -> bool:
        return self.get_type() == JsonType.BOOLEAN

    def is_true(self) -> bool:
        return bool(self.as_bool())

    def is_false(self) -> bool:
        return not self.is_true()

    def is_null(self) -> bool:
        return self.get_type() == JsonType.NULL

    def is_number(self) -> bool:
        return self.get_type() == JsonType.NUMBER

    def is_str(self) -> bool:
        return self.get_type() == JsonType.STRING

    def is_array(self) -> bool:
        return self.get_type() == JsonType.ARRAY

    def is_object(self) -> bool:
        return self.get_type() == JsonType.OBJECT

    def is_f64(self) -> bool:
        return self.as_f64() is not None

    def is_i64(self) -> bool:
        return self.as_i64() is not None

    def is_u64(self) -> bool:
        return self.as_u64() is not None

    def as_i64(self) -> Optional[int]:
        """Return the number as a signed 64-bit integer if it fits."""
        n = self.as_number()
        if _is_int(n) and I64_MIN <= n <= I64_MAX:
            return n
        return None

    def as_u64(self) -> Optional[int]:
        """Return the number as an unsigned 64-bit integer if it fits."""
        n = self.as_number()
        if _is_int(n) and 0 <= n <= U64_MAX:
            return n
        return None

    def as_f64(self) -> Optional[float]:
        """Return any number as a float."""
        n = self.as_number()
        if n is None:
            return None
        return float(n)