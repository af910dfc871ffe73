"""Callback interface driven by a JSON parser."""

from __future__ import annotations

from typing import Any


class JsonVisitor:
    """Receives parse events; each returns True to continue, False to stop.

    Every event is refused by default, so a subclass handles only what it
    needs. The last refused event and its payload are kept in ``refused`` so
    that the caller can report where parsing stopped.
    """

    refused: tuple[str, Any] | None = None

    def _refuse(self, event: str, payload: Any = None) -> bool:
        """Record an event this visitor does not handle and stop parsing."""
        self.refused = (event, payload)
        return False

    def visit_null(self) -> bool:
        return self._refuse("null")

    def visit_bool(self, val: bool) -> bool:
        return self._refuse("bool", val)

    def visit_u64(self, val: int) -> bool:
        return self._refuse("u64", val)

    def visit_i64(self, val: int) -> bool:
        return self._refuse("i64", val)

    def visit_f64(self, val: float) -> bool:
        return self._refuse("f64", val)

    def visit_str(self, value: str) -> bool:
        return self._refuse("str", value)

    def visit_object_start(self, hint: int) -> bool:
        return self._refuse("object_start", hint)

    def visit_object_end(self, length: int) -> bool:
        return self._refuse("object_end", length)

    def visit_array_start(self, hint: int) -> bool:
        return self._refuse("array_start", hint)

    def visit_array_end(self, length: int) -> bool:
        return self._refuse("array_end", length)

    def visit_key(self, key: str) -> bool:
        return self._refuse("key", key)