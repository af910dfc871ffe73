"""A JSON document object model with typed accessors, pointers and mutable containers."""

__version__ = "0.1.0"

__all__ = ["containers", "document", "jsontype", "value", "visitor"]