"""Everyday helpers for numbers, strings, plain dictionaries and JSON-like objects."""

__version__ = "1.0.0"
__all__ = ["numeric", "mappings", "objects", "strings"]