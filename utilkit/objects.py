"""Helpers for JSON-like objects: picking, omitting, mapping and merging."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Iterable
from typing import Any

_SCALARS = (str, int, float, bool, type(None))


class ObjectError(Exception):
    """Base class for errors raised by the object helpers."""

    prefix = "Object error"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.prefix}: {message}")
        self.message = message


class SerializationError(ObjectError):
    """A value could not be turned into JSON text."""

    prefix = "Serialization error"


class InvalidInputError(ObjectError):
    """An argument is not of a usable shape."""

    prefix = "Invalid input"


def pick(obj: Any, keys: Iterable[str]) -> dict[str, Any]:
    """A new object holding only the listed keys that ``obj`` has."""
    if not isinstance(obj, dict):
        return {}
    return {key: copy.deepcopy(obj[key]) for key in keys if key in obj}


def pick_by(obj: Any, predicate: Callable[[Any], bool]) -> dict[str, Any]:
    """A new object holding the entries whose value satisfies ``predicate``."""
    if not isinstance(obj, dict):
        return {}
    return {
        key: copy.deepcopy(value) for key, value in obj.items() if predicate(value)
    }


def omit(obj: Any, keys: Iterable[str]) -> Any:
    """A new object without the listed keys; non-objects are copied unchanged."""
    if not isinstance(obj, dict):
        return copy.deepcopy(obj)
    excluded = set(keys)
    return {
        key: copy.deepcopy(value)
        for key, value in obj.items()
        if key not in excluded
    }


def omit_by(obj: Any, predicate: Callable[[Any], bool]) -> dict[str, Any]:
    """A new object without the entries whose value satisfies ``predicate``."""
    return pick_by(obj, lambda value: not predicate(value))


def map_keys(obj: Any, mapper: Callable[[str], str]) -> Any:
    """A new object with every key passed through ``mapper``."""
    if not isinstance(obj, dict):
        return copy.deepcopy(obj)
    return {mapper(key): copy.deepcopy(value) for key, value in obj.items()}


def map_values(obj: Any, mapper: Callable[[Any], Any]) -> Any:
    """A new object with every value passed through ``mapper``."""
    if not isinstance(obj, dict):
        return copy.deepcopy(obj)
    return {key: mapper(value) for key, value in obj.items()}


def _merge_into(target: dict[str, Any], source: Any) -> None:
    if not isinstance(source, dict):
        return
    for key, value in source.items():
        current = target.get(key)
        if key in target and isinstance(current, dict) and isinstance(value, dict):
            _merge_into(current, value)
        else:
            target[key] = copy.deepcopy(value)


def merge(target: Any, *args: Any) -> Any:
    """Merge each source into ``target`` recursively, in place, and return it."""
    if isinstance(target, dict):
        for source in args:
            _merge_into(target, source)
    return target


def _is_serializable(value: Any) -> bool:
    return isinstance(value, (*_SCALARS, list, tuple, dict))


def remove_non_serializable_props(obj: Any) -> Any:
    """A copy of ``obj`` without values that have no JSON form."""
    if isinstance(obj, dict):
        return {
            key: remove_non_serializable_props(value)
            for key, value in obj.items()
            if _is_serializable(value)
        }
    if isinstance(obj, (list, tuple)):
        return [
            remove_non_serializable_props(item)
            for item in obj
            if _is_serializable(item)
        ]
    return copy.deepcopy(obj)


def safe_json_stringify(obj: Any) -> str:
    """Compact JSON text of ``obj`` after dropping non-serializable values."""
    cleaned = remove_non_serializable_props(obj)
    try:
        return json.dumps(
            cleaned, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def _key_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if value is None:
        return "null"
    return None


def invert(obj: Any) -> dict[str, Any]:
    """Swap keys and scalar values; later keys win and nested values are skipped."""
    if not isinstance(obj, dict):
        return {}
    result: dict[str, Any] = {}
    for key, value in obj.items():
        text = _key_text(value)
        if text is not None:
            result[text] = key
    return result