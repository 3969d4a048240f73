"""Helpers for plain dictionaries, after the JavaScript ``Object`` API."""

from __future__ import annotations

import copy
from collections.abc import Hashable, Iterable, Mapping, MutableMapping
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ObjectUtilsError(Exception):
    """Base class for errors raised by the mapping helpers."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid operation: {message}")
        self.message = message


class KeyNotFoundError(ObjectUtilsError, KeyError):
    """A requested key is not present."""

    def __init__(self, key: Any) -> None:
        Exception.__init__(self, f"Key not found: {key}")
        self.key = key
        self.message = f"Key not found: {key}"

    def __str__(self) -> str:
        return self.message


def keys(mapping: Mapping[K, V]) -> list[K]:
    """All keys of ``mapping``."""
    return list(mapping.keys())


def values(mapping: Mapping[K, V]) -> list[V]:
    """All values of ``mapping``."""
    return list(mapping.values())


def entries(mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    """All key-value pairs of ``mapping``."""
    return list(mapping.items())


def has_key(mapping: Mapping[K, V], key: K) -> bool:
    """Whether ``key`` is present in ``mapping``."""
    return key in mapping


def from_entries(pairs: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Build a dictionary from key-value pairs; later pairs win."""
    return dict(pairs)


def assign(target: MutableMapping[K, V], *args: Mapping[K, V]) -> None:
    """Copy every entry of each source into ``target``, in order."""
    for source in args:
        target.update(source)


def pick(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """A new dictionary holding only the given keys that exist."""
    return {key: mapping[key] for key in keys if key in mapping}


def omit(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """A new dictionary without the given keys."""
    excluded = set(keys)
    return {key: value for key, value in mapping.items() if key not in excluded}


def deep_clone(mapping: Mapping[K, V]) -> dict[K, V]:
    """An independent deep copy of ``mapping``."""
    return {copy.deepcopy(key): copy.deepcopy(value) for key, value in mapping.items()}


def is_empty(mapping: Mapping[K, V]) -> bool:
    """Whether ``mapping`` has no entries."""
    return not mapping


def size(mapping: Mapping[K, V]) -> int:
    """Number of entries in ``mapping``."""
    return len(mapping)


def merge(*args: Mapping[K, V]) -> dict[K, V]:
    """A new dictionary combining all mappings; later ones win."""
    result: dict[K, V] = {}
    for mapping in args:
        result.update(mapping)
    return result