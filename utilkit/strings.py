"""String helpers: case conversion, trimming, templating and random codes."""

from __future__ import annotations

import random
import re
from collections.abc import Iterable, Mapping
from itertools import pairwise, product

_DEFAULT_TEMPLATE_PATTERN = r"\{\{(.+?)\}\}"
_WORD_DELIMITERS = frozenset(".-_")
_BASE62_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_UUID_DASH_POSITIONS = frozenset({8, 12, 16, 20})


class StringError(Exception):
    """Base class for errors raised by the string helpers."""

    prefix = "String error"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.prefix}: {message}")
        self.message = message


class InvalidInputError(StringError):
    """An argument has a value the operation cannot accept."""

    prefix = "Invalid input"


class RegexError(StringError):
    """A template pattern could not be used."""

    prefix = "Regex error"


def _split_words(s: str) -> list[str]:
    """Split on whitespace, '.', '-', '_' and camelCase boundaries."""
    words: list[str] = []
    current = ""
    for ch, following in zip(s, [*s[1:], None]):
        if ch.isspace() or ch in _WORD_DELIMITERS:
            if current:
                words.append(current)
                current = ""
            continue
        if ch.isupper() and current and following is not None and following.islower():
            words.append(current)
            current = ""
        current += ch
    if current:
        words.append(current)
    return words


def gen_all_cases_combination(s: str) -> list[str]:
    """Every upper/lower case variant of the letters in ``s``, lowercase first."""
    options = [
        (ch.lower()[0], ch.upper()[0]) if ch.isalpha() else (ch,) for ch in s
    ]
    return ["".join(combo) for combo in product(*options)]


def generate_uuid() -> str:
    """A random version 4 UUID in its 36-character textual form."""
    parts: list[str] = []
    for position in range(32):
        if position in _UUID_DASH_POSITIONS:
            parts.append("-")
        if position == 12:
            digit = 4
        elif position == 16:
            digit = (random.randrange(16) & 0x3) | 0x8
        else:
            digit = random.randrange(16)
        parts.append(format(digit, "x"))
    return "".join(parts)


def generate_base62_code(length: int) -> str:
    """A random string of ``length`` base62 characters."""
    if length <= 0:
        raise InvalidInputError("Length must be greater than 0")
    return "".join(random.choices(_BASE62_CHARS, k=length))


def fuzzy_match(search_value: str, target_string: str) -> bool:
    """Case-insensitive substring test."""
    return search_value.lower() in target_string.lower()


def get_file_ext(filename: str) -> str:
    """The text after the last dot of ``filename``, or '' when there is none."""
    head, dot, ext = filename.rpartition(".")
    return ext if dot else ""


def capitalize(s: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    if not s:
        return ""
    return s[0].upper() + s[1:].lower()


def camel_case(s: str) -> str:
    """Convert ``s`` to camelCase."""
    words = _split_words(s)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(capitalize(word) for word in rest)


def snake_case(s: str) -> str:
    """Convert ``s`` to snake_case."""
    return "_".join(word.lower() for word in _split_words(s))


def dash_case(s: str) -> str:
    """Convert ``s`` to dash-case."""
    return "-".join(word.lower() for word in _split_words(s))


def pascal_case(s: str) -> str:
    """Convert ``s`` to PascalCase."""
    return "".join(capitalize(word) for word in _split_words(s))


def parse_template(
    template: str, data: Mapping[str, str], pattern: str | None = None
) -> str:
    """Replace placeholders in ``template`` with values from ``data``.

    The pattern's first group names the key; by default ``{{key}}``.
    Placeholders whose key is missing are left as they are.
    """
    try:
        regex = re.compile(pattern if pattern is not None else _DEFAULT_TEMPLATE_PATTERN)
    except re.error as exc:
        raise RegexError(str(exc)) from exc
    if regex.groups < 1:
        raise RegexError("pattern must contain a capture group")

    result = template
    for match in regex.finditer(template):
        key = match.group(1)
        if key is not None and key in data:
            result = result.replace(match.group(0), data[key])
    return result


def trim(s: str, chars_to_trim: str | None = None) -> str:
    """Strip the given characters (default: spaces) from both ends."""
    return s.strip(" " if chars_to_trim is None else chars_to_trim)


def trim_start(s: str, chars_to_trim: str | None = None) -> str:
    """Strip the given characters (default: spaces) from the start."""
    return s.lstrip(" " if chars_to_trim is None else chars_to_trim)


def trim_end(s: str, chars_to_trim: str | None = None) -> str:
    """Strip the given characters (default: spaces) from the end."""
    return s.rstrip(" " if chars_to_trim is None else chars_to_trim)


def remove_prefix(s: str, prefix: str) -> str:
    """``s`` without ``prefix`` when it starts with it."""
    return s.removeprefix(prefix)


def generate_merge_paths(branches: Iterable[str]) -> list[list[str]]:
    """Consecutive pairs of branches, each a merge from one into the next."""
    return [[source, target] for source, target in pairwise(branches)]


def _padding(s: str, target_length: int, pad_string: str | None) -> str:
    missing = target_length - len(s)
    if missing <= 0:
        return ""
    pad = " " if pad_string is None else pad_string
    if not pad:
        raise InvalidInputError("Pad string must not be empty")
    return (pad * (missing // len(pad) + 1))[:missing]


def pad_start(s: str, target_length: int, pad_string: str | None = None) -> str:
    """Pad ``s`` on the left up to ``target_length`` characters."""
    return _padding(s, target_length, pad_string) + s


def pad_end(s: str, target_length: int, pad_string: str | None = None) -> str:
    """Pad ``s`` on the right up to ``target_length`` characters."""
    return s + _padding(s, target_length, pad_string)


def repeat(s: str, count: int) -> str:
    """``s`` repeated ``count`` times."""
    if count < 0:
        raise InvalidInputError("Count must not be negative")
    return s * count


def starts_with(s: str, search_string: str) -> bool:
    """Whether ``s`` begins with ``search_string``."""
    return s.startswith(search_string)


def ends_with(s: str, search_string: str) -> bool:
    """Whether ``s`` ends with ``search_string``."""
    return s.endswith(search_string)


def includes(s: str, search_string: str) -> bool:
    """Whether ``search_string`` occurs in ``s``."""
    return search_string in s


def char_at(s: str, index: int) -> str | None:
    """The character at ``index``, or None when out of range."""
    if 0 <= index < len(s):
        return s[index]
    return None


def substring(s: str, start: int, end: int | None = None) -> str:
    """Characters from ``start`` up to ``end``; empty when start >= end."""
    length = len(s)
    start_idx = min(max(start, 0), length)
    end_idx = min(max(length if end is None else end, 0), length)
    if start_idx >= end_idx:
        return ""
    return s[start_idx:end_idx]


def split(s: str, separator: str) -> list[str]:
    """Split ``s`` on ``separator``; an empty separator yields characters."""
    if not separator:
        return list(s)
    return s.split(separator)


def replace_all(s: str, search: str, replacement: str) -> str:
    """Replace every occurrence of ``search``; an empty search changes nothing."""
    if not search:
        return s
    return s.replace(search, replacement)