# utilkit

Small helpers with no dependencies for things that come up in everyday code:
- parsing and formatting numbers
- converting case, trimming and padding strings
- working with plain dictionaries
- changing JSON-like objects

utilkit is a library only. It has no command-line tool.

## Installation

```
pip install utilkit
```

## Modules

### `utilkit.numeric`

Number checks and formatting that behave like the JavaScript `Number` API.

- `is_finite`, `is_nan`, `is_integer`, `is_safe_integer`
- `parse_float(s)` and `parse_int(s, radix)` read the longest leading number in a string.
- `to_fixed`, `to_exponential`, `to_precision`
- `max_safe_integer`, `min_safe_integer`, `positive_infinity`, `negative_infinity`
- `clamp`, `lerp`, `map_range`

```python
from utilkit.numeric import parse_float, parse_int, to_fixed, to_exponential, clamp, map_range

parse_float("42.5abc")                 # 42.5
parse_int("ff", 16)                    # 255
to_fixed(42.999, 2)                    # "43.00"
to_exponential(0.00042, 2)             # "4.20e-4"
clamp(15.0, 1.0, 10.0)                 # 10.0
map_range(5.0, 0.0, 10.0, 0.0, 100.0)  # 50.0
```

`parse_float` and `parse_int` raise `InvalidFormatError` in these cases:
- the text holds no number
- the radix is outside 2 to 36
- an integer does not fit in a signed 64-bit value

The formatting functions raise `OutOfRangeError` when given a negative digit count. Both errors derive from `NumberUtilsError`, which is a `ValueError`.

### `utilkit.strings`

Case conversion, trimming, padding, templates and random identifiers.

```python
from utilkit.strings import camel_case, snake_case, pascal_case, trim, pad_start, parse_template

camel_case("va va-VOOM")            # "vaVaVoom"
snake_case("helloWorld")            # "hello_world"
pascal_case("hello_world")          # "HelloWorld"
trim("-!-hello-!-", "-!")           # "hello"
pad_start("5", 3, "0")              # "005"
parse_template("Hello {{name}}!", {"name": "World"})  # "Hello World!"
```

#### Random values

- `generate_uuid()` returns a random version 4 UUID string.
- `generate_base62_code(length)` returns a random alphanumeric code of the given length. It raises `InvalidInputError` when the length is not positive.

#### Templates

`parse_template` accepts an optional regular expression. The expression's first group names the key. Placeholders whose key is missing are left as they are. An invalid pattern, or one with no group, raises `RegexError`.

#### Other helpers

- `gen_all_cases_combination`, `fuzzy_match`, `get_file_ext`, `capitalize`
- `dash_case`, `trim_start`, `trim_end`, `remove_prefix`
- `generate_merge_paths`, `pad_end`, `repeat`
- `starts_with`, `ends_with`, `includes`
- `char_at`, `substring`, `split`, `replace_all`

### `utilkit.mappings`

Operations on plain dictionaries:
- `keys`, `values`, `entries`, `has_key`
- `from_entries`
- `assign`, which updates the target in place
- `pick`, `omit`
- `deep_clone`
- `is_empty`, `size`
- `merge`, which returns a new dictionary in which later mappings win

```python
from utilkit.mappings import pick, merge

pick({"name": "John", "age": "30", "city": "NYC"}, ["name", "age"])
# {"name": "John", "age": "30"}
merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
# {"a": 1, "b": 3, "c": 4}
```

### `utilkit.objects`

Helpers for JSON-like values such as dicts, lists, strings, numbers, booleans and `None`:
- `pick`, `pick_by`, `omit`, `omit_by`
- `map_keys`, `map_values`
- `merge`, a recursive merge done in place
- `invert`
- `remove_non_serializable_props`
- `safe_json_stringify`, which produces compact JSON and raises `SerializationError` when the value cannot be encoded

```python
from utilkit.objects import merge, invert, safe_json_stringify

target = {"a": 1, "b": {"x": 10}}
merge(target, {"b": {"y": 20}}, {"c": 3})
# {"a": 1, "b": {"x": 10, "y": 20}, "c": 3}

invert({"a": 1, "b": True, "c": None})
# {"1": "a", "true": "b", "null": "c"}

safe_json_stringify({"name": "Alice", "age": 30})
# '{"name":"Alice","age":30}'
```

## Running the tests

```
pip install -e ".[test]"
pytest
```