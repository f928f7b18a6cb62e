# typeconv

typeconv converts loosely typed values into plain Python types. Typical inputs are
strings from a request, numbers read from JSON and raw bytes.

The conversion functions are lenient. Odd input gives a zero value and does not
raise. `"abc"` becomes `0`, an empty string becomes an empty list, and `None`
becomes a zero value or `None`. Only a few helpers raise:

- `parse_duration` raises on malformed text.
- `parse_json` raises on invalid JSON.
- The tag registry raises when a name is registered twice.

## Installation

```
pip install typeconv
```

## Scalars

`typeconv.numbers` converts values to fixed-width integers and to floats.

- Integer results wrap to the requested width, as a two's-complement cast does.
- Text is read in this order: as a decimal integer, then as `0x` hexadecimal, then as a float that is truncated.

`typeconv.text` converts values to strings and booleans.

```python
from typeconv.numbers import to_int, to_uint8, to_float64, to_float32, to_bytes, to_runes
from typeconv.text import to_str, to_bool, format_float, parse_json

to_int("0x1F")        # 31
to_int("-12.7")       # -12
to_uint8(300)         # 44
to_float64("3.5")     # 3.5
to_str(1.25)          # "1.25"
to_str(True)          # "true"
to_bool("off")        # False; "", "0", "no", "off" and "false" are false
to_bytes([1, 2, 3])   # b"\x01\x02\x03"
to_runes("ab")        # [97, 98]
format_float(0.1, 32) # "0.1"
parse_json("[1.5]")   # [Decimal("1.5")]
```

The scalar functions are:

- Signed integers: `to_int`, `to_int8`, `to_int16`, `to_int32` and `to_int64`.
- Unsigned integers: `to_uint`, `to_uint8`, `to_uint16`, `to_uint32` and `to_uint64`.
- Floats: `to_float32` and `to_float64`.
- Bytes and code points: `to_byte`, `to_bytes`, `to_rune` and `to_runes`.

## Lists

```python
from typeconv.lists import to_list, to_strs
from typeconv.intlists import to_ints, to_int32s, to_int64s
from typeconv.floatlists import to_float32s, to_float64s
from typeconv.uintlists import to_uints, to_uint32s, to_uint64s

to_ints(["1", "2", "x"])   # [1, 2, 0]
to_ints("[1, 2, 3]")       # JSON text is decoded: [1, 2, 3]
to_strs([1, True, 2.5])    # ["1", "true", "2.5"]
to_float64s("")            # []
to_uints(" 42 ")           # [42]
to_list(7)                 # [7]
to_list(0)                 # []
```

## Times and durations

`typeconv.timeconv` handles durations and date-times.

- Durations use the units `ns`, `us` (or `µs`), `ms`, `s`, `m` and `h`.
- Durations have microsecond precision.
- Numeric values given to `to_duration` are nanoseconds.
- Numeric values given to `to_time` are Unix timestamps in seconds, in UTC.
- Other text given to `to_time` is parsed leniently. When `fmt` is passed, the text is parsed with `strptime` instead.
- `to_time` returns `None` when it cannot convert the value.

```python
from typeconv.timeconv import to_time, to_duration, parse_duration

to_duration("1h30m")            # timedelta(hours=1, minutes=30)
parse_duration("250ms")         # timedelta(milliseconds=250)
to_time("2024-01-02 03:04:05")
to_time("1700000000")           # 2023-11-14 22:13:20+00:00
to_time("02/01/2024", "%d/%m/%Y")
```

## Tag placeholders

`typeconv.tags` keeps a registry of named text values. It expands `{name}`
placeholders in a string.

- A name that is not registered is left as written.
- `TagRegistry.set` raises `TagExistsError` for a name that is already registered.
- `set_over` replaces an existing value.

```python
from typeconv.tags import TagRegistry, set_tag, parse_tags

set_tag("demo", "content")
parse_tags("This is {demo}")    # "This is content"

registry = TagRegistry()
registry.set_many({"a": "1", "b": "2"})
registry.parse("{a}-{b}-{c}")   # "1-2-{c}"
```

## What it does not do

typeconv converts single values and lists only. It does not do the following:

- Convert values to dictionaries.
- Inspect dataclass fields or struct-style tag strings.
- Bind data onto objects.
- Convert by a type name given as text.

## Running the tests

```
pip install -e ".[test]"
pytest
```