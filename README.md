# zkit

zkit is a small set of self-contained building blocks:

- **`zkit.hashing`**: Adler-32, CRC-32, CRC-64, FNV-1 and FNV-1a (32 and 64 bit), MurmurHash (32 and 64 bit), and padded Base64 encoding and decoding.
- **`zkit.hashtable`**: `HashTable`, a chained hash table keyed by unsigned 64-bit integers. It keeps its entries in insertion order.
- **`zkit.opts`**: `Options`, a command-line parser for flags, typed values and positional arguments. It collects input errors and can format a help screen.
- **`zkit.jobs`**: `JobSystem`, a fixed pool of worker threads. Jobs wait in bounded queues, one queue per priority.
- **`zkit.scalar`**: angle conversion, wrapped angle difference, truncation-based rounding, fast approximations, half-precision float conversion and interpolation steps.

zkit needs Python 3.10 or later and has no runtime dependencies.

## Installing

```
pip install .
```

To install it together with the test tools:

```
pip install ".[test]"
```

## Hashing

Every function accepts `bytes`, `bytearray`, `memoryview` or `str`. A `str` is encoded as UTF-8.

```python
from zkit.hashing import adler32, crc32, crc64, fnv32a, fnv64, murmur32, murmur64
from zkit.hashing import base64_encode, base64_decode

crc32(b"hello")          # unsigned 32-bit IEEE CRC
crc64(b"hello")          # Jones polynomial, zero initial value, no final xor
fnv64(b"hello")
murmur32(b"hello", 0)    # seed defaults to 0
murmur64(b"hello", 7)

encoded = base64_encode(b"hello")   # b"aGVsbG8="
assert base64_decode(encoded) == b"hello"
```

`base64_encode(b"")` returns `b""`. `base64_decode` raises `ValueError` in three cases: a character outside the Base64 alphabet, a length that is not a multiple of four, or padding in the wrong place.

`murmur64` mixes in its trailing partial block from the first `len % 8` bytes of the input, not from the last ones. Its values therefore differ from MurmurHash64A whenever the length is not a multiple of eight.

## Hash table

```python
from zkit.hashtable import HashTable

table = HashTable()
table.set(42, "answer")
table.get(42)            # "answer"
table.get(7)             # None
42 in table              # True
table.slot(42)           # 0, the entry's position in insertion order
list(table.items())      # [(42, "answer")]

table.map_mut(lambda key, value: value.upper())
table.remove(42)         # absent keys are ignored
len(table)               # 0
```

Keys must be integers in `0 .. 2**64 - 1`. Any other type raises `TypeError`, and an integer out of range raises `ValueError`.

The table grows once it holds more than three quarters of its bucket count. `rehash(n)` rebuilds the table with `n` buckets. `rehash_fast()` relinks the chains in place. `remove_entry(index)` deletes by position and raises `IndexError` when the position is out of range.

## Command-line options

```python
from zkit.opts import Options, OptionType

opts = Options("demo")
opts.add("f", "foo", "the foo option", OptionType.STRING)
opts.add("n", "count", "how many", OptionType.INT)
opts.add("v", "verbose", "talk more", OptionType.FLAG)
opts.positional_add("foo")

if not opts.compile(["demo", "bar", "--count=3", "-v"]):
    opts.print_errors()
    opts.print_help()

opts.string("foo", "default")   # "bar"
opts.integer("count", 0)        # 3
opts.has_arg("verbose")         # True
opts.positionals_filled()       # True
```

The first item of the list passed to `compile` is the program name.

- A long name follows `--` and a short name follows `-`.
- A value can be attached with `=`, written straight after the name, or given as the next argument.
- A bare argument fills the next positional option. Positional options are filled in the order they were registered.
- Lookups such as `string`, `real`, `integer` and `has_arg` use the long name.

Problems found while parsing are collected in `opts.errors` as `OptionError` items. Each item has a `type`, which is an `OptionErrorType` (`VALUE`, `OPTION`, `EXTRA_VALUE` or `MISSING_VALUE`), a `value`, and a `message`.

`format_errors()` and `format_help()` return the error text and the help text as strings. `print_errors()` and `print_help()` write the same text to standard output.

## Job system

```python
from zkit.jobs import JobSystem, JobPriority

results = []
with JobSystem(4, 100) as pool:
    pool.enqueue(results.append, 1, JobPriority.HIGH)
    while not pool.done():
        pool.process()
```

The priorities are `REALTIME`, `HIGH`, `NORMAL`, `LOW` and `IDLE`. Each priority has its own queue, limited to `max_jobs` entries; the default limit is 100. `enqueue` returns `False` when the queue for that priority is full.

Jobs reach idle workers only when `process()` is called. Call it repeatedly until `done()` returns `True`. Exceptions raised by jobs are collected in `pool.failures`.

`close()`, which also runs when the `with` block is left, stops the workers and drops any jobs still queued.

## Scalar math

```python
from zkit.scalar import to_radians, angle_diff, float_to_half, half_to_float, lerp, smooth_step

to_radians(180.0)                     # 3.14159...
float_to_half(1.0)                    # 0x3C00
half_to_float(0x3C00)                 # 1.0
lerp(0.0, 10.0, 0.25)                 # 2.5
smooth_step(0.0, 1.0, 0.5)            # 0.5
```

`floor` and `ceil` are built on truncation. Whole numbers move one step too far: `floor(-2.0)` gives `-3.0`, and `ceil(2.0)` gives `3.0`.

`round_nearest` rounds halves away from zero. `mod` and `angle_diff` are built on it.

`fast_exp` is a polynomial meant for `-1 <= x <= 1`. `quake_rsqrt` approximates `1 / sqrt(a)` from the float's bit pattern.

## What zkit does not include

zkit has no vector, matrix, quaternion or bounding-volume types, so there is no geometry or transformation math. `zkit.scalar` works on plain floats only. zkit also provides no command-line program of its own.

## Running the tests

```
pytest
```