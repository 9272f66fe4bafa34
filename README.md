# keybounds

Small helpers for building iteration bounds over keys stored in plain
lexicographic byte order, as used by ordered key-value stores.

A scan over keys is described by a lower bound (inclusive) and an upper bound
(exclusive). Either bound may be missing, meaning the scan is open on that side.
All helpers live in the `keybounds.iter_range` module. Keys may be given as
`bytes`, `bytearray`, `memoryview` or `str` (strings are UTF-8 encoded); bounds
always come back as `bytes` or `None`.

## Installation

```
pip install keybounds
```

## Usage

### Bounds from ranges

`iterate_bounds` turns a range description into a `(lower, upper)` pair.
It accepts a `slice` of keys without a step, a `PrefixRange`, or any object
with an `into_bounds()` method:

```python
from keybounds.iter_range import iterate_bounds, PrefixRange

iterate_bounds(slice(None))          # (None, None): the whole key space
iterate_bounds(slice(b"a", b"c"))    # (b"a", b"c")
iterate_bounds(slice(b"b1", None))   # (b"b1", None)
iterate_bounds(slice(None, "b1"))    # (None, b"b1")
iterate_bounds(PrefixRange(b"a"))    # (b"a", b"b")
```

A slice with a step raises `ValueError`. Any other value, or a slice bound
that is not key-like, raises `TypeError`.

### Prefix ranges

`PrefixRange` is a frozen dataclass covering every key that starts with a
given prefix. Its `into_bounds()` method gives the right-open range
`[prefix, next_prefix(prefix))`:

```python
PrefixRange(b"a").into_bounds()          # (b"a", b"b")
PrefixRange(b"a\xff\xff").into_bounds()  # (b"a\xff\xff", b"b")
PrefixRange(b"\xff").into_bounds()       # (b"\xff", None)
PrefixRange(b"").into_bounds()           # (None, None)
```

An empty prefix matches everything, so both bounds are open. A prefix made only
of `0xff` bytes has no key after all its extensions, so its upper bound is open.

### The next prefix

`next_prefix` returns the smallest key that sorts after every key starting
with the given prefix, or `None` if there is no such key (the prefix is empty
or made only of `0xff` bytes):

```python
from keybounds.iter_range import next_prefix

next_prefix(b"foo")       # b"fop"
next_prefix(b"a\xff")     # b"b"
next_prefix(b"\xff\xff")  # None
```

## What this package does not do

It only computes bounds. It stores no keys, opens no database and runs no
iteration; pass the bounds it returns to whatever ordered store you use.

## Running the tests

```
pip install -e ".[test]"
pytest
```