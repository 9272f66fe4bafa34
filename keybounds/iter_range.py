"""Lower and upper key bounds for iterating over a lexicographically sorted key space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

KeyLike = Union[bytes, bytearray, memoryview, str]
Bounds = Tuple[Optional[bytes], Optional[bytes]]

_MAX_BYTE = 0xFF


def _to_bytes(key: KeyLike) -> bytes:
    """Convert a key-like value into ``bytes`` (strings are UTF-8 encoded)."""
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"cannot use {type(key).__name__!r} as a key")


def next_prefix(prefix: KeyLike) -> Optional[bytes]:
    """Return the lowest key that follows every key starting with ``prefix``.

    A prefix scan is then the right-open range ``[prefix, next_prefix(prefix))``.
    For example ``next_prefix(b"foo")`` is ``b"fop"``.  Returns ``None`` when no
    such key exists, i.e. when the prefix is empty or made only of ``0xff`` bytes.
    """
    stripped = _to_bytes(prefix).rstrip(bytes([_MAX_BYTE]))
    if not stripped:
        return None
    return stripped[:-1] + bytes([stripped[-1] + 1])


@dataclass(frozen=True)
class PrefixRange:
    """The range of all keys starting with the given prefix."""

    prefix: KeyLike

    def into_bounds(self) -> Bounds:
        """Return the ``(lower, upper)`` bounds equivalent to this prefix.

        An empty prefix covers the full range, so both bounds are ``None``.
        A prefix of only ``0xff`` bytes has no upper bound.
        """
        start = _to_bytes(self.prefix)
        if not start:
            return None, None
        return start, next_prefix(start)


def iterate_bounds(value: object) -> Bounds:
    """Convert a range description into a ``(lower, upper)`` bounds pair.

    Accepted values are a :class:`PrefixRange`, any object with an
    ``into_bounds()`` method, or a ``slice`` of keys without a step, such as
    ``slice(None)`` (full range), ``slice(b"a", None)``, ``slice(None, b"z")``
    or ``slice(b"a", b"z")``.  Unset bounds are returned as ``None``.
    """
    if isinstance(value, slice):
        if value.step is not None:
            raise ValueError("key ranges do not take a step")
        lower = None if value.start is None else _to_bytes(value.start)
        upper = None if value.stop is None else _to_bytes(value.stop)
        return lower, upper
    into_bounds = getattr(value, "into_bounds", None)
    if callable(into_bounds):
        return into_bounds()
    raise TypeError(f"cannot convert {type(value).__name__!r} into iterate bounds")