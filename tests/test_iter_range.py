import pytest

from keybounds.iter_range import PrefixRange, iterate_bounds, next_prefix


def test_empty_prefix_is_full_range():
    assert PrefixRange(b"").into_bounds() == (None, None)


@pytest.mark.parametrize(
    "start, end",
    [
        (b"\xff", None),
        (b"\xff\xff\xff\xff", None),
        (b"a", b"b"),
        (b"a\xff\xff\xff", b"b"),
    ],
)
def test_prefix_range(start, end):
    assert PrefixRange(start).into_bounds() == (start, end)


def test_next_prefix_example():
    assert next_prefix(b"foo") == b"fop"


def test_next_prefix_empty_and_all_ff():
    assert next_prefix(b"") is None
    assert next_prefix(b"\xff\xff") is None


def test_next_prefix_carries_over_trailing_ff():
    assert next_prefix(b"a\xfe\xff") == b"a\xff"


def test_prefix_range_accepts_str():
    assert PrefixRange("a1").into_bounds() == (b"a1", b"a2")


def test_prefix_range_accepts_bytearray():
    assert PrefixRange(bytearray(b"k")).into_bounds() == (b"k", b"l")


@pytest.mark.parametrize(
    "prefix",
    [b"a", b"a1", b"a\xff", b"\x00", b"ab\xfe"],
)
def test_prefix_bounds_contain_prefixed_keys(prefix):
    lower, upper = PrefixRange(prefix).into_bounds()
    for suffix in (b"", b"\x00", b"\xff", b"\xff\xff\xff", b"zzz"):
        key = prefix + suffix
        assert lower <= key
        assert upper is None or key < upper
    assert upper is None or not upper.startswith(prefix)


def test_iterate_bounds_full_slice():
    assert iterate_bounds(slice(None)) == (None, None)


def test_iterate_bounds_range():
    assert iterate_bounds(slice(b"a1", b"b1")) == (b"a1", b"b1")


def test_iterate_bounds_from():
    assert iterate_bounds(slice(b"b1", None)) == (b"b1", None)


def test_iterate_bounds_to():
    assert iterate_bounds(slice(None, "b1")) == (None, b"b1")


def test_iterate_bounds_prefix():
    assert iterate_bounds(PrefixRange(b"a\xff")) == (b"a\xff", b"b")


def test_iterate_bounds_rejects_step():
    with pytest.raises(ValueError):
        iterate_bounds(slice(b"a", b"b", 2))


def test_iterate_bounds_rejects_unknown_type():
    with pytest.raises(TypeError):
        iterate_bounds(42)


def test_iterate_bounds_rejects_non_key_slice():
    with pytest.raises(TypeError):
        iterate_bounds(slice(1, 2))