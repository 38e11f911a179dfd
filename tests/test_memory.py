import random

import pytest

from pushswap.libft.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    selection_sort,
)


def test_memset_fills_prefix_only():
    buffer = bytearray(b"abcdef")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer[:3] == b"xxx"
    assert buffer[3:] == b"def"


def test_memset_takes_value_modulo_256():
    buffer = bytearray(2)
    memset(buffer, 0x141, 2)
    assert list(buffer) == [0x41, 0x41]


def test_memset_rejects_overlong_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buffer = bytearray(b"hello")
    bzero(buffer, 4)
    assert buffer == bytes(4) + b"o"


def test_calloc_is_zero_filled():
    buffer = calloc(4, 3)
    assert len(buffer) == 4 * 3
    assert not any(buffer)
    assert calloc(0, 8) == bytearray()


def test_calloc_overflow_and_negative():
    with pytest.raises(OverflowError):
        calloc(2**40, 2**40)
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"wxyz", 3)
    assert result is dest
    assert dest[:3] == b"wxy"
    assert dest[3:] == b"..."


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 4)


@pytest.mark.parametrize("dest,src", [(2, 0), (0, 2), (1, 1), (0, 3)])
def test_memmove_handles_overlap(dest, src):
    original = bytes(b"abcdefgh")
    buffer = bytearray(original)
    n = 4
    memmove(buffer, dest, src, n)
    assert buffer[dest : dest + n] == original[src : src + n]
    untouched = [i for i in range(len(original)) if not dest <= i < dest + n]
    assert all(buffer[i] == original[i] for i in untouched)


def test_memmove_rejects_region_past_end():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_respects_limit():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None
    assert memchr(data, ord("b") + 256, 1) == 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_is_antisymmetric():
    rng = random.Random(7)
    for _ in range(50):
        a = bytes(rng.randrange(256) for _ in range(6))
        b = bytes(rng.randrange(256) for _ in range(6))
        assert memcmp(a, b, 6) == -memcmp(b, a, 6)


def test_selection_sort_matches_sorted():
    rng = random.Random(3)
    for size in (0, 1, 2, 5, 30):
        values = [rng.randint(-100, 100) for _ in range(size)]
        expected = sorted(values)
        selection_sort(values)
        assert values == expected


def test_selection_sort_with_duplicates_and_extremes():
    values = [2**31 - 1, -(2**31), 0, 0, -1]
    expected = sorted(values)
    selection_sort(values)
    assert values == expected