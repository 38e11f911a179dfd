"""Byte-buffer helpers modelled on the C memory functions.

Buffers are ``bytearray`` objects (or any mutable byte sequence); byte values
are taken modulo 256. Asking for more bytes than a buffer holds raises
ValueError instead of reading or writing past its end.
"""

from typing import MutableSequence, Optional

_SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c``; return the buffer."""
    _check_length(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Zero-filled buffer of ``count`` items of ``size`` bytes.

    Raises OverflowError when the total does not fit in 64 bits.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError("allocation size overflows")
    return bytearray(total)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over ``dest``; return ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes at offset ``src`` to offset ``dest`` of the same buffer.

    The regions may overlap; the bytes are copied as they were before the move.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if max(dest, src) + n > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``; 0 if none."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place in ascending order."""
    for start in range(len(values)):
        smallest = min(range(start, len(values)), key=values.__getitem__)
        values[start], values[smallest] = values[smallest], values[start]