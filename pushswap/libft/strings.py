"""Character-string helpers with C string semantics.

A string ends at its first NUL character, as a C string would; anything after
it is ignored. Functions that locate a character return its index, or None
when it is not there.
"""

from typing import Callable, MutableSequence, Optional, Tuple

NUL = "\0"


def _terminated(s: str) -> str:
    """Cut ``s`` at its first NUL character."""
    end = s.find(NUL)
    return s if end < 0 else s[:end]


def itoa(n: int) -> str:
    """Decimal text of ``n``, with a leading '-' when negative."""
    return str(n)


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_terminated(s))


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Looking for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    if c == NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL finds the terminator."""
    text = _terminated(s)
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Copy of ``s`` up to its terminator."""
    return _terminated(s)


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return _terminated(s1) + _terminated(s2)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text (at most ``size - 1`` characters, nothing when
    ``size`` is zero) and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _terminated(src)
    copied = text[: size - 1] if size else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had with
    unlimited room. When ``size`` is zero, ``dst`` is unchanged and the length
    of ``src`` is returned; when ``dst`` already fills the buffer, ``dst`` is
    unchanged and ``size + strlen(src)`` is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head = _terminated(dst)
    tail = _terminated(src)
    if size == 0:
        return head, len(tail)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the code points at the first position that
    differs, at a terminator, or at the ``n``-th character; zero when ``n``
    is zero.
    """
    if n <= 0:
        return 0
    first = _terminated(s1) + NUL
    second = _terminated(s2) + NUL
    for index, (x, y) in enumerate(zip(first, second)):
        if x != y or x == NUL or index == n - 1:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly in the first ``length`` characters.

    An empty ``little`` is found at index 0.
    """
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[: max(length, 0)].find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``s``."""
    text = _terminated(s)
    chars = _terminated(charset)
    if not chars:
        return text
    return text.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string of ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(_terminated(s)))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on every character, up to a NUL element.

    A character for which ``func`` returns a value is replaced by it in place.
    """
    for index, char in enumerate(s):
        if char == NUL:
            break
        replacement = func(index, char)
        if replacement is not None:
            s[index] = replacement