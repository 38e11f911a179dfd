"""Character classification and case mapping for the ASCII range.

Every function takes either a code point or a one-character string. Only
ASCII characters are classified; anything else is neither a letter nor a
digit, and case mapping leaves it unchanged.
"""

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Code point of ``c``; a string must hold exactly one character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Upper-case form of an ASCII lower-case letter; anything else unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case form of an ASCII upper-case letter; anything else unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c