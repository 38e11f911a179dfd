"""Splitting delimited text into strings or integers."""

import re
from typing import List

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def split_to_strings(text: str, delimiter: str) -> List[str]:
    """Split ``text`` on ``delimiter``.

    Empty fields are kept, except for the one after a trailing delimiter;
    empty text gives no fields.
    """
    if not text:
        return []
    fields = text.split(delimiter)
    if fields[-1] == "":
        fields.pop()
    return fields


def _to_int(field: str) -> int:
    match = _LEADING_INT.match(field)
    if match is None:
        raise ValueError(f"no integer in {field!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"{field!r} is out of the 32-bit range")
    return value


def split_to_ints(text: str, delimiter: str) -> List[int]:
    """Split ``text`` on ``delimiter`` and read a leading integer from every field.

    Raises ValueError for a field with no integer and OverflowError for one
    outside the 32-bit range; text after the digits is ignored.
    """
    return [_to_int(field) for field in split_to_strings(text, delimiter)]