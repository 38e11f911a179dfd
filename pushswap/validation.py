"""Command-line argument checking for the sorter."""

from typing import List, Sequence

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LONG_MAX = 2**63 - 1


class InputError(ValueError):
    """Raised when the arguments cannot be sorted.

    ``reported`` tells whether the failure is announced with an error message
    or ends the program silently.
    """

    def __init__(self, message: str = "Error", reported: bool = True) -> None:
        super().__init__(message)
        self.reported = reported


def _wrap32(number: int) -> int:
    return (number - _INT_MIN) % 2**32 + _INT_MIN


def _sign_and_digits(text: str):
    """Skip leading whitespace, read an optional sign and the following digits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(int(char))
    return sign, digits


def split_words(text: str, separator: str) -> List[str]:
    """Split on runs of ``separator``, dropping empty words."""
    return [word for word in text.split(separator) if word]


def split_arguments(argv: Sequence[str]) -> List[str]:
    """Return the value arguments: a lone argument is split on spaces."""
    if len(argv) == 2:
        return split_words(argv[1], " ")
    return list(argv[1:])


def safe_atol(text: str) -> int:
    """Read a leading signed 64-bit integer; trailing text is ignored.

    Raises OverflowError when the digits exceed the 64-bit range.
    """
    sign, digits = _sign_and_digits(text)
    number = 0
    for digit in digits:
        if number > _LONG_MAX // 10 or (
            number == _LONG_MAX // 10 and digit > _LONG_MAX % 10
        ):
            raise OverflowError(f"{text!r} does not fit in 64 bits")
        number = number * 10 + digit
    return number * sign


def c_atoi(text: str) -> int:
    """Read a leading signed integer with 32-bit wrap-around arithmetic."""
    sign, digits = _sign_and_digits(text)
    number = 0
    for digit in digits:
        number = _wrap32(number * 10 + digit)
    return _wrap32(number * sign)


def check_args(args: Sequence[str]) -> List[int]:
    """Return the value of every argument; raise InputError on a bad one.

    A value outside the 32-bit range is rejected, as is a zero reading from
    text that does not start with '0'. An overflowing number reads as zero.
    """
    values = []
    for arg in args:
        try:
            value = safe_atol(arg)
        except OverflowError:
            value = 0
        if value > _INT_MAX or value < _INT_MIN or (value == 0 and arg[:1] != "0"):
            raise InputError(f"invalid argument: {arg!r}")
        values.append(value)
    return values


def has_duplicate(args: Sequence[str]) -> bool:
    """Tell whether two arguments read as the same integer."""
    values = [c_atoi(arg) for arg in args]
    return len(set(values)) != len(values)


def validate(argv: Sequence[str]) -> List[str]:
    """Check a full argument vector (program name first) and return the values' text.

    With no arguments an unreported InputError is raised. When the values come
    from a single split argument, the first one is left out of the duplicate check.
    """
    if len(argv) < 2:
        raise InputError("no arguments", reported=False)
    args = split_arguments(argv)
    check_args(args)
    duplicate_scope = args[1:] if len(argv) == 2 else args
    if has_duplicate(duplicate_scope):
        raise InputError("duplicate value")
    return args