"""Digit problems on 32-bit signed integers."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def reverse(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit in a 32-bit signed integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if _INT_MIN <= result <= _INT_MAX else 0


def is_palindrome(x: int) -> bool:
    """Whether ``x`` reads the same forwards and backwards in decimal."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]