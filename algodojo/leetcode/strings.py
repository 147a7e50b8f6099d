"""String problems: substrings, palindromes, zigzags, integers and patterns."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    best = 0
    start = 0
    window: set[str] = set()

    for end, ch in enumerate(s):
        while ch in window:
            window.discard(s[start])
            start += 1
        window.add(ch)
        best = max(best, end - start + 1)

    return best


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""
    best = ""
    n = len(s)

    for i in range(n):
        for k in (0, 1):
            j = 0
            while j <= i and i + j + k < n and s[i - j] == s[i + j + k]:
                candidate = s[i - j : i + j + k + 1]
                if len(candidate) > len(best):
                    best = candidate
                j += 1

    return best


def convert(s: str, row_count: int) -> str:
    """Write ``s`` in a zigzag over ``row_count`` rows and read it row by row."""
    if row_count < 0:
        raise ValueError("row count must not be negative")

    period = 2 * (row_count - 1) if row_count > 1 else 1
    n = len(s)
    out: list[str] = []

    for i in range(row_count):
        diagonal = row_count > 1 and i % (row_count - 1) != 0
        for k in range(i, i + (n // period + 1) * period, period):
            if k < n:
                out.append(s[k])
            if diagonal and k + period - 2 * i < n:
                out.append(s[k + period - 2 * i])

    return "".join(out)


def parse_int(s: str) -> int:
    """Parse a leading integer like ``atoi``, clamped to the 32-bit range.

    Leading spaces and one sign are accepted; parsing stops at the first
    non-digit. Returns 0 when no digits follow.
    """
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]

    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = min(max(value * 10 + sign * (ord(ch) - ord("0")), _INT_MIN), _INT_MAX)

    return value


def _char_matches(x: str, y: str) -> bool:
    return y in (x, ".")


def is_match(s: str, p: str) -> bool:
    """Whether the pattern ``p`` (``.`` and ``*``) matches all of ``s``."""
    if p.startswith("*"):
        raise ValueError("pattern must not start with '*'")

    table = [[False] * (len(p) + 1) for _ in range(len(s) + 1)]
    table[0][0] = True

    for i in range(len(s) + 1):
        row = table[i]
        above = table[i - 1] if i > 0 else None
        for j, y in enumerate(p):
            star = y == "*" and (
                row[j - 1]
                or row[j]
                or (
                    above is not None
                    and above[j + 1]
                    and _char_matches(s[i - 1], p[j - 1])
                )
            )
            single = above is not None and above[j] and _char_matches(s[i - 1], y)
            row[j + 1] = star or single

    return table[len(s)][len(p)]