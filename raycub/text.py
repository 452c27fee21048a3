"""String and number helpers used by the map parser."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \f\n\r\t\v"
_DIGITS = "0123456789"


def parse_int(text: str | None) -> int:
    """Parse a leading decimal integer the way ``atoi`` does.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit. Values beyond the 32-bit
    signed range are clamped to ``INT_MAX`` or ``INT_MIN``. Text with
    no digits gives 0.
    """
    if not text:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        digit = ord(char) - ord("0")
        if value > INT_MAX // 10 or (
            value == INT_MAX // 10 and digit > INT_MAX % 10
        ):
            return INT_MIN if sign < 0 else INT_MAX
        value = value * 10 + digit
    return sign * value


def split_any(text: str, charset: str) -> list[str]:
    """Split ``text`` on any character of ``charset``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in charset:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int | None = None) -> int:
    """Find ``needle`` in the first ``limit`` characters of ``haystack``.

    Returns the index of the first match, or -1. An empty needle matches
    at 0. With ``limit`` of None the whole haystack is searched.
    """
    if not needle:
        return 0
    if limit is None:
        limit = len(haystack)
    if limit < 0:
        raise ValueError("limit must not be negative")
    size = len(needle)
    last_start = min(len(haystack), limit - size + 1)
    for index in range(max(last_start, 0)):
        if haystack.startswith(needle, index):
            return index
    return -1


def compare_prefix(first: str, second: str, count: int | None = None) -> int:
    """Compare up to ``count`` characters of two strings.

    Returns the difference of the code points at the first position where
    they differ, or 0 when they agree. With ``count`` of None the strings
    are compared whole.
    """
    if count is not None and count <= 0:
        return 0
    length = max(len(first), len(second)) + 1
    if count is not None:
        length = min(length, count)
    for index in range(length):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right or left == 0:
            return left - right
    return 0


def count_digits(number: int) -> int:
    """Count the characters of ``number`` written in decimal, sign included."""
    return len(str(number))


def count_digits_base(number: int, base: int) -> int:
    """Count the digits of a non-negative ``number`` written in ``base``."""
    if base < 2:
        raise ValueError("base must be at least 2")
    if number < 0:
        raise ValueError("number must not be negative")
    digits = 1
    while number >= base:
        number //= base
        digits += 1
    return digits