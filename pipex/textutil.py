"""Small string helpers used to parse command lines and numbers."""

from __future__ import annotations

from itertools import dropwhile
from typing import Callable

_SPACE_CHARS = " \t\n\v\f\r"
_SIGN_CHARS = "+-"


def is_space(char: str) -> bool:
    """Return True if *char* is a space or one of the characters tab to carriage return."""
    return len(char) == 1 and char in _SPACE_CHARS


def is_sign(char: str) -> bool:
    """Return True if *char* is '+' or '-'."""
    return len(char) == 1 and char in _SIGN_CHARS


def skip(text: str, predicate: Callable[[str], bool]) -> str:
    """Return *text* without its leading characters that satisfy *predicate*."""
    return "".join(dropwhile(predicate, text))


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0.
    """
    rest = skip(text, is_space)
    negative = False
    if rest[:1] and is_sign(rest[0]):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(dropwhile(lambda c: False, _leading_digits(rest)))
    value = int(digits) if digits else 0
    return -value if negative else value


def _leading_digits(text: str) -> str:
    end = 0
    for char in text:
        if not ("0" <= char <= "9"):
            break
        end += 1
    return text[:end]


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    return str(int(number))


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in *chars* from both ends of *text*."""
    if not chars:
        return text
    return text.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* within the first *length* characters of *haystack*.

    Returns the index of the first match, 0 for an empty needle, or None
    when there is no match.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]