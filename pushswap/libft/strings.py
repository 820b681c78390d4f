"""String helpers: measuring, searching, comparing, slicing and splitting.

Positions are returned as indexes into the string rather than pointers;
``None`` stands for "not found".
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(c, "c")
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(c, "c")
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of character codes that
    differ, a shorter string counting as if padded with NUL; 0 when the
    compared parts are equal.
    """
    _non_negative(n, "n")
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` lying wholly within the first ``length`` characters of ``big``.

    Returns the index of the match, 0 for an empty ``little``, or None.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strtrim(s: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, separator: str) -> list[str]:
    """Split ``s`` on ``separator``, dropping empty pieces."""
    _single_char(separator, "separator")
    return [piece for piece in s.split(separator) if piece]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation
    would have had.  When ``size`` is 0 or smaller than ``dst``, ``dst``
    is left as it is and the length reported is ``len(src) + size``.
    """
    _non_negative(size, "size")
    if size == 0 or size < len(dst):
        return dst, len(src) + size
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of a mutable sequence with ``func(index, char)`` in place."""
    if isinstance(s, str):
        raise TypeError("striteri needs a mutable sequence of characters, not str")
    for index, char in enumerate(s):
        s[index] = func(index, char)