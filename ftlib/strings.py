"""String helpers: search, compare, bounded copy, slicing, trimming and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL gives ``len(s)``; None if absent."""
    _require_str(s, "s")
    if _single_char(c) == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL gives ``len(s)``; None if absent."""
    _require_str(s, "s")
    if _single_char(c) == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair, a missing
    character counting as code 0, or 0 when they agree.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for pos in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[pos]) if pos < len(s1) else 0
        b = ord(s2[pos]) if pos < len(s2) else 0
        if a != b:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at 0; None when there is no match.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots (one kept for the terminator).

    Returns the copied text and ``len(src)``, the length that was attempted.
    """
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length that was attempted. When
    ``dest`` already fills the buffer it is left as is and the attempted
    length is ``len(src) + size``.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if len(dest) >= size:
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(_require_str(s, "s"))


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    _require_str(s, "s")
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[Union[str, int]],
    func: Callable[[int, Union[str, int]], Optional[Union[str, int]]],
) -> None:
    """Call ``func(index, item)`` for each item of ``s`` in place.

    A value other than None returned by ``func`` replaces the item.
    """
    if s is None or func is None:
        raise TypeError("s and func must be given")
    for index, item in enumerate(list(s)):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement