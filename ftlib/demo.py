"""Exercise every printf conversion and report the character counts."""

from __future__ import annotations

import argparse
from typing import Any, Optional

from .printf import printf, sprintf

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
UINT_MAX = 2**32 - 1


def _cases() -> list[tuple[str, tuple[Any, ...]]]:
    text = "Hello, 42!"
    text1 = "Test string"
    return [
        ("Char A: %c | Char Z: %c | Null char: %c\n", ("A", "Z", "\0")),
        ("String1: %s | String2 (NULL): %s | Empty: %s\n", (text1, None, "")),
        (
            "Int0: %d | IntMax: %d | IntMin: %d | Neg: %i\n",
            (0, INT_MAX, INT_MIN, -123456789),
        ),
        ("Unsigned0: %u | UINT_MAX: %u\n", (0, UINT_MAX)),
        ("Hex0: %x | HexMax: %x | HexUpper: %X\n", (0, UINT_MAX, UINT_MAX)),
        ("Pointer normal: %p | Pointer NULL: %p\n", (text1, None)),
        ("Percent signs: %% %% %% %% %%\n", ()),
        (
            "Combined: char %c, string %s, int %d, unsigned %u, hex %X, ptr %p, %%\n",
            ("Q", text1, -42, UINT_MAX, 305419896, text1),
        ),
        ("Char test: %c\n", ("A",)),
        ("String test: %s\n", (text,)),
        ("Int test: %d\n", (42,)),
        ("Unsigned test: %u\n", (UINT_MAX,)),
        ("Hex lowercase: %x\n", (UINT_MAX,)),
        ("Hex uppercase: %X\n", (UINT_MAX,)),
        ("Pointer test: %p\n", (text,)),
        ("Percent test: %%\n", ()),
    ]


def main(argv: Optional[list[str]] = None) -> int:
    """Print each test case and the number of characters it produced."""
    parser = argparse.ArgumentParser(description="Show printf conversions.")
    parser.parse_args(argv)
    printf("===== HARD TESTS =====\n\n")
    for fmt, args in _cases():
        printed = printf(fmt, *args)
        expected = len(sprintf(fmt, *args))
        printf("ft_printf: %d chars | expected: %d chars\n\n", printed, expected)
    return 0