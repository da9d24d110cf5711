"""Character predicates for filtering generated code points.

A predicate is any callable taking a code point (int) and returning bool.
The built-ins below cover the common cases; BUILTIN_PREDICATES maps their
names for lookup from configuration.
"""

from __future__ import annotations

import unicodedata
from typing import Protocol, runtime_checkable

from cortado.charsets import ARABIC_DIGITS, ASCII_LOWERCASE, ASCII_UPPERCASE


@runtime_checkable
class CharacterPredicate(Protocol):
    """Protocol for code point filters."""

    def __call__(self, code_point: int) -> bool: ...


def letters(code_point: int) -> bool:
    """Any Unicode letter (categories L*)."""
    return unicodedata.category(chr(code_point)).startswith("L")


def digits(code_point: int) -> bool:
    """Any Unicode decimal digit (category Nd)."""
    return unicodedata.category(chr(code_point)) == "Nd"


def arabic_numerals(code_point: int) -> bool:
    """The ASCII digits 0-9."""
    return chr(code_point) in ARABIC_DIGITS


def ascii_lowercase_letters(code_point: int) -> bool:
    return chr(code_point) in ASCII_LOWERCASE


def ascii_uppercase_letters(code_point: int) -> bool:
    return chr(code_point) in ASCII_UPPERCASE


def ascii_letters(code_point: int) -> bool:
    return ascii_lowercase_letters(code_point) or ascii_uppercase_letters(code_point)


def ascii_alpha_numerals(code_point: int) -> bool:
    return ascii_letters(code_point) or arabic_numerals(code_point)


BUILTIN_PREDICATES: dict[str, CharacterPredicate] = {
    "letters": letters,
    "digits": digits,
    "arabic_numerals": arabic_numerals,
    "ascii_lowercase_letters": ascii_lowercase_letters,
    "ascii_uppercase_letters": ascii_uppercase_letters,
    "ascii_letters": ascii_letters,
    "ascii_alpha_numerals": ascii_alpha_numerals,
}

__all__ = [
    "BUILTIN_PREDICATES",
    "CharacterPredicate",
    "arabic_numerals",
    "ascii_alpha_numerals",
    "ascii_letters",
    "ascii_lowercase_letters",
    "ascii_uppercase_letters",
    "digits",
    "letters",
]
