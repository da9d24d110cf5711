"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (safe to share between matchers)
- Module-level caching (no per-call allocation)

Usage:
    from cortado.charsets import SPLIT_CHARS

    if char in SPLIT_CHARS:  # O(1) lookup
        ...
"""

# Default delimiter: ASCII whitespace without vertical tab
SPLIT_CHARS: frozenset[str] = frozenset(" \t\n\r\f")

# Quote characters recognized by the generic quote matcher
QUOTE_CHARS: frozenset[str] = frozenset("'\"")

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
COMMA = ","
TAB = "\t"
SPACE = " "

# Anything at or below this code point counts as trimmable (controls + space)
TRIM_MAX_CODE_POINT = 0x20

# Digits 0-9, used by the generator predicates
ARABIC_DIGITS: frozenset[str] = frozenset("0123456789")

ASCII_LOWERCASE: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz")
ASCII_UPPERCASE: frozenset[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def is_trimmable(char: str) -> bool:
    """Check if character is a control character or space (code point <= 32)."""
    return ord(char) <= TRIM_MAX_CODE_POINT
