"""Matcher system for Cortado.

A matcher reports how many characters at a buffer position satisfy a rule.
The tokenizer consults four of them: delimiter, quote, ignored, trimmer.

Key components:
- StringMatcher: Protocol every matcher implements
- Built-in variants: CharMatcher, StringLiteralMatcher, CharSetMatcher,
  TrimMatcher, NoneMatcher, AndMatcher, FunctionMatcher
- MATCHERS: MatcherFactory singleton with the stock matchers

Example:
    >>> from cortado.matchers import MATCHERS
    >>> delim = MATCHERS.char_set_matcher("/\\\\")
    >>> delim.is_match("a/b", 1)
    1
"""

from __future__ import annotations

from cortado.matchers.builtins import (
    AndMatcher,
    CharMatcher,
    CharSetMatcher,
    FunctionMatcher,
    NoneMatcher,
    StringLiteralMatcher,
    TrimMatcher,
)
from cortado.matchers.factory import MATCHERS, MatcherFactory
from cortado.matchers.protocol import StringMatcher

__all__ = [
    "MATCHERS",
    "AndMatcher",
    "CharMatcher",
    "CharSetMatcher",
    "FunctionMatcher",
    "MatcherFactory",
    "NoneMatcher",
    "StringLiteralMatcher",
    "StringMatcher",
    "TrimMatcher",
]
