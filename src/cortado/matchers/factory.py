"""Factory for stock matchers.

Stock matchers are created once at import time and reused; the
constructors (``char_matcher``, ``string_matcher``...) collapse degenerate
input to the cheapest equivalent variant (an empty set becomes
NoneMatcher, a one-character string becomes CharMatcher).

Example:
    >>> from cortado.matchers import MATCHERS
    >>> MATCHERS.comma_matcher().is_match("a,b", 1)
    1
    >>> MATCHERS.string_matcher("##").is_match("a##b", 1)
    2
"""

from __future__ import annotations

from collections.abc import Iterable

from cortado.charsets import COMMA, DOUBLE_QUOTE, QUOTE_CHARS, SINGLE_QUOTE, SPACE, SPLIT_CHARS, TAB
from cortado.errors import ConfigurationError
from cortado.matchers.builtins import (
    AndMatcher,
    CharMatcher,
    CharSetMatcher,
    FunctionMatcher,
    MatchFunction,
    NoneMatcher,
    StringLiteralMatcher,
    TrimMatcher,
)
from cortado.matchers.protocol import StringMatcher

_COMMA = CharMatcher(COMMA)
_TAB = CharMatcher(TAB)
_SPACE = CharMatcher(SPACE)
_SPLIT = CharSetMatcher(SPLIT_CHARS)
_TRIM = TrimMatcher()
_SINGLE_QUOTE = CharMatcher(SINGLE_QUOTE)
_DOUBLE_QUOTE = CharMatcher(DOUBLE_QUOTE)
_QUOTE = CharSetMatcher(QUOTE_CHARS)
_NONE = NoneMatcher()


class MatcherFactory:
    """Constructs stock matchers.

    Stateless; use the module-level ``MATCHERS`` instance.
    """

    __slots__ = ()

    def comma_matcher(self) -> StringMatcher:
        """Matches ``,``."""
        return _COMMA

    def tab_matcher(self) -> StringMatcher:
        """Matches a tab character."""
        return _TAB

    def space_matcher(self) -> StringMatcher:
        """Matches a single space."""
        return _SPACE

    def split_matcher(self) -> StringMatcher:
        """Matches space, tab, newline, carriage return and form feed."""
        return _SPLIT

    def trim_matcher(self) -> StringMatcher:
        """Matches any control character or space (code point <= 32)."""
        return _TRIM

    def single_quote_matcher(self) -> StringMatcher:
        return _SINGLE_QUOTE

    def double_quote_matcher(self) -> StringMatcher:
        return _DOUBLE_QUOTE

    def quote_matcher(self) -> StringMatcher:
        """Matches either a single or a double quote."""
        return _QUOTE

    def none_matcher(self) -> StringMatcher:
        """Matches nothing."""
        return _NONE

    def char_matcher(self, char: str) -> StringMatcher:
        """Create a matcher for a single character.

        Raises:
            ConfigurationError: If ``char`` is not exactly one character
        """
        return CharMatcher(char)

    def char_set_matcher(self, chars: Iterable[str] | None) -> StringMatcher:
        """Create a matcher for any character in ``chars``.

        Args:
            chars: A string or iterable of single characters

        Returns:
            NoneMatcher for empty input, CharMatcher for one character,
            CharSetMatcher otherwise
        """
        if not chars:
            return _NONE
        charset = frozenset(chars)
        for char in charset:
            if not isinstance(char, str) or len(char) != 1:
                raise ConfigurationError(f"expected single characters, got {char!r}", "chars")
        if len(charset) == 1:
            return CharMatcher(next(iter(charset)))
        return CharSetMatcher(charset)

    def string_matcher(self, text: str | None) -> StringMatcher:
        """Create a matcher for a literal string.

        Args:
            text: The literal to match

        Returns:
            NoneMatcher for empty/None, CharMatcher for one character,
            StringLiteralMatcher otherwise
        """
        if not text:
            return _NONE
        if len(text) == 1:
            return CharMatcher(text)
        return StringLiteralMatcher(text)

    def and_matcher(self, *matchers: StringMatcher | None) -> StringMatcher:
        """Create a matcher that requires all ``matchers`` in sequence.

        ``None`` entries are skipped. No matchers yields NoneMatcher; a
        single matcher is returned unchanged.
        """
        present = tuple(m for m in matchers if m is not None)
        if not present:
            return _NONE
        if len(present) == 1:
            return present[0]
        return AndMatcher(present)

    def function_matcher(self, func: MatchFunction) -> StringMatcher:
        """Wrap a function ``(buffer, pos, start, end) -> int`` as a matcher."""
        if not callable(func):
            raise ConfigurationError(f"expected a callable, got {type(func).__name__}", "func")
        return FunctionMatcher(func)

    def coerce(self, value: StringMatcher | str | None, parameter: str = "matcher") -> StringMatcher | None:
        """Turn a char, literal string or matcher into a matcher.

        ``None`` passes through so callers can apply their own default.
        ``parameter`` names the offending argument in the error.

        Raises:
            ConfigurationError: For values that are neither strings nor matchers
        """
        if value is None:
            return None
        if isinstance(value, str):
            return self.string_matcher(value)
        if isinstance(value, StringMatcher):
            return value
        raise ConfigurationError(
            f"expected a string or StringMatcher, got {type(value).__name__}", parameter
        )


MATCHERS: MatcherFactory = MatcherFactory()

__all__ = ["MATCHERS", "MatcherFactory"]
