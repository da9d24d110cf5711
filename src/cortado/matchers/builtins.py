"""Built-in matcher variants.

The set is deliberately closed: single character, literal string,
character set, trim (control chars and space), never-match, a sequential
composite, and a wrapper around a user-supplied function. Anything more
exotic goes through FunctionMatcher.

All variants are frozen, slotted dataclasses: they compare by value and
are safe to share between tokenizers, so copying a tokenizer's
configuration never needs to copy its matchers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from cortado.charsets import is_trimmable
from cortado.errors import ConfigurationError
from cortado.matchers.protocol import StringMatcher

MatchFunction = Callable[[str, int, int, int], int]


def _resolve_end(buffer: str, end: int | None) -> int:
    return len(buffer) if end is None else end


@dataclass(frozen=True, slots=True)
class CharMatcher:
    """Matches exactly one given character."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ConfigurationError(f"expected a single character, got {self.char!r}", "char")

    def is_match(self, buffer: str, pos: int, start: int = 0, end: int | None = None) -> int:
        if not start <= pos < _resolve_end(buffer, end):
            return 0
        return 1 if buffer[pos] == self.char else 0

    def __repr__(self) -> str:
        return f"CharMatcher({self.char!r})"


@dataclass(frozen=True, slots=True)
class StringLiteralMatcher:
    """Matches a literal string of one or more characters."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise ConfigurationError("literal matcher needs a non-empty string", "text")

    def is_match(self, buffer: str, pos: int, start: int = 0, end: int | None = None) -> int:
        # startswith honours the end bound, so no read past the active range
        if pos >= start and buffer.startswith(self.text, pos, _resolve_end(buffer, end)):
            return len(self.text)
        return 0

    def __repr__(self) -> str:
        return f"StringLiteralMatcher({self.text!r})"


@dataclass(frozen=True, slots=True)
class CharSetMatcher:
    """Matches any one character from a fixed set."""

    chars: frozenset[str]

    def is_match(self, buffer: str, pos: int, start: int = 0, end: int | None = None) -> int:
        if not start <= pos < _resolve_end(buffer, end):
            return 0
        return 1 if buffer[pos] in self.chars else 0

    def __repr__(self) -> str:
        return f"CharSetMatcher({''.join(sorted(self.chars))!r})"


@dataclass(frozen=True, slots=True)
class TrimMatcher:
    """Matches one control character or space (code point <= 32).

    Matches a single character at a time; callers loop to consume a run.
    """

    def is_match(self, buffer: str, pos: int, start: int = 0, end: int | None = None) -> int:
        if not start <= pos < _resolve_end(buffer, end):
            return 0
        return 1 if is_trimmable(buffer[pos]) else 0


@dataclass(frozen=True, slots=True)
class NoneMatcher:
    """Never matches."""

    def is_match(self, buffer: str, pos: int, start: int = 0, end: int | None = None) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class AndMatcher:
    """Matches when every matcher matches back to back.

    The total length is the sum of the individual matches; a single miss
    makes the whole composite miss.
    """

    matchers: tuple[StringMatcher, ...]

    def is_match(self, buffer: str, pos: int, start: int = 0, end: int | None = None) -> int:
        end = _resolve_end(buffer, end)
        total = 0
        for matcher in self.matchers:
            length = matcher.is_match(buffer, pos + total, start, end)
            if length == 0:
                return 0
            total += length
        return total


@dataclass(frozen=True, slots=True)
class FunctionMatcher:
    """Adapts a plain function with the ``is_match`` signature.

    The function receives ``(buffer, pos, start, end)`` with ``end`` always
    resolved to an int, and must return a non-negative length. A falsy
    result such as None counts as no match.
    """

    func: MatchFunction

    def is_match(self, buffer: str, pos: int, start: int = 0, end: int | None = None) -> int:
        end = _resolve_end(buffer, end)
        if not start <= pos < end:
            return 0
        length = self.func(buffer, pos, start, end)
        if not length:
            return 0
        # Clamp so a sloppy function cannot push the scan past the range
        return max(0, min(length, end - pos))


__all__ = [
    "AndMatcher",
    "CharMatcher",
    "CharSetMatcher",
    "FunctionMatcher",
    "MatchFunction",
    "NoneMatcher",
    "StringLiteralMatcher",
    "TrimMatcher",
]
