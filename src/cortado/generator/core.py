"""Random string generation.

RandomStringGenerator is immutable after creation and safe to share.
Use RandomStringGeneratorBuilder for mutable construction.

Code points are drawn either from an explicit character list (when one
was selected) or from the ``[minimum, maximum]`` range. Unassigned,
private-use and surrogate code points are always skipped, and when
predicates are set a code point must satisfy at least one of them.

Example:
    >>> generator = (
    ...     RandomStringGenerator.builder()
    ...     .within_range("a", "z")
    ...     .build()
    ... )
    >>> len(generator.generate(8))
    8
"""

from __future__ import annotations

import random
import sys
import unicodedata
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from cortado.errors import ConfigurationError

if TYPE_CHECKING:
    from cortado.generator.predicates import CharacterPredicate

# Receives an exclusive upper bound n and returns an int in [0, n)
RandomSource = Callable[[int], int]

MAX_CODE_POINT = sys.maxunicode

# Unassigned, private use, surrogate
_SKIPPED_CATEGORIES: frozenset[str] = frozenset({"Cn", "Co", "Cs"})


def _default_random(bound: int) -> int:
    return random.randrange(bound)


def _code_point(value: int | str, parameter: str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ConfigurationError(f"expected a single character, got {value!r}", parameter)
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"expected a code point or character, got {type(value).__name__}", parameter
        )
    return value


def _validated_range(minimum: int | str, maximum: int | str) -> tuple[int, int]:
    low = _code_point(minimum, "minimum")
    high = _code_point(maximum, "maximum")
    if low > high:
        raise ConfigurationError(
            f"minimum code point {low} is larger than maximum code point {high}", "minimum"
        )
    if low < 0:
        raise ConfigurationError(f"minimum code point {low} is negative", "minimum")
    if high > MAX_CODE_POINT:
        raise ConfigurationError(
            f"maximum code point {high} is larger than {MAX_CODE_POINT}", "maximum"
        )
    return low, high


class RandomStringGenerator:
    """Immutable random string generator.

    Create instances with ``RandomStringGenerator.builder()``.
    """

    __slots__ = ("_minimum", "_maximum", "_predicates", "_random", "_characters")

    def __init__(
        self,
        minimum: int,
        maximum: int,
        predicates: tuple[CharacterPredicate, ...],
        random_source: RandomSource,
        characters: tuple[int, ...],
    ) -> None:
        """Initialize generator with validated settings.

        Use RandomStringGeneratorBuilder to create instances.
        """
        self._minimum = minimum
        self._maximum = maximum
        self._predicates = predicates
        self._random = random_source
        self._characters = characters

    @staticmethod
    def builder() -> RandomStringGeneratorBuilder:
        """Create a new builder."""
        return RandomStringGeneratorBuilder()

    def generate(self, length: int, max_length: int | None = None) -> str:
        """Generate a random string.

        Candidates are drawn until enough pass the filters. If no candidate
        can ever pass (a surrogate-only range, or selected characters that
        every predicate rejects), this never returns.

        Args:
            length: Number of code points, or the minimum when max_length is given
            max_length: Inclusive upper bound for a random length (optional)

        Returns:
            Generated string of the requested length in code points

        Raises:
            ConfigurationError: For negative lengths or min > max
        """
        if max_length is not None:
            if length < 0:
                raise ConfigurationError(f"minimum length {length} is smaller than zero", "length")
            if max_length < length:
                raise ConfigurationError(
                    f"maximum length {max_length} is smaller than minimum length {length}",
                    "max_length",
                )
            length = self._random_between(length, max_length)
        if length < 0:
            raise ConfigurationError(f"length {length} is smaller than zero", "length")

        chars: list[str] = []
        remaining = length
        while remaining:
            if self._characters:
                code_point = self._characters[self._random(len(self._characters))]
            else:
                code_point = self._random_between(self._minimum, self._maximum)
            char = chr(code_point)
            if unicodedata.category(char) in _SKIPPED_CATEGORIES:
                continue
            if self._predicates and not any(predicate(code_point) for predicate in self._predicates):
                continue
            chars.append(char)
            remaining -= 1
        return "".join(chars)

    def _random_between(self, low: int, high: int) -> int:
        return self._random(high - low + 1) + low


class RandomStringGeneratorBuilder:
    """Mutable builder for RandomStringGenerator.

    Every method validates its arguments immediately and returns the
    builder for chaining.

    Example:
        >>> generator = (
        ...     RandomStringGenerator.builder()
        ...     .set_accumulate(True)
        ...     .within_range("a", "z")
        ...     .within_range("0", "9")
        ...     .select_from("!?#")
        ...     .build()
        ... )
    """

    __slots__ = ("_minimum", "_maximum", "_predicates", "_random", "_characters", "_accumulate")

    def __init__(self) -> None:
        """Initialize builder with the full code point range."""
        self._minimum = 0
        self._maximum = MAX_CODE_POINT
        self._predicates: list[CharacterPredicate] = []
        self._random: RandomSource | None = None
        self._characters: list[int] = []
        self._accumulate = False

    def set_accumulate(self, accumulate: bool) -> RandomStringGeneratorBuilder:
        """Make ranges and selections add to one character list.

        When False (default), each ``within_range`` call replaces the range
        and each ``select_from``/``within_ranges`` call replaces the list.
        """
        self._accumulate = bool(accumulate)
        return self

    def within_range(self, minimum: int | str, maximum: int | str) -> RandomStringGeneratorBuilder:
        """Limit generation to an inclusive code point range.

        Args:
            minimum: Smallest code point (int or single character)
            maximum: Largest code point (int or single character)

        Raises:
            ConfigurationError: If minimum > maximum or either is out of range
        """
        low, high = _validated_range(minimum, maximum)
        if self._accumulate:
            self._characters.extend(range(low, high + 1))
        else:
            self._minimum = low
            self._maximum = high
        return self

    def within_ranges(
        self, pairs: Iterable[tuple[int | str, int | str]] | None = None
    ) -> RandomStringGeneratorBuilder:
        """Select characters from several inclusive ranges.

        Args:
            pairs: (minimum, maximum) pairs; None or empty clears the list
                unless accumulating

        Raises:
            ConfigurationError: If a pair is malformed or out of order
        """
        if not self._accumulate:
            self._characters = []
        if pairs is None:
            return self
        for pair in pairs:
            if len(pair) != 2:
                raise ConfigurationError(f"range must be a (minimum, maximum) pair, got {pair!r}", "pairs")
            low, high = _validated_range(pair[0], pair[1])
            self._characters.extend(range(low, high + 1))
        return self

    def select_from(self, chars: Iterable[int | str] | None = None) -> RandomStringGeneratorBuilder:
        """Draw characters only from ``chars``.

        None or empty clears the list (unless accumulating), which falls
        back to the code point range.
        """
        if not self._accumulate:
            self._characters = []
        if chars:
            self._characters.extend(_code_point(char, "chars") for char in chars)
        return self

    def filtered_by(self, *predicates: CharacterPredicate) -> RandomStringGeneratorBuilder:
        """Keep only code points accepted by at least one predicate.

        Replaces any earlier predicates; calling with no arguments removes
        all filtering.

        Raises:
            ConfigurationError: If any predicate is not callable
        """
        for predicate in predicates:
            if not callable(predicate):
                raise ConfigurationError(
                    f"predicate must be callable, got {type(predicate).__name__}", "predicates"
                )
        self._predicates = list(predicates)
        return self

    def using_random(self, random_source: RandomSource | None) -> RandomStringGeneratorBuilder:
        """Use a custom random source ``n -> int in [0, n)`` (None = default)."""
        if random_source is not None and not callable(random_source):
            raise ConfigurationError(
                f"random source must be callable, got {type(random_source).__name__}", "random_source"
            )
        self._random = random_source
        return self

    def build(self) -> RandomStringGenerator:
        """Build an immutable generator from the current settings."""
        return RandomStringGenerator(
            minimum=self._minimum,
            maximum=self._maximum,
            predicates=tuple(self._predicates),
            random_source=self._random or _default_random,
            characters=tuple(self._characters),
        )

    get = build


__all__ = ["MAX_CODE_POINT", "RandomSource", "RandomStringGenerator", "RandomStringGeneratorBuilder"]
