"""StringMatcher protocol for pluggable tokenizer rules.

A matcher answers one question: how many characters starting at ``pos``
satisfy my rule? The tokenizer asks four of them (delimiter, quote,
ignored, trimmer) at each position of its scan.

Thread Safety:
Matchers must be stateless. The built-in variants are frozen dataclasses
and may be shared freely between tokenizers and threads.

Example:
    >>> class SemicolonMatcher:
    ...     def is_match(self, buffer, pos, start=0, end=None):
    ...         end = len(buffer) if end is None else end
    ...         return 1 if pos < end and buffer[pos] == ";" else 0
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StringMatcher(Protocol):
    """Protocol for matcher implementations.

    Implementations must never read outside ``[start, end)`` and must not
    mutate any state: the same matcher instance is consulted many times per
    scan and may be shared between tokenizers.
    """

    def is_match(
        self,
        buffer: str,
        pos: int,
        start: int = 0,
        end: int | None = None,
    ) -> int:
        """Report the length of the match at ``pos``.

        Args:
            buffer: The complete source buffer (read-only)
            pos: Position to test
            start: First valid index of the active range (inclusive)
            end: End of the active range (exclusive); None means len(buffer)

        Returns:
            Number of matched characters, 0 for no match

        Complexity: O(match length)
        """
        ...
