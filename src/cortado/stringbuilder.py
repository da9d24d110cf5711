"""StringBuilder for O(n) token accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Unlike a plain list-of-parts buffer it
also tracks the character length, so the scanner can remember "the token
ends here" while still buffering trailing text that may be trimmed.

Thread Safety:
StringBuilder instances are local to each tokenize() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with character-length tracking.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("abc").append("  ")
            >>> len(sb)
            5
            >>> sb.build(3)
            'abc'

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self, end: int | None = None) -> str:
        """Join all parts into the final string.

        Args:
            end: Keep only the first ``end`` characters (None = everything)

        Returns:
            Concatenated string of all appended parts, optionally truncated
        """
        text = "".join(self._parts)
        if end is None or end >= self._length:
            return text
        return text[:end]

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        """Return number of characters accumulated."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any characters have been appended."""
        return self._length > 0
