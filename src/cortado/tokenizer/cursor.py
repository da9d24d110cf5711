"""Bidirectional cursor mixin over the cached token list.

The cursor is the index of the next token, always in ``[0, size]``:
``previous_index()`` is -1 before the first token and ``next_index()``
equals ``size`` after the last one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cortado.errors import NoSuchTokenError, UnsupportedMutationError

if TYPE_CHECKING:
    from cortado.tokenizer.scanner import Token


class CursorMixin:
    """Mixin providing list-iterator style navigation.

    Required Host Attributes:
        - _cursor: int

    """

    __slots__ = ()

    _cursor: int

    def _check_tokenized(self) -> list[Token]:
        """Return the current token list, scanning if needed. Implemented by StringTokenizer."""
        raise NotImplementedError

    # =========================================================================
    # Forward
    # =========================================================================

    def has_next(self) -> bool:
        """Check whether there are tokens after the cursor."""
        return self._cursor < len(self._check_tokenized())

    def next(self) -> Token:
        """Return the next token and advance.

        Raises:
            NoSuchTokenError: If the cursor is already after the last token
        """
        tokens = self._check_tokenized()
        if self._cursor >= len(tokens):
            raise NoSuchTokenError("no token after the cursor", self._cursor, len(tokens))
        token = tokens[self._cursor]
        self._cursor += 1
        return token

    def next_index(self) -> int:
        """Index of the token that next() would return."""
        self._check_tokenized()
        return self._cursor

    def next_token(self) -> Token:
        """Like next(), but returns None instead of raising at the end."""
        tokens = self._check_tokenized()
        if self._cursor < len(tokens):
            token = tokens[self._cursor]
            self._cursor += 1
            return token
        return None

    # =========================================================================
    # Backward
    # =========================================================================

    def has_previous(self) -> bool:
        """Check whether there are tokens before the cursor."""
        self._check_tokenized()
        return self._cursor > 0

    def previous(self) -> Token:
        """Return the previous token and move back.

        Raises:
            NoSuchTokenError: If the cursor is before the first token
        """
        tokens = self._check_tokenized()
        if self._cursor <= 0:
            raise NoSuchTokenError("no token before the cursor", self._cursor - 1, len(tokens))
        self._cursor -= 1
        return tokens[self._cursor]

    def previous_index(self) -> int:
        """Index of the token that previous() would return (-1 at the start)."""
        self._check_tokenized()
        return self._cursor - 1

    def previous_token(self) -> Token:
        """Like previous(), but returns None instead of raising at the start."""
        tokens = self._check_tokenized()
        if self._cursor > 0:
            self._cursor -= 1
            return tokens[self._cursor]
        return None

    # =========================================================================
    # Random access
    # =========================================================================

    def get(self, index: int) -> Token:
        """Read the token at an absolute index without moving the cursor.

        Raises:
            NoSuchTokenError: If ``index`` is outside ``[0, size)``
        """
        tokens = self._check_tokenized()
        if not 0 <= index < len(tokens):
            raise NoSuchTokenError("token index out of range", index, len(tokens))
        return tokens[index]

    # =========================================================================
    # Structural mutation (unsupported)
    # =========================================================================

    def remove(self) -> None:
        """Unsupported: the token list is read-only through the cursor."""
        raise UnsupportedMutationError("remove")

    def set(self, token: str | None) -> None:
        """Unsupported: the token list is read-only through the cursor."""
        raise UnsupportedMutationError("set")

    def add(self, token: str | None) -> None:
        """Unsupported: the token list is read-only through the cursor."""
        raise UnsupportedMutationError("add")

    # =========================================================================
    # Python iterator protocol
    # =========================================================================

    def __iter__(self) -> CursorMixin:
        return self

    def __next__(self) -> Token:
        if not self.has_next():
            raise StopIteration
        return self.next()
