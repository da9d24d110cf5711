"""Read-only live view over a tokenizer's token list.

``StringTokenizer.tokens`` returns a TokenListView: it always reflects the
tokenizer's current tokens (rescanning after reconfiguration) and rejects
structural mutation. For a detached, freely mutable copy use
``get_token_list()`` or ``get_token_array()`` instead.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any, NoReturn, overload

from cortado.errors import UnsupportedMutationError

if TYPE_CHECKING:
    from cortado.tokenizer.core import StringTokenizer
    from cortado.tokenizer.scanner import Token


class TokenListView(Sequence["Token"]):
    """Live, mutation-rejecting sequence of tokens.

    Reading never moves the owning tokenizer's cursor.
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: StringTokenizer) -> None:
        self._owner = owner

    def _tokens(self) -> list[Token]:
        return self._owner._check_tokenized()

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> list[Token]: ...

    def __getitem__(self, index: int | slice) -> Token | list[Token]:
        return self._tokens()[index]

    def __len__(self) -> int:
        return len(self._tokens())

    def __iter__(self) -> Iterator[Token]:
        # Iterate over a snapshot so a rescan mid-loop cannot skip items
        return iter(tuple(self._tokens()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenListView):
            return self._tokens() == other._tokens()
        if isinstance(other, (list, tuple)):
            return self._tokens() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenListView({self._tokens()!r})"

    # =========================================================================
    # Rejected mutations
    # =========================================================================

    def _reject(self, operation: str) -> NoReturn:
        raise UnsupportedMutationError(operation)

    def __setitem__(self, index: Any, value: Any) -> NoReturn:
        self._reject("__setitem__")

    def __delitem__(self, index: Any) -> NoReturn:
        self._reject("__delitem__")

    def __iadd__(self, other: Any) -> NoReturn:
        self._reject("__iadd__")

    def append(self, value: Any) -> NoReturn:
        self._reject("append")

    def extend(self, values: Any) -> NoReturn:
        self._reject("extend")

    def insert(self, index: int, value: Any) -> NoReturn:
        self._reject("insert")

    def remove(self, value: Any) -> NoReturn:
        self._reject("remove")

    def pop(self, index: int = -1) -> NoReturn:
        self._reject("pop")

    def clear(self) -> NoReturn:
        self._reject("clear")

    def reverse(self) -> NoReturn:
        self._reject("reverse")

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._reject("sort")
