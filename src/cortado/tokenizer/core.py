"""Configurable string tokenizer with a bidirectional cursor.

StringTokenizer composes the scan (ScannerMixin) and the cursor
(CursorMixin) around three pieces of instance state: an immutable content
snapshot, a frozen TokenizerConfig, and a cached token list.

Cache invalidation uses a generation counter. Every mutator and reset()
bumps ``_generation``; reads compare it with the generation the cached
list was built at and rescan lazily on mismatch.

Thread Safety:
Instances are not safe for concurrent use. Create one per thread, or use
duplicate() to hand out independent copies.

"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any

from cortado.config import TokenizerConfig, get_tokenizer_config
from cortado.errors import ConfigurationError, DuplicationError
from cortado.matchers import MATCHERS, StringMatcher
from cortado.tokenizer.cursor import CursorMixin
from cortado.tokenizer.scanner import ScannerMixin, Token
from cortado.tokenizer.view import TokenListView
from cortado.utils.logger import get_logger

logger = get_logger(__name__)

Content = str | Sequence[str] | None

# Sentinel: reset() without an argument keeps the current content
_KEEP: Any = object()


def _snapshot(content: Content) -> str | None:
    """Take an owned, immutable copy of the content."""
    if content is None or isinstance(content, str):
        return content
    try:
        return "".join(content)
    except TypeError as exc:
        raise ConfigurationError(
            f"content must be a string or a sequence of characters, got {type(content).__name__}",
            "content",
        ) from exc


def _as_matcher(value: StringMatcher | str, parameter: str) -> StringMatcher:
    if isinstance(value, str):
        return MATCHERS.string_matcher(value)
    if isinstance(value, StringMatcher):
        return value
    raise ConfigurationError(
        f"expected a character, string or StringMatcher, got {type(value).__name__}", parameter
    )


class StringTokenizer(ScannerMixin, CursorMixin):
    """Splits a string into tokens using pluggable matchers.

    Usage:
            >>> tok = StringTokenizer("a;b;'c;d'", ";", "'")
            >>> tok.get_token_list()
            ['a', 'b', 'c;d']
            >>> tok.next()
            'a'

    Thread Safety:
        Not thread-safe. Each instance owns exactly one cursor and one cache.

    """

    __slots__ = (
        "_chars",
        "_config",
        "_tokens",
        "_generation",  # Bumped by every mutation
        "_tokens_generation",  # Generation the cached list was built at
        "_cursor",
    )

    def __init__(
        self,
        content: Content = None,
        delimiter: StringMatcher | str | None = None,
        quote: StringMatcher | str | None = None,
        *,
        config: TokenizerConfig | None = None,
    ) -> None:
        """Initialize tokenizer with content.

        Args:
            content: String or sequence of characters to split (copied)
            delimiter: Character, literal string or matcher marking boundaries
            quote: Character or matcher opening quoted regions
            config: Base configuration (default: the context default)
        """
        base = config if config is not None else get_tokenizer_config()
        changes: dict[str, StringMatcher] = {}
        if delimiter is not None:
            changes["delimiter_matcher"] = _as_matcher(delimiter, "delimiter")
        if quote is not None:
            changes["quote_matcher"] = _as_matcher(quote, "quote")
        self._config: TokenizerConfig = base.with_changes(**changes) if changes else base

        self._chars: str | None = _snapshot(content)
        self._tokens: list[Token] | None = None
        self._generation: int = 0
        self._tokens_generation: int = -1
        self._cursor: int = 0

    # =========================================================================
    # Token cache
    # =========================================================================

    def _is_current(self) -> bool:
        return self._tokens is not None and self._tokens_generation == self._generation

    def _check_tokenized(self) -> list[Token]:
        """Return the cached token list, rescanning if it is stale."""
        if not self._is_current():
            if self._chars is None:
                tokens = self.tokenize(None)
            else:
                tokens = self.tokenize(self._chars, 0, len(self._chars))
            self._tokens = tokens
            self._tokens_generation = self._generation
            if self._cursor > len(tokens):
                self._cursor = len(tokens)
            logger.debug(
                "Tokenized %d chars into %d tokens",
                0 if self._chars is None else len(self._chars),
                len(tokens),
            )
        return self._tokens  # type: ignore[return-value]

    def _reconfigure(self, **changes: Any) -> StringTokenizer:
        self._config = self._config.with_changes(**changes)
        self._generation += 1
        return self

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def config(self) -> TokenizerConfig:
        """The current (frozen) configuration."""
        return self._config

    def set_config(self, config: TokenizerConfig | None) -> StringTokenizer:
        """Replace the whole configuration (None = context default)."""
        self._config = config if config is not None else get_tokenizer_config()
        self._generation += 1
        return self

    @property
    def delimiter_matcher(self) -> StringMatcher:
        return self._config.delimiter_matcher  # type: ignore[return-value]

    def set_delimiter_char(self, char: str | None) -> StringTokenizer:
        """Use a single character as delimiter (None = default)."""
        return self._reconfigure(delimiter_matcher=None if char is None else MATCHERS.char_matcher(char))

    def set_delimiter_string(self, text: str | None) -> StringTokenizer:
        """Use a literal string as delimiter (None = default, "" = never)."""
        return self._reconfigure(delimiter_matcher=None if text is None else MATCHERS.string_matcher(text))

    def set_delimiter_matcher(self, matcher: StringMatcher | None) -> StringTokenizer:
        """Use a matcher as delimiter (None = default whitespace)."""
        return self._reconfigure(delimiter_matcher=matcher)

    @property
    def quote_matcher(self) -> StringMatcher:
        return self._config.quote_matcher  # type: ignore[return-value]

    def set_quote_char(self, char: str | None) -> StringTokenizer:
        """Use a single character as quote (None = no quoting)."""
        return self._reconfigure(quote_matcher=None if char is None else MATCHERS.char_matcher(char))

    def set_quote_matcher(self, matcher: StringMatcher | None) -> StringTokenizer:
        return self._reconfigure(quote_matcher=matcher)

    @property
    def ignored_matcher(self) -> StringMatcher:
        return self._config.ignored_matcher  # type: ignore[return-value]

    def set_ignored_char(self, char: str | None) -> StringTokenizer:
        """Drop every unquoted occurrence of a character (None = default)."""
        return self._reconfigure(ignored_matcher=None if char is None else MATCHERS.char_matcher(char))

    def set_ignored_string(self, text: str | None) -> StringTokenizer:
        """Drop every unquoted occurrence of a literal string (None = default)."""
        return self._reconfigure(ignored_matcher=None if text is None else MATCHERS.string_matcher(text))

    def set_ignored_matcher(self, matcher: StringMatcher | None) -> StringTokenizer:
        return self._reconfigure(ignored_matcher=matcher)

    @property
    def trimmer_matcher(self) -> StringMatcher:
        return self._config.trimmer_matcher  # type: ignore[return-value]

    def set_trimmer_matcher(self, matcher: StringMatcher | None) -> StringTokenizer:
        return self._reconfigure(trimmer_matcher=matcher)

    @property
    def ignore_empty_tokens(self) -> bool:
        return self._config.ignore_empty_tokens

    def set_ignore_empty_tokens(self, value: bool) -> StringTokenizer:
        return self._reconfigure(ignore_empty_tokens=bool(value))

    @property
    def empty_token_as_null(self) -> bool:
        return self._config.empty_token_as_null

    def set_empty_token_as_null(self, value: bool) -> StringTokenizer:
        return self._reconfigure(empty_token_as_null=bool(value))

    # =========================================================================
    # Content and tokens
    # =========================================================================

    @property
    def content(self) -> str | None:
        """The bound content, or None if there is none."""
        return self._chars

    def size(self) -> int:
        """Number of tokens."""
        return len(self._check_tokenized())

    def __len__(self) -> int:
        return self.size()

    def get_token_list(self) -> list[Token]:
        """Detached list of all tokens; safe to mutate."""
        return list(self._check_tokenized())

    def get_token_array(self) -> tuple[Token, ...]:
        """Detached fixed-size tuple of all tokens."""
        return tuple(self._check_tokenized())

    @property
    def tokens(self) -> TokenListView:
        """Live read-only view of the tokens; rejects structural mutation."""
        return TokenListView(self)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self, content: Content = _KEEP) -> StringTokenizer:
        """Rewind the cursor and drop cached tokens.

        Args:
            content: New content to bind (None = no content). Omit to keep
                the current content.

        Returns:
            self for method chaining
        """
        if content is not _KEEP:
            self._chars = _snapshot(content)
        self._tokens = None
        self._generation += 1
        self._cursor = 0
        return self

    def duplicate(self) -> StringTokenizer:
        """Create an independent copy.

        The copy shares the frozen configuration and the immutable content
        snapshot, and starts with its own empty cache and a rewound cursor.

        Raises:
            DuplicationError: If the copy could not be created
        """
        return self._copy_reset()

    def clone(self) -> StringTokenizer | None:
        """Like duplicate(), but returns None if duplication fails."""
        try:
            return self.duplicate()
        except DuplicationError:
            logger.warning("Could not duplicate %s", type(self).__name__, exc_info=True)
            return None

    def _copy_reset(self) -> StringTokenizer:
        cls = type(self)
        try:
            clone = cls.__new__(cls)
        except TypeError as exc:
            raise DuplicationError(f"cannot create a new {cls.__name__}") from exc
        # Only subclasses without __slots__ carry a __dict__; copy it deeply
        extra = getattr(self, "__dict__", None)
        if extra:
            try:
                state = copy.deepcopy(extra, {id(self): clone})
            except (TypeError, copy.Error) as exc:
                raise DuplicationError(f"cannot copy the state of {cls.__name__}") from exc
            clone.__dict__.update(state)
        clone._config = self._config
        clone._chars = self._chars
        clone._tokens = None
        clone._generation = 0
        clone._tokens_generation = -1
        clone._cursor = 0
        return clone

    def __copy__(self) -> StringTokenizer:
        return self.duplicate()

    def __deepcopy__(self, memo: dict[int, Any]) -> StringTokenizer:
        return self.duplicate()

    def __repr__(self) -> str:
        if not self._is_current():
            return f"{type(self).__name__}[not tokenized yet]"
        return f"{type(self).__name__}[{', '.join(str(t) for t in self._tokens)}]"  # type: ignore[union-attr]
