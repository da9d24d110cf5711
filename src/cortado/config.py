"""Tokenizer configuration for Cortado.

TokenizerConfig bundles the four matcher slots and the two empty-token
policies into one frozen value. Tokenizers hold a reference to a config
and swap it wholesale on every mutation, so duplicating a tokenizer
shares configuration by value without any copying.

A ContextVar provides the default config for tokenizers constructed
without an explicit one.

Thread Safety:
    TokenizerConfig is frozen. ContextVars are thread-local by design, so
    setting the default in one thread never leaks into another.

Usage:
    from cortado.config import TokenizerConfig, tokenizer_config_context

    config = TokenizerConfig(delimiter_matcher=MATCHERS.comma_matcher())
    tok = StringTokenizer("a,b", config=config)

    # Or change the default for everything built inside a block
    with tokenizer_config_context(config):
        tok = StringTokenizer("a,b")

"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from cortado.matchers import MATCHERS, StringMatcher

_MATCHER_FIELDS = ("delimiter_matcher", "quote_matcher", "ignored_matcher", "trimmer_matcher")


def _slot_default(name: str) -> StringMatcher:
    if name == "delimiter_matcher":
        return MATCHERS.split_matcher()
    return MATCHERS.none_matcher()


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Passing None for any matcher restores that slot's default, and plain
    strings become char or literal matchers, so a config is never left
    with an unusable slot.

    Raises:
        ConfigurationError: If a matcher slot holds anything else

    Attributes:
        delimiter_matcher: Marks token boundaries (default: whitespace)
        quote_matcher: Opens/closes quoted regions (default: none)
        ignored_matcher: Text removed from tokens outside quotes (default: none)
        trimmer_matcher: Stripped from unquoted token edges (default: none)
        ignore_empty_tokens: Drop empty tokens entirely
        empty_token_as_null: Represent empty tokens as None; only consulted
            when ignore_empty_tokens is False

    """

    delimiter_matcher: StringMatcher | None = None
    quote_matcher: StringMatcher | None = None
    ignored_matcher: StringMatcher | None = None
    trimmer_matcher: StringMatcher | None = None
    ignore_empty_tokens: bool = True
    empty_token_as_null: bool = False

    def __post_init__(self) -> None:
        for name in _MATCHER_FIELDS:
            value = MATCHERS.coerce(getattr(self, name), name)
            # Frozen: slots are normalized once, at construction
            object.__setattr__(self, name, _slot_default(name) if value is None else value)

    def with_changes(self, **changes: Any) -> TokenizerConfig:
        """Return a copy with the given fields replaced.

        Example:
            >>> TokenizerConfig().with_changes(ignore_empty_tokens=False)
            TokenizerConfig(..., ignore_empty_tokens=False, ...)
        """
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> TokenizerConfig:
        """Create TokenizerConfig from a dictionary.

        Useful when configuration comes from external sources (YAML, TOML,
        CLI flags). Matcher fields accept plain strings, which become char
        or literal matchers. Unknown keys are silently ignored.

        Args:
            config_dict: Mapping with keys matching TokenizerConfig fields.

        Returns:
            New TokenizerConfig instance.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "delimiter_matcher": ";",
            ...     "quote_matcher": '"',
            ...     "ignore_empty_tokens": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.delimiter_matcher
            CharMatcher(';')

        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            if key in valid_fields:
                filtered[key] = value
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get the default tokenizer configuration for the current context."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set the default tokenizer configuration for the current context.

    Only affects tokenizers constructed afterwards without an explicit
    config; existing tokenizers keep the config they were built with.
    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to the built-in default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary default-config changes.

    Args:
        config: TokenizerConfig to use within the context.

    Yields:
        None

    Example:
        >>> with tokenizer_config_context(TokenizerConfig(ignore_empty_tokens=False)):
        ...     tok = StringTokenizer("a  b")
        >>> tok.get_token_list()
        ['a', '', 'b']

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "reset_tokenizer_config",
    "set_tokenizer_config",
    "tokenizer_config_context",
]
