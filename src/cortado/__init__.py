"""
Cortado — Configurable String Tokenizer for Python

Splits text into tokens using pluggable matchers for delimiters, quotes,
ignored text and trimmable edges, with a bidirectional cursor over a
lazily computed token list. Zero runtime dependencies.

Quick Start:
    >>> from cortado import tokenize
    >>> tokenize("a b  c")
    ['a', 'b', 'c']

    >>> # Or use the tokenizer directly
    >>> from cortado import StringTokenizer
    >>> tok = StringTokenizer("a;'b;c';d", ";", "'")
    >>> tok.next()
    'a'
    >>> tok.get_token_list()
    ['a', 'b;c', 'd']

CSV and TSV:
    >>> from cortado import csv_tokenizer
    >>> csv_tokenizer(' A, "b,c" ,, d').get_token_list()
    ['A', 'b,c', '', 'd']

Random strings:
    >>> from cortado import RandomStringGenerator
    >>> generator = RandomStringGenerator.builder().within_range("a", "z").build()
    >>> word = generator.generate(5)

Installation:
    pip install cortado              # Core tokenizer (zero deps)
    pip install cortado[test]        # + pytest and hypothesis for the test suite
"""

from cortado.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from cortado.errors import (
    ConfigurationError,
    CortadoError,
    DuplicationError,
    NoSuchTokenError,
    UnsupportedMutationError,
)
from cortado.generator import RandomStringGenerator, RandomStringGeneratorBuilder
from cortado.matchers import MATCHERS, MatcherFactory, StringMatcher
from cortado.presets import CSV_CONFIG, TSV_CONFIG, csv_tokenizer, tsv_tokenizer
from cortado.tokenizer import StringTokenizer, Token, TokenListView
from cortado.tokenizer.core import Content

__version__ = "0.1.0"


def tokenize(
    content: Content,
    delimiter: StringMatcher | str | None = None,
    quote: StringMatcher | str | None = None,
    *,
    config: TokenizerConfig | None = None,
) -> list[Token]:
    """Split content into a list of tokens in one call.

    Args:
        content: String or sequence of characters to split
        delimiter: Character, literal string or matcher (default: whitespace)
        quote: Character or matcher opening quoted regions (default: none)
        config: Base configuration (uses the context default if None)

    Returns:
        New list of tokens

    Example:
        >>> tokenize("a,b,,c", ",")
        ['a', 'b', 'c']
        >>> tokenize("a,b,,c", config=CSV_CONFIG)
        ['a', 'b', '', 'c']
    """
    return StringTokenizer(content, delimiter, quote, config=config).get_token_list()


__all__ = [
    "CSV_CONFIG",
    "MATCHERS",
    "TSV_CONFIG",
    "ConfigurationError",
    "Content",
    "CortadoError",
    "DuplicationError",
    "MatcherFactory",
    "NoSuchTokenError",
    "RandomStringGenerator",
    "RandomStringGeneratorBuilder",
    "StringMatcher",
    "StringTokenizer",
    "Token",
    "TokenListView",
    "TokenizerConfig",
    "UnsupportedMutationError",
    "__version__",
    "csv_tokenizer",
    "get_tokenizer_config",
    "reset_tokenizer_config",
    "set_tokenizer_config",
    "tokenize",
    "tokenizer_config_context",
    "tsv_tokenizer",
]
