"""Preset tokenizer configurations.

CSV and TSV tokenizers: double-quote quoting, whitespace trimmed from
unquoted token edges, and empty fields preserved.

Example:
    >>> from cortado.presets import csv_tokenizer
    >>> csv_tokenizer('a, "b,c" ,,d').get_token_list()
    ['a', 'b,c', '', 'd']
"""

from __future__ import annotations

from cortado.config import TokenizerConfig
from cortado.matchers import MATCHERS
from cortado.tokenizer.core import Content, StringTokenizer

CSV_CONFIG: TokenizerConfig = TokenizerConfig(
    delimiter_matcher=MATCHERS.comma_matcher(),
    quote_matcher=MATCHERS.double_quote_matcher(),
    ignored_matcher=MATCHERS.none_matcher(),
    trimmer_matcher=MATCHERS.trim_matcher(),
    ignore_empty_tokens=False,
)

TSV_CONFIG: TokenizerConfig = CSV_CONFIG.with_changes(delimiter_matcher=MATCHERS.tab_matcher())


def csv_tokenizer(content: Content = None) -> StringTokenizer:
    """Create a new tokenizer for comma-separated values."""
    return StringTokenizer(content, config=CSV_CONFIG)


def tsv_tokenizer(content: Content = None) -> StringTokenizer:
    """Create a new tokenizer for tab-separated values.

    The tab delimiter wins over the trimmer, so tabs still split fields
    even though they are also trimmable.
    """
    return StringTokenizer(content, config=TSV_CONFIG)


__all__ = ["CSV_CONFIG", "TSV_CONFIG", "csv_tokenizer", "tsv_tokenizer"]
