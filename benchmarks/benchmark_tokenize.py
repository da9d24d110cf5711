"""Benchmark tokenizer throughput.

Covers the default whitespace split, the CSV preset, multi-character
delimiters, and the cost of cache hits vs rescans.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only
"""

import pytest

from cortado import MATCHERS, StringTokenizer, csv_tokenizer
from cortado.generator import RandomStringGenerator, ascii_alpha_numerals


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_whitespace_split(benchmark, large_words):
    """Default configuration over a large whitespace-separated text."""

    def run():
        return StringTokenizer(large_words).size()

    assert benchmark(run) == 80_000


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_csv(benchmark, large_csv):
    """CSV preset with quoting, doubled quotes and trimming."""
    tokens = benchmark(lambda: csv_tokenizer(large_csv).get_token_list())
    assert tokens[1] == "name 0, with comma"


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_string_delimiter(benchmark, large_words):
    """Multi-character literal delimiter."""
    source = large_words.replace(" ", "::")
    assert benchmark(lambda: StringTokenizer(source, "::").size()) == 80_000


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_ignored_and_trimmed(benchmark, real_world_lines):
    """Short lines with ignored text and a trimmer, rebuilt every round."""

    def run():
        total = 0
        for line in real_world_lines:
            tok = StringTokenizer(line, ";", '"')
            tok.set_ignored_char("=").set_trimmer_matcher(MATCHERS.trim_matcher())
            total += tok.size()
        return total

    assert benchmark(run) > 0


@pytest.mark.benchmark(group="cache")
def test_benchmark_cached_reads(benchmark, large_words):
    """Reads against an already-scanned tokenizer (cache hit path)."""
    tok = StringTokenizer(large_words)
    tok.size()
    benchmark(tok.size)


@pytest.mark.benchmark(group="cache")
def test_benchmark_rescan_after_mutation(benchmark, large_words):
    """Every round invalidates the cache, forcing a full rescan."""
    tok = StringTokenizer(large_words)

    def run():
        tok.set_ignore_empty_tokens(True)
        return tok.size()

    benchmark(run)


@pytest.mark.benchmark(group="generator")
def test_benchmark_generate_alphanumeric(benchmark):
    """Random alphanumeric strings via predicate filtering."""
    generator = RandomStringGenerator.builder().within_range("0", "z").filtered_by(ascii_alpha_numerals).build()
    assert len(benchmark(generator.generate, 1000)) == 1000
