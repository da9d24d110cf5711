"""Tests for StringTokenizer scanning.

Covers delimiters, quoting, ignored text, trimming, and the empty-token
policies, plus the scan-range entry point used by subclasses.
"""

import pytest

from cortado import MATCHERS, StringTokenizer, tokenize
from cortado.errors import ConfigurationError


def _configured(text: str, ignored=None, *, ignore_empty: bool, as_null: bool = False) -> StringTokenizer:
    tok = StringTokenizer(text, ";", '"')
    tok.set_ignored_matcher(ignored)
    tok.set_ignore_empty_tokens(ignore_empty)
    tok.set_empty_token_as_null(as_null)
    return tok


class TestSemicolonScan:
    """Semicolon delimiter, double-quote quoting, varying ignored matcher."""

    def test_trimmed_with_empty_tokens(self) -> None:
        tok = _configured('a;b;c;"d;""e";f; ; ;  ', MATCHERS.trim_matcher(), ignore_empty=False)
        assert tok.get_token_list() == ["a", "b", "c", 'd;"e', "f", "", "", ""]

    def test_untrimmed_keeps_trailing_space(self) -> None:
        tok = _configured('a;b;c ;"d;""e";f; ; ;', MATCHERS.none_matcher(), ignore_empty=False)
        assert tok.get_token_list() == ["a", "b", "c ", 'd;"e', "f", " ", " ", ""]

    def test_untrimmed_keeps_leading_space(self) -> None:
        tok = _configured('a;b; c;"d;""e";f; ; ;', MATCHERS.none_matcher(), ignore_empty=False)
        assert tok.get_token_list() == ["a", "b", " c", 'd;"e', "f", " ", " ", ""]

    def test_empty_tokens_dropped(self) -> None:
        tok = _configured('a;b; c;"d;""e";f; ; ;', MATCHERS.trim_matcher(), ignore_empty=True)
        assert tok.get_token_list() == ["a", "b", "c", 'd;"e', "f"]

    def test_empty_tokens_as_null(self) -> None:
        tok = _configured(
            'a;b; c;"d;""e";f; ; ;', MATCHERS.trim_matcher(), ignore_empty=False, as_null=True
        )
        assert tok.get_token_list() == ["a", "b", "c", 'd;"e', "f", None, None, None]

    def test_shared_fixture(self, semicolon_tokenizer: StringTokenizer) -> None:
        assert semicolon_tokenizer.get_token_list() == ["a", "b", " c", 'd;"e', "f", " ", " ", ""]


class TestSpaceScan:
    """Single-space delimiter, where runs of spaces make empty tokens."""

    def _tokenizer(self, ignore_empty: bool) -> StringTokenizer:
        tok = StringTokenizer('a   b c "d e" f ')
        tok.set_delimiter_matcher(MATCHERS.space_matcher())
        tok.set_quote_matcher(MATCHERS.double_quote_matcher())
        tok.set_ignored_matcher(MATCHERS.none_matcher())
        tok.set_ignore_empty_tokens(ignore_empty)
        return tok

    def test_keeps_empty_tokens(self) -> None:
        assert self._tokenizer(False).get_token_list() == ["a", "", "", "b", "c", "d e", "f", ""]

    def test_drops_empty_tokens(self) -> None:
        assert self._tokenizer(True).get_token_list() == ["a", "b", "c", "d e", "f"]


class TestBasic:
    """Default configuration: whitespace delimiter, no quoting."""

    def test_collapses_whitespace_runs(self) -> None:
        assert StringTokenizer("a  b c").get_token_list() == ["a", "b", "c"]

    def test_mixed_whitespace(self) -> None:
        assert StringTokenizer("a \nb\fc").get_token_list() == ["a", "b", "c"]

    def test_control_chars_are_content(self) -> None:
        assert StringTokenizer("a \nb\u0001\fc").get_token_list() == ["a", "b\u0001", "c"]

    def test_quotes_are_plain_without_quote_matcher(self) -> None:
        assert StringTokenizer('a "b" c').get_token_list() == ["a", '"b"', "c"]

    def test_quote_mid_token_is_literal(self) -> None:
        assert StringTokenizer("a:b':c", ":", "'").get_token_list() == ["a", "b'", "c"]

    def test_char_delimiter(self) -> None:
        assert StringTokenizer("a:b:c", ":").get_token_list() == ["a", "b", "c"]

    def test_absent_delimiter_gives_single_token(self) -> None:
        assert StringTokenizer("a:b:c", ",").get_token_list() == ["a:b:c"]

    def test_string_delimiter(self) -> None:
        assert StringTokenizer("a##b##c", "##").get_token_list() == ["a", "b", "c"]

    def test_string_delimiter_from_sequence(self) -> None:
        assert StringTokenizer(["a", "b", "c", "d"], "bc").get_token_list() == ["a", "d"]

    def test_char_set_delimiter(self) -> None:
        tok = StringTokenizer("a/b\\c", MATCHERS.char_set_matcher("/\\"))
        assert tok.get_token_list() == ["a", "b", "c"]

    def test_matcher_delimiter_and_quote(self) -> None:
        tok = StringTokenizer(
            "`a`;`b`;`c`", MATCHERS.char_set_matcher(";"), MATCHERS.char_set_matcher("`")
        )
        assert tok.get_token_list() == ["a", "b", "c"]

    def test_comma_matcher(self) -> None:
        assert StringTokenizer("a,c", MATCHERS.comma_matcher()).get_token_list() == ["a", "c"]

    def test_generic_quote_matcher(self) -> None:
        tok = StringTokenizer("'ac'd", MATCHERS.comma_matcher(), MATCHERS.quote_matcher())
        assert tok.get_token_list() == ["acd"]


class TestEmptyTokens:
    """Empty-token policies."""

    def test_kept_as_empty_string(self) -> None:
        tok = StringTokenizer("a  b c").set_ignore_empty_tokens(False)
        assert tok.get_token_list() == ["a", "", "b", "c"]

    def test_kept_as_null(self) -> None:
        tok = StringTokenizer("a  b c").set_ignore_empty_tokens(False).set_empty_token_as_null(True)
        assert tok.get_token_list() == ["a", None, "b", "c"]

    def test_null_flag_ignored_while_dropping(self) -> None:
        tok = StringTokenizer("a  b c").set_empty_token_as_null(True)
        assert tok.get_token_list() == ["a", "b", "c"]

    def test_trailing_delimiter_gives_trailing_empty(self) -> None:
        tok = StringTokenizer("a,b,", ",").set_ignore_empty_tokens(False)
        assert tok.get_token_list() == ["a", "b", ""]

    def test_leading_delimiter_gives_leading_empty(self) -> None:
        tok = StringTokenizer(",a", ",").set_ignore_empty_tokens(False)
        assert tok.get_token_list() == ["", "a"]

    def test_lone_delimiter(self) -> None:
        tok = StringTokenizer(",", ",").set_ignore_empty_tokens(False)
        assert tok.get_token_list() == ["", ""]

    def test_empty_quotes_are_empty_token(self) -> None:
        tok = StringTokenizer("a,'',b", ",", "'").set_ignore_empty_tokens(False)
        assert tok.get_token_list() == ["a", "", "b"]


class TestIgnoredAndTrimmed:
    """Ignored text and trimmer interaction."""

    def _tokenizer(self, text: str, quote: str | None = None, trim: bool = True) -> StringTokenizer:
        tok = StringTokenizer(text, ":", quote)
        tok.set_ignored_matcher(MATCHERS.string_matcher("IGNORE"))
        if trim:
            tok.set_trimmer_matcher(MATCHERS.trim_matcher())
        tok.set_ignore_empty_tokens(False)
        tok.set_empty_token_as_null(True)
        return tok

    def test_ignored_inside_token(self) -> None:
        assert self._tokenizer("a: bIGNOREc : ").get_token_list() == ["a", "bc", None]

    def test_ignored_everywhere(self) -> None:
        text = "IGNOREaIGNORE: IGNORE bIGNOREc IGNORE : IGNORE "
        assert self._tokenizer(text).get_token_list() == ["a", "bc", None]

    def test_ignored_without_trimmer_keeps_spaces(self) -> None:
        text = "IGNOREaIGNORE: IGNORE bIGNOREc IGNORE : IGNORE "
        assert self._tokenizer(text, trim=False).get_token_list() == ["a", "  bc  ", "  "]

    def test_ignored_text_survives_inside_quotes(self) -> None:
        text = "IGNOREaIGNORE: IGNORE 'bIGNOREc'IGNORE'd' IGNORE : IGNORE "
        assert self._tokenizer(text, quote="'").get_token_list() == ["a", "bIGNOREcd", None]


class TestQuoted:
    """Quote handling."""

    def test_quoted_token(self) -> None:
        assert StringTokenizer("a 'b' c", " ", "'").get_token_list() == ["a", "b", "c"]

    def test_quoted_then_trailing_delimiter(self) -> None:
        tok = StringTokenizer("a:'b':", ":", "'").set_ignore_empty_tokens(False).set_empty_token_as_null(True)
        assert tok.get_token_list() == ["a", "b", None]

    def test_doubled_quote(self) -> None:
        tok = StringTokenizer("a:'b''c'", ":", "'").set_ignore_empty_tokens(False)
        assert tok.get_token_list() == ["a", "b'c"]

    def test_space_between_quoted_runs_is_kept(self) -> None:
        tok = StringTokenizer("a: 'b' 'c' :d", ":", "'").set_trimmer_matcher(MATCHERS.trim_matcher())
        assert tok.get_token_list() == ["a", "b c", "d"]

    def test_quoted_runs_join(self) -> None:
        tok = StringTokenizer("a: 'b'x'c' :d", ":", "'").set_trimmer_matcher(MATCHERS.trim_matcher())
        assert tok.get_token_list() == ["a", "bxc", "d"]

    def test_other_quote_char_is_literal_and_unterminated_runs_to_end(self) -> None:
        tok = StringTokenizer("a:'b'\"c':d", ":").set_quote_matcher(MATCHERS.quote_matcher())
        assert tok.get_token_list() == ["a", 'b"c:d']

    def test_apostrophe_inside_double_quotes(self) -> None:
        tok = StringTokenizer("a:\"There's a reason here\":b", ":").set_quote_matcher(MATCHERS.quote_matcher())
        assert tok.get_token_list() == ["a", "There's a reason here", "b"]

    def test_quoted_whitespace_is_not_trimmed(self) -> None:
        tok = StringTokenizer("a,' b ',c", ",", "'").set_trimmer_matcher(MATCHERS.trim_matcher())
        assert tok.get_token_list() == ["a", " b ", "c"]

    def test_delimiter_inside_quotes(self) -> None:
        assert StringTokenizer("'a b' c", " ", "'").get_token_list() == ["a b", "c"]


class TestTrimmed:
    """Trimmer strips unquoted token edges only."""

    def test_trim_matcher(self) -> None:
        tok = StringTokenizer("a: b :  ", ":").set_trimmer_matcher(MATCHERS.trim_matcher())
        tok.set_ignore_empty_tokens(False).set_empty_token_as_null(True)
        assert tok.get_token_list() == ["a", "b", None]

    def test_multi_char_trimmer(self) -> None:
        tok = StringTokenizer("a:  b  :", ":").set_trimmer_matcher(MATCHERS.string_matcher("  "))
        tok.set_ignore_empty_tokens(False).set_empty_token_as_null(True)
        assert tok.get_token_list() == ["a", "b", None]

    def test_inner_whitespace_kept(self) -> None:
        tok = StringTokenizer(" a b ,c", ",").set_trimmer_matcher(MATCHERS.trim_matcher())
        assert tok.get_token_list() == ["a b", "c"]


class TestTokenizeRange:
    """tokenize() on explicit ranges."""

    def test_none_is_empty(self) -> None:
        assert StringTokenizer().tokenize(None) == []

    def test_zero_count_is_empty(self) -> None:
        assert StringTokenizer().tokenize("a b", 1, 0) == []

    def test_sub_range(self) -> None:
        assert StringTokenizer().tokenize("w x y z", 2, 3) == ["x", "y"]
        assert StringTokenizer().tokenize("w x y z", 2, 5) == ["x", "y", "z"]

    def test_range_end_bounds_delimiter_match(self) -> None:
        tok = StringTokenizer(None, "##").set_ignore_empty_tokens(False)
        assert tok.tokenize("a##b", 0, 2) == ["a#"]

    @pytest.mark.parametrize(("offset", "count", "parameter"), [(-1, 1, "offset"), (4, 0, "offset"), (1, 3, "count"), (0, -1, "count")])
    def test_bad_range(self, offset: int, count: int, parameter: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            StringTokenizer().tokenize("abc", offset, count)
        assert exc_info.value.parameter == parameter

    def test_returns_fresh_list(self) -> None:
        tok = StringTokenizer()
        first = tok.tokenize("a b")
        first.append("z")
        assert tok.tokenize("a b") == ["a", "b"]


class TestConvenienceFunction:
    """Top-level tokenize()."""

    def test_default(self) -> None:
        assert tokenize("a b  c") == ["a", "b", "c"]

    def test_delimiter_and_quote(self) -> None:
        assert tokenize("a;'b;c';d", ";", "'") == ["a", "b;c", "d"]

    def test_none_content(self) -> None:
        assert tokenize(None) == []
