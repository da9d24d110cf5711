"""Tests for the random string generator and its builder."""

import sys
import unicodedata

import pytest

from cortado.errors import ConfigurationError
from cortado.generator import (
    BUILTIN_PREDICATES,
    RandomStringGenerator,
    arabic_numerals,
    ascii_alpha_numerals,
    ascii_letters,
    ascii_lowercase_letters,
    ascii_uppercase_letters,
    digits,
    letters,
)


def _only_a(code_point: int) -> bool:
    return code_point == ord("a")


def _only_b(code_point: int) -> bool:
    return code_point == ord("b")


class TestBuilderValidation:
    """Range arguments are checked when they are given."""

    def test_maximum_above_unicode(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            RandomStringGenerator.builder().within_range(0, sys.maxunicode + 1)
        assert exc_info.value.parameter == "maximum"

    def test_minimum_above_maximum(self) -> None:
        with pytest.raises(ConfigurationError):
            RandomStringGenerator.builder().within_range(2, 1)

    def test_negative_minimum(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            RandomStringGenerator.builder().within_range(-1, 1)
        assert exc_info.value.parameter == "minimum"

    def test_multi_char_bound(self) -> None:
        with pytest.raises(ConfigurationError):
            RandomStringGenerator.builder().within_range("ab", "z")

    def test_bad_pair(self) -> None:
        with pytest.raises(ConfigurationError):
            RandomStringGenerator.builder().within_ranges([("a", "z", "!")])

    def test_non_callable_predicate(self) -> None:
        with pytest.raises(ConfigurationError):
            RandomStringGenerator.builder().filtered_by(_only_a, None)  # type: ignore[arg-type]

    def test_non_callable_random(self) -> None:
        with pytest.raises(ConfigurationError):
            RandomStringGenerator.builder().using_random(42)  # type: ignore[arg-type]


class TestLengths:
    """generate() length handling."""

    def test_zero_length(self) -> None:
        assert RandomStringGenerator.builder().build().generate(0) == ""

    def test_set_length(self) -> None:
        assert len(RandomStringGenerator.builder().build().generate(23)) == 23

    def test_negative_length(self) -> None:
        with pytest.raises(ConfigurationError):
            RandomStringGenerator.builder().get().generate(-1)

    def test_min_max_length(self) -> None:
        text = RandomStringGenerator.builder().get().generate(33, 42)
        assert 33 <= len(text) <= 42

    def test_min_max_negative_minimum(self) -> None:
        with pytest.raises(ConfigurationError):
            RandomStringGenerator.builder().get().generate(-1, 0)

    def test_min_greater_than_max(self) -> None:
        with pytest.raises(ConfigurationError):
            RandomStringGenerator.builder().get().generate(1, 0)

    def test_random_source_picks_length(self) -> None:
        generator = RandomStringGenerator.builder().within_range("a", "a").using_random(lambda n: n - 1).build()
        assert generator.generate(2, 6) == "aaaaaa"


class TestRanges:
    """Code point ranges and character lists."""

    def test_within_range(self) -> None:
        text = RandomStringGenerator.builder().within_range("!", "~").get().generate(500)
        assert all("!" <= char <= "~" for char in text)

    def test_within_multiple_ranges(self) -> None:
        generator = (
            RandomStringGenerator.builder()
            .within_ranges()
            .within_ranges(None)
            .within_ranges([("a", "z"), ("0", "9")])
            .build()
        )
        text = generator.generate(500)
        assert all(char.islower() or char.isdigit() for char in text)
        assert all(char.isascii() for char in text)

    def test_select_from(self) -> None:
        text = RandomStringGenerator.builder().select_from("abcdefgh").get().generate(50)
        assert set(text) <= set("abcdefgh")

    def test_select_from_single(self) -> None:
        assert RandomStringGenerator.builder().select_from("a").get().generate(5) == "aaaaa"

    def test_select_from_replaces_by_default(self) -> None:
        generator = (
            RandomStringGenerator.builder()
            .select_from(None)
            .select_from("ab")
            .select_from("abcde")
            .build()
        )
        assert set(generator.generate(200)) <= set("abcde")

    def test_select_from_empty_falls_back_to_range(self) -> None:
        builder = RandomStringGenerator.builder().within_range("x", "z").select_from("a")
        assert builder.build().generate(10) == "a" * 10
        text = builder.select_from(None).build().generate(100)
        assert set(text) <= set("xyz")

    def test_accumulate_keeps_earlier_selections(self) -> None:
        generator = (
            RandomStringGenerator.builder()
            .set_accumulate(True)
            .select_from("ab")
            .select_from("cd")
            .select_from(None)
            .build()
        )
        assert set(generator.generate(400)) == set("abcd")

    def test_accumulate_with_ranges_and_selection(self) -> None:
        punctuation = "!#$%&()*+,-./:;<=>?@[]^_{|}~"
        generator = (
            RandomStringGenerator.builder()
            .set_accumulate(True)
            .within_range("a", "z")
            .within_range("A", "Z")
            .within_range("0", "9")
            .select_from(punctuation)
            .build()
        )
        text = generator.generate(200)
        assert all(char.isascii() and (char.isalnum() or char in punctuation) for char in text)

    def test_code_points_as_ints(self) -> None:
        text = RandomStringGenerator.builder().within_range(0x41, 0x43).build().generate(30)
        assert set(text) <= set("ABC")


class TestFilters:
    """Predicates narrow the candidate code points."""

    def test_change_of_filter(self) -> None:
        builder = RandomStringGenerator.builder().within_range("a", "z").filtered_by(_only_a)
        text = builder.filtered_by(_only_b).build().generate(100)
        assert text == "b" * 100

    def test_remove_filters(self) -> None:
        builder = RandomStringGenerator.builder().within_range("a", "z").filtered_by(_only_a)
        builder.filtered_by()
        text = builder.get().generate(500)
        assert set(text) != {"a"}

    def test_multiple_filters_any_match(self) -> None:
        text = RandomStringGenerator.builder().within_range("a", "d").filtered_by(_only_a, _only_b).get().generate(2000)
        assert set(text) == {"a", "b"}

    def test_builtin_predicates(self) -> None:
        assert letters(ord("é")) and not letters(ord("1"))
        assert digits(ord("٣")) and not digits(ord("x"))
        assert arabic_numerals(ord("7")) and not arabic_numerals(ord("٣"))
        assert ascii_lowercase_letters(ord("q")) and not ascii_lowercase_letters(ord("Q"))
        assert ascii_uppercase_letters(ord("Q")) and not ascii_uppercase_letters(ord("q"))
        assert ascii_letters(ord("q")) and ascii_letters(ord("Q")) and not ascii_letters(ord("é"))
        assert ascii_alpha_numerals(ord("5")) and not ascii_alpha_numerals(ord("_"))

    def test_predicate_lookup_table(self) -> None:
        assert BUILTIN_PREDICATES["ascii_letters"] is ascii_letters
        assert len(BUILTIN_PREDICATES) == 7

    def test_alpha_numeric_token(self) -> None:
        generator = RandomStringGenerator.builder().within_range("0", "z").filtered_by(ascii_alpha_numerals).build()
        text = generator.generate(100)
        assert text.isalnum() and text.isascii()


class TestCodePointSafety:
    """Unassigned, private-use and surrogate code points never appear."""

    def test_full_range_skips_reserved_categories(self) -> None:
        text = RandomStringGenerator.builder().build().generate(2000)
        assert len(text) == 2000
        for char in text:
            assert unicodedata.category(char) not in {"Cn", "Co", "Cs"}

    def test_private_use_range_yields_nothing_private(self) -> None:
        generator = RandomStringGenerator.builder().within_range(0xE000, 0xFFFF).build()
        for char in generator.generate(500):
            assert unicodedata.category(char) != "Co"


class TestRandomSource:
    """A custom random source drives every choice."""

    def test_constant_source_with_range(self) -> None:
        generator = RandomStringGenerator.builder().within_range("a", "z").using_random(lambda n: 0).build()
        assert generator.generate(10) == "a" * 10

    def test_constant_source_with_selection(self) -> None:
        generator = RandomStringGenerator.builder().select_from("xyz").using_random(lambda n: n - 1).build()
        assert generator.generate(4) == "zzzz"

    def test_none_restores_default(self) -> None:
        generator = RandomStringGenerator.builder().using_random(lambda n: 0).using_random(None).within_range("a", "b").build()
        assert set(generator.generate(200)) == {"a", "b"}

    def test_generator_is_reusable(self) -> None:
        generator = RandomStringGenerator.builder().select_from("q").build()
        assert generator.generate(3) == generator.generate(3) == "qqq"
