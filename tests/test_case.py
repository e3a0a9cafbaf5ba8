"""Tests for swap_case."""

import pytest

from textops import swap_case


class TestSwapCase:
    """Tests for swapping letter case."""

    @pytest.mark.parametrize("text, expected", [
        ("Hello World", "hELLO wORLD"),
        ("The Quick Brown FOX", "tHE qUICK bROWN fox"),
        ("HELLO world 123", "hello WORLD 123"),
        ("hello", "HELLO"),
        ("1abc", "1ABC"),
        (" -abc", " -ABC"),
    ])
    def test_swaps_letters(self, text, expected):
        assert swap_case(text) == expected

    def test_non_letters_pass_through(self):
        assert swap_case("12345") == "12345"
        assert swap_case("!? -") == "!? -"

    def test_none_and_empty_pass_through(self):
        assert swap_case(None) is None
        assert swap_case("") == ""

    def test_lowercase_after_whitespace_becomes_title_case(self):
        # U+01C6 lowercase dz: title-case at word start, uppercase inside
        assert swap_case("ǆǆ") == "ǅǄ"

    def test_title_case_becomes_lowercase(self):
        assert swap_case("ǅ") == "ǆ"

    def test_not_an_involution(self):
        assert swap_case(swap_case("Ǆ")) == "ǅ"

    def test_expanding_mappings_are_not_applied(self):
        assert swap_case("aß") == "Aß"

    def test_supplementary_plane_letters(self):
        assert swap_case("\U00010400\U00010428") == "\U00010428\U00010400"

    def test_output_length_matches_input(self):
        text = "Straße İstanbul ﬁne"
        assert len(swap_case(text)) == len(text)


class TestSwapCaseMappings:
    """Tests for single code point case mappings."""

    def test_dotted_capital_i_lowercases_to_plain_i(self):
        assert swap_case("\u0130") == "i"

    def test_other_uppercase_and_lowercase_symbols_swap(self):
        # Circled letters carry the Uppercase/Lowercase properties
        assert swap_case("\u24b6\u24d1") == "\u24d0\u24b7"

    def test_expanding_uppercase_falls_back_to_title_case(self):
        # U+1FB3 uppercases to two code points, title-cases to U+1FBC
        assert swap_case("a\u1fb3") == "A\u1fbc"

    def test_no_break_space_does_not_start_a_word(self):
        # U+01C6 title-cases to U+01C5 only at a word start
        assert swap_case("a \u01c6") == "A \u01c5"
        assert swap_case("a\u00a0\u01c6") == "A\u00a0\u01c4"
