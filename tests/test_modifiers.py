# SPDX-License-Identifier: MIT
"""Unit tests for modifier chains."""

from versionkit import (
    Modifier,
    compare_modifiers,
    increment_modifier,
    modifiers_to_string,
    parse_modifiers,
)
from versionkit.modifiers import modifier_key


class TestParseModifiers:
    """Tests for parse_modifiers function."""

    def test_empty(self):
        """Test that missing or empty text yields no modifiers."""
        assert parse_modifiers(None) == ()
        assert parse_modifiers("") == ()

    def test_bare_number(self):
        """Test parsing a single numeric segment."""
        assert parse_modifiers("1") == (Modifier(None, 1, 1),)

    def test_identifier_only(self):
        """Test that an identifier without a counter has value and width 0."""
        assert parse_modifiers("alpha") == (Modifier("alpha", 0, 0),)

    def test_identifier_with_counter(self):
        """Test parsing an identifier followed by a counter."""
        assert parse_modifiers("alpha.1") == (Modifier("alpha", 1, 1),)

    def test_counter_width(self):
        """Test that the written digit count is kept."""
        assert parse_modifiers("alpha.001") == (Modifier("alpha", 1, 3),)
        assert parse_modifiers("alpha.101") == (Modifier("alpha", 101, 3),)

    def test_consecutive_identifiers(self):
        """Test that an identifier closes the previous open identifier."""
        assert parse_modifiers("alpha.beta.2") == (
            Modifier("alpha", 0, 0),
            Modifier("beta", 2, 1),
        )

    def test_bare_numbers(self):
        """Test parsing a chain of bare numbers."""
        assert parse_modifiers("1.2.3") == (
            Modifier(None, 1, 1),
            Modifier(None, 2, 1),
            Modifier(None, 3, 1),
        )

    def test_number_after_closed_pair(self):
        """Test that a number after a complete pair is bare."""
        assert parse_modifiers("rc.1.2") == (Modifier("rc", 1, 1), Modifier(None, 2, 1))

    def test_alphanumeric_identifier(self):
        """Test that mixed segments are identifiers."""
        assert parse_modifiers("alpha1") == (Modifier("alpha1", 0, 0),)


class TestIncrementModifier:
    """Tests for increment_modifier function."""

    def test_append_to_empty(self):
        """Test that a missing identifier is appended with counter 1."""
        assert increment_modifier((), "alpha") == (Modifier("alpha", 1, 1),)

    def test_increment_existing(self):
        """Test incrementing an existing identifier."""
        assert increment_modifier((Modifier("alpha", 1, 1),), "alpha") == (Modifier("alpha", 2, 1),)

    def test_append_different_identifier(self):
        """Test that other identifiers are kept in place."""
        assert increment_modifier((Modifier("alpha", 1, 1),), "beta") == (
            Modifier("alpha", 1, 1),
            Modifier("beta", 1, 1),
        )

    def test_width_follows_new_value(self):
        """Test that the width is recomputed from the new counter."""
        assert increment_modifier((Modifier("build", 9, 1),), "build") == (Modifier("build", 10, 2),)
        assert increment_modifier((Modifier("build", 1, 3),), "build") == (Modifier("build", 2, 1),)

    def test_identifier_without_counter(self):
        """Test that an identifier without counter is incremented to 1."""
        assert increment_modifier((Modifier("alpha", 0, 0),), "alpha") == (Modifier("alpha", 1, 1),)

    def test_first_match_only(self):
        """Test that only the first matching identifier is incremented."""
        chain = (Modifier("rc", 1, 1), Modifier("rc", 5, 1))
        assert increment_modifier(chain, "rc") == (Modifier("rc", 2, 1), Modifier("rc", 5, 1))

    def test_input_not_modified(self):
        """Test that the input list is left untouched."""
        chain = [Modifier("rc", 1, 1)]
        increment_modifier(chain, "rc")
        assert chain == [Modifier("rc", 1, 1)]


class TestCompareModifiers:
    """Tests for compare_modifiers function."""

    def test_equal(self):
        """Test that identical chains are equal."""
        assert compare_modifiers(parse_modifiers("rc.1"), parse_modifiers("rc.1")) == 0
        assert compare_modifiers((), ()) == 0

    def test_empty_is_greater(self):
        """Test that no modifiers outrank any modifiers."""
        assert compare_modifiers((), parse_modifiers("rc.1")) == 1
        assert compare_modifiers(parse_modifiers("rc.1"), ()) == -1

    def test_shorter_is_greater(self):
        """Test that a shorter chain outranks a longer one."""
        assert compare_modifiers(parse_modifiers("rc"), parse_modifiers("alpha.beta")) == 1

    def test_identifier_order(self):
        """Test ordinal identifier comparison."""
        assert compare_modifiers(parse_modifiers("alpha"), parse_modifiers("beta")) == -1
        assert compare_modifiers(parse_modifiers("zeta.1"), parse_modifiers("rc.2")) == 1

    def test_counter_order(self):
        """Test numeric counter comparison."""
        assert compare_modifiers(parse_modifiers("alpha.1"), parse_modifiers("alpha.2")) == -1
        assert compare_modifiers(parse_modifiers("build.200"), parse_modifiers("build.199")) == 1

    def test_bare_numbers_before_identifiers(self):
        """Test that bare numbers sort before named modifiers."""
        assert compare_modifiers(parse_modifiers("1"), parse_modifiers("alpha")) == -1


class TestModifierKey:
    """Tests for modifier_key function."""

    def test_sorting_matches_compare(self):
        """Test that sorting by key agrees with compare_modifiers."""
        chains = [
            parse_modifiers(text)
            for text in ["", "rc.1", "alpha", "alpha.beta", "alpha.2", "alpha.1", "1"]
        ]
        ordered = sorted(chains, key=modifier_key)
        for lower, higher in zip(ordered, ordered[1:]):
            assert compare_modifiers(lower, higher) <= 0
        assert ordered[-1] == ()


class TestModifiersToString:
    """Tests for modifiers_to_string function."""

    def test_empty(self):
        """Test that an empty chain renders as empty string."""
        assert modifiers_to_string(()) == ""

    def test_single(self):
        """Test rendering a single modifier."""
        assert modifiers_to_string((Modifier("alpha", 1, 1),)) == "-alpha.1"

    def test_multiple(self):
        """Test rendering several modifiers."""
        chain = (Modifier("alpha", 1, 1), Modifier("beta", 1, 1))
        assert modifiers_to_string(chain) == "-alpha.1.beta.1"

    def test_identifier_only(self):
        """Test that width 0 renders the identifier alone."""
        assert modifiers_to_string((Modifier("alpha", 0, 0),)) == "-alpha"

    def test_bare_number(self):
        """Test that bare numbers render their value."""
        assert modifiers_to_string(parse_modifiers("0.3.7")) == "-0.3.7"

    def test_no_zero_padding(self):
        """Test that counters render as plain integers."""
        assert modifiers_to_string(parse_modifiers("build.007")) == "-build.7"
