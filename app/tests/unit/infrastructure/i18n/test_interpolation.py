"""Tests for simple_i18n.infrastructure.i18n.interpolation module."""

import pytest

from simple_i18n.infrastructure.i18n.interpolation import (
    apply_replacements,
    find_placeholders,
    substitute_placeholders,
)

pytestmark = pytest.mark.unit


class TestApplyReplacements:
    def test_single_replacement(self):
        assert apply_replacements("Hi, {{name}}!", {"name": "Mickey"}) == "Hi, Mickey!"

    def test_whitespace_tolerated(self):
        assert apply_replacements("Hi, {{  name }}!", {"name": "Mickey"}) == "Hi, Mickey!"

    def test_every_occurrence_replaced(self):
        assert apply_replacements("{{x}}-{{ x }}", {"x": "1"}) == "1-1"

    def test_unmatched_names_ignored(self):
        assert apply_replacements("Hi!", {"name": "Mickey"}) == "Hi!"

    def test_placeholders_without_value_left(self):
        text = "{{name}} and {{spouse}}"
        assert apply_replacements(text, {"name": "Mickey"}) == "Mickey and {{spouse}}"

    def test_values_are_literal(self):
        assert apply_replacements("{{path}}", {"path": r"C:\new\1"}) == r"C:\new\1"

    def test_names_are_not_patterns(self):
        assert apply_replacements("{{a.b}} {{axb}}", {"a.b": "dot"}) == "dot {{axb}}"

    def test_no_replacements(self):
        assert apply_replacements("{{name}}", None) == "{{name}}"


class TestFindPlaceholders:
    def test_distinct_tokens_in_order(self):
        assert find_placeholders("{{b}} {{ a.c }} {{b}}") == ["b", "a.c"]

    def test_non_word_tokens_ignored(self):
        assert find_placeholders("{{ not-a-key }}") == []


class TestSubstitutePlaceholders:
    def test_lookup_results_substituted(self):
        values = {"first": "Mickey", "last": "Mouse"}
        result = substitute_placeholders("{{first}} {{ last }}", values.get)
        assert result == "Mickey Mouse"

    def test_missing_lookups_left_untouched(self):
        result = substitute_placeholders("{{known}} {{unknown}}", {"known": "k"}.get)
        assert result == "k {{unknown}}"

    def test_each_token_looked_up_once(self):
        calls = []

        def lookup(token):
            calls.append(token)
            return "v"

        assert substitute_placeholders("{{a}}{{a}}{{ a }}", lookup) == "vvv"
        assert calls == ["a"]

    def test_substituted_text_not_rescanned(self):
        result = substitute_placeholders("{{a}}", {"a": "{{b}}", "b": "B"}.get)
        assert result == "{{b}}"
