"""Tests for simple_i18n.infrastructure.i18n.models module."""

from enum import Enum

import pytest

from simple_i18n.infrastructure.i18n import (
    ComplexFormTags,
    InvalidGenderError,
    InvalidPluralError,
    InvalidReplacementsError,
    MissingKeyError,
)
from simple_i18n.infrastructure.i18n.models import (
    normalize_gender,
    normalize_key,
    normalize_plural,
    normalize_replacements,
)
from tests.factories.i18n import make_complex_form_tags, make_translation_request

pytestmark = pytest.mark.unit


class Gender(Enum):
    FEMALE = "female"
    MALE = "male"


class StringObject:
    """Object whose text form is a gender value."""

    def __init__(self, value):
        self._value = value

    def __str__(self):
        return self._value


class TestComplexFormTags:
    """Tests for ComplexFormTags dataclass."""

    def test_defaults(self):
        tags = ComplexFormTags()
        assert tags.default == "default"
        assert tags.plural == "plural"
        assert tags.plural_one == "one"
        assert tags.plural_other == "other"
        assert tags.gender == "gender"
        assert tags.gender_values == ("female", "male", "neutral")

    def test_custom_gender_values(self):
        tags = make_complex_form_tags(gender_female="f", gender_male="m", gender_neutral="n")
        assert tags.gender_values == ("f", "m", "n")

    def test_plural_form(self):
        tags = ComplexFormTags()
        assert tags.plural_form(True) == "other"
        assert tags.plural_form(False) == "one"

    def test_names_lists_every_tag(self):
        assert len(ComplexFormTags.names()) == 8
        assert "gender_neutral" in ComplexFormTags.names()

    def test_tags_are_immutable(self):
        tags = ComplexFormTags()
        with pytest.raises(AttributeError):
            tags.plural = "p"


class TestTranslationRequest:
    def test_defaults(self):
        request = make_translation_request()
        assert request.key == "Hello"
        assert request.plural is None
        assert request.gender is None
        assert request.replacements == {}


class TestNormalizeKey:
    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_key(self, key):
        with pytest.raises(MissingKeyError):
            normalize_key(key)

    def test_key_kept(self):
        assert normalize_key("Hi.withName") == "Hi.withName"


class TestNormalizePlural:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, None),
            (True, True),
            (False, False),
            (1, False),
            (2, True),
            (0, True),
            (1.0, False),
            (2.5, True),
        ],
    )
    def test_normalization(self, value, expected):
        assert normalize_plural(value) is expected

    @pytest.mark.parametrize("value", ["yes", [1], {"n": 1}])
    def test_invalid_plural(self, value):
        with pytest.raises(InvalidPluralError):
            normalize_plural(value)


class TestNormalizeGender:
    def test_none(self):
        assert normalize_gender(None, ComplexFormTags()) is None

    @pytest.mark.parametrize("value", ["female", "male", "neutral"])
    def test_string_values(self, value):
        assert normalize_gender(value, ComplexFormTags()) == value

    def test_object_with_text_form(self):
        assert normalize_gender(StringObject("male"), ComplexFormTags()) == "male"

    def test_enum_member_uses_value(self):
        assert normalize_gender(Gender.FEMALE, ComplexFormTags()) == "female"

    def test_unknown_gender(self):
        with pytest.raises(InvalidGenderError) as exc_info:
            normalize_gender("dog", ComplexFormTags())
        assert exc_info.value.details["female"] == "female"
        assert exc_info.value.details["value"] == "dog"

    def test_custom_tags(self):
        tags = make_complex_form_tags(gender_female="f")
        assert normalize_gender("f", tags) == "f"
        with pytest.raises(InvalidGenderError):
            normalize_gender("female", tags)


class TestNormalizeReplacements:
    def test_none(self):
        assert normalize_replacements(None) == {}

    def test_values_stringified(self):
        result = normalize_replacements({"name": "Mickey", "count": 3})
        assert result == {"name": "Mickey", "count": "3"}

    @pytest.mark.parametrize(
        "value",
        ["dog", ["name"], {"name": {"first": "Mickey"}}, {1: "one"}, {"items": [1, 2]}],
    )
    def test_invalid_replacements(self, value):
        with pytest.raises(InvalidReplacementsError):
            normalize_replacements(value)
