"""Translation models for the i18n system.

Defines the structural tag names used by complex entries, the normalized
translation request, and the normalizers that turn raw caller options into
request fields.
"""

import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from simple_i18n.infrastructure.i18n.errors import (
    InvalidGenderError,
    InvalidPluralError,
    InvalidReplacementsError,
    MissingKeyError,
)

LocaleDocument = Dict[str, Any]


@dataclass(frozen=True)
class ComplexFormTags:
    """Names of the keys used inside complex (multi-form) entries.

    A complex entry looks like::

        {"default": "doggies", "plural": {"one": "dog", "other": "dogs"}}

    Every name is configurable so documents can use their own vocabulary.
    """

    default: str = "default"
    plural: str = "plural"
    plural_one: str = "one"
    plural_other: str = "other"
    gender: str = "gender"
    gender_female: str = "female"
    gender_male: str = "male"
    gender_neutral: str = "neutral"

    @property
    def gender_values(self) -> Tuple[str, str, str]:
        """The accepted gender values, in female/male/neutral order."""
        return (self.gender_female, self.gender_male, self.gender_neutral)

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def plural_form(self, plural: bool) -> str:
        return self.plural_other if plural else self.plural_one


@dataclass(frozen=True)
class TranslationRequest:
    """A validated, normalized translation call.

    Attributes:
        key: Dot separated lookup path (e.g., "Hi.withName").
        locale: Locale to resolve in before falling back to the default.
        plural: None when no plural hint was given, else the normalized flag.
        gender: None when no gender hint was given, else one of the gender tags.
        replacements: Explicit placeholder values, already stringified.
    """

    key: str
    locale: str
    plural: Optional[bool] = None
    gender: Optional[str] = None
    replacements: Dict[str, str] = field(default_factory=dict)


def normalize_key(key: Any) -> str:
    if key is None or key == "":
        raise MissingKeyError()
    return str(key)


def normalize_plural(plural: Any) -> Optional[bool]:
    """Normalize the plural option.

    Booleans are kept, numbers become ``value != 1``, None stays None.

    Raises:
        InvalidPluralError: For any other type.
    """
    if plural is None or isinstance(plural, bool):
        return plural
    if isinstance(plural, numbers.Real):
        return plural != 1
    raise InvalidPluralError(value=repr(plural))


def normalize_gender(gender: Any, tags: ComplexFormTags) -> Optional[str]:
    """Convert a gender hint to text and check it against the gender tags.

    Enum members contribute their value; any other object its ``str()``.

    Raises:
        InvalidGenderError: If the text is not one of the configured gender values.
    """
    if gender is None:
        return None
    if isinstance(gender, Enum):
        gender = gender.value
    gender = str(gender)
    if gender not in tags.gender_values:
        raise InvalidGenderError(
            female=tags.gender_female,
            male=tags.gender_male,
            neutral=tags.gender_neutral,
            value=gender,
        )
    return gender


def normalize_replacements(replacements: Any) -> Dict[str, str]:
    """Validate explicit replacements and stringify their values.

    Raises:
        InvalidReplacementsError: Unless given a mapping of string names to
            scalar (str, number or bool) values.
    """
    if replacements is None:
        return {}
    if not isinstance(replacements, Mapping):
        raise InvalidReplacementsError(value=repr(replacements))

    normalized = {}
    for name, value in replacements.items():
        if not isinstance(name, str) or not isinstance(value, (str, numbers.Number)):
            raise InvalidReplacementsError(value=repr(replacements))
        normalized[name] = str(value)
    return normalized
