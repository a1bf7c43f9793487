"""Translation context settings."""

from typing import Optional

from pydantic import Field, field_validator

from simple_i18n.infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Default configuration for translation contexts.

    Environment Variables:
        I18N_DIRECTORY: Directory holding one document per locale (default: ./locales)
        I18N_FILE_EXTENSION: Locale document extension (default: .json)
        I18N_DEFAULT_LOCALE: Fallback locale (default: "en" if present, else first found)
        I18N_CURRENT_LOCALE: Locale used when no override is given (default: default locale)
        I18N_DEFAULT_TAG: Complex entry default text tag (default: default)
        I18N_PLURAL_TAG: Complex entry plural tag (default: plural)
        I18N_PLURAL_ONE_TAG: Plural "one" tag (default: one)
        I18N_PLURAL_OTHER_TAG: Plural "other" tag (default: other)
        I18N_GENDER_TAG: Complex entry gender tag (default: gender)
        I18N_GENDER_FEMALE_TAG: Female gender value (default: female)
        I18N_GENDER_MALE_TAG: Male gender value (default: male)
        I18N_GENDER_NEUTRAL_TAG: Neutral gender value (default: neutral)
        I18N_MAX_SUBSTITUTION_DEPTH: Rounds of {{key}} self-reference expansion (default: 1)

    Example:
        ```python
        from simple_i18n.infrastructure.configuration import settings

        directory = settings.i18n.directory
        plural_tag = settings.i18n.plural_tag
        ```
    """

    directory: str = Field(default="./locales", alias="I18N_DIRECTORY")
    file_extension: str = Field(default=".json", alias="I18N_FILE_EXTENSION")
    default_locale: Optional[str] = Field(default=None, alias="I18N_DEFAULT_LOCALE")
    current_locale: Optional[str] = Field(default=None, alias="I18N_CURRENT_LOCALE")

    default_tag: str = Field(default="default", alias="I18N_DEFAULT_TAG")
    plural_tag: str = Field(default="plural", alias="I18N_PLURAL_TAG")
    plural_one_tag: str = Field(default="one", alias="I18N_PLURAL_ONE_TAG")
    plural_other_tag: str = Field(default="other", alias="I18N_PLURAL_OTHER_TAG")
    gender_tag: str = Field(default="gender", alias="I18N_GENDER_TAG")
    gender_female_tag: str = Field(default="female", alias="I18N_GENDER_FEMALE_TAG")
    gender_male_tag: str = Field(default="male", alias="I18N_GENDER_MALE_TAG")
    gender_neutral_tag: str = Field(default="neutral", alias="I18N_GENDER_NEUTRAL_TAG")

    max_substitution_depth: int = Field(
        default=1,
        ge=0,
        alias="I18N_MAX_SUBSTITUTION_DEPTH",
        description="Rounds of self-referential placeholder expansion",
    )

    @field_validator("file_extension")
    @classmethod
    def normalize_extension(cls, value: str) -> str:
        """Trim the extension and make sure it starts with a dot."""
        value = value.strip()
        if not value.startswith("."):
            value = "." + value
        return value

    @field_validator(
        "default_tag",
        "plural_tag",
        "plural_one_tag",
        "plural_other_tag",
        "gender_tag",
        "gender_female_tag",
        "gender_male_tag",
        "gender_neutral_tag",
    )
    @classmethod
    def require_tag(cls, value: str) -> str:
        if not value:
            raise ValueError("tag names must be non-empty strings")
        return value
