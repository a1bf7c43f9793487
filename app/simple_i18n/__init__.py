"""simple-i18n: key based text localization with plural, gender and fallback support.

Usage:
    from simple_i18n import create_translation_service

    i18n = create_translation_service(directory="locales")
    i18n.t("Hi.withName", replacements={"name": "Mickey"})
"""

from simple_i18n.infrastructure.i18n import (
    ERROR_EVENT,
    ComplexFormTags,
    DocumentParseError,
    I18nContext,
    I18nError,
    InvalidDirectoryError,
    InvalidGenderError,
    InvalidPluralError,
    InvalidReplacementsError,
    InvalidTagError,
    KeyNotFoundError,
    LocaleFileMissingError,
    MissingKeyError,
    TranslationService,
    Translator,
    UnknownLocaleError,
    create_context,
    create_translation_service,
)
from simple_i18n.infrastructure.operations import OperationResult, OperationStatus

__version__ = "0.1.0"

__all__ = [
    "ERROR_EVENT",
    "ComplexFormTags",
    "DocumentParseError",
    "I18nContext",
    "I18nError",
    "InvalidDirectoryError",
    "InvalidGenderError",
    "InvalidPluralError",
    "InvalidReplacementsError",
    "InvalidTagError",
    "KeyNotFoundError",
    "LocaleFileMissingError",
    "MissingKeyError",
    "OperationResult",
    "OperationStatus",
    "TranslationService",
    "Translator",
    "UnknownLocaleError",
    "create_context",
    "create_translation_service",
]
