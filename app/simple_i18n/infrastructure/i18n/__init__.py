"""i18n system - key based text localization.

Resolves dot separated keys against per-locale documents, with plural and
gender qualified entries, shortcut aliases, default locale fallback and
placeholder substitution.

Main components:
- models: ComplexFormTags, TranslationRequest
- loader: DocumentLoader, JSONDocumentLoader and YAMLDocumentLoader
- resolvers: KeyResolver and ComplexFormSelector
- context: I18nContext (configuration, documents, error boundary)
- translator: Translator engine
- service: TranslationService facade
"""

from simple_i18n.infrastructure.i18n.context import ERROR_EVENT, I18nContext
from simple_i18n.infrastructure.i18n.errors import (
    DocumentParseError,
    I18nError,
    InvalidDirectoryError,
    InvalidGenderError,
    InvalidPluralError,
    InvalidReplacementsError,
    InvalidTagError,
    KeyNotFoundError,
    LocaleFileMissingError,
    MissingKeyError,
    UnknownLocaleError,
)
from simple_i18n.infrastructure.i18n.factory import (
    create_context,
    create_translation_service,
)
from simple_i18n.infrastructure.i18n.loader import (
    DocumentLoader,
    JSONDocumentLoader,
    YAMLDocumentLoader,
)
from simple_i18n.infrastructure.i18n.messages import ErrorMessages
from simple_i18n.infrastructure.i18n.models import ComplexFormTags, TranslationRequest
from simple_i18n.infrastructure.i18n.resolvers import ComplexFormSelector, KeyResolver
from simple_i18n.infrastructure.i18n.service import TranslationService
from simple_i18n.infrastructure.i18n.translator import Translator

__all__ = [
    "ERROR_EVENT",
    "ComplexFormSelector",
    "ComplexFormTags",
    "DocumentLoader",
    "DocumentParseError",
    "ErrorMessages",
    "I18nContext",
    "I18nError",
    "InvalidDirectoryError",
    "InvalidGenderError",
    "InvalidPluralError",
    "InvalidReplacementsError",
    "InvalidTagError",
    "JSONDocumentLoader",
    "KeyNotFoundError",
    "KeyResolver",
    "LocaleFileMissingError",
    "MissingKeyError",
    "TranslationRequest",
    "TranslationService",
    "Translator",
    "UnknownLocaleError",
    "YAMLDocumentLoader",
    "create_context",
    "create_translation_service",
]
