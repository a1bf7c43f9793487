"""Factory functions for creating i18n components.

Builds contexts and services from I18nSettings (environment driven),
with keyword overrides taking precedence.
"""

from pathlib import Path
from typing import Any, Optional

from simple_i18n.infrastructure.configuration import I18nSettings, settings
from simple_i18n.infrastructure.i18n.context import I18nContext
from simple_i18n.infrastructure.i18n.loader import DocumentLoader
from simple_i18n.infrastructure.i18n.messages import ErrorMessages
from simple_i18n.infrastructure.i18n.models import ComplexFormTags
from simple_i18n.infrastructure.i18n.service import TranslationService
from simple_i18n.infrastructure.i18n.translator import Translator
from simple_i18n.infrastructure.logging import get_module_logger

logger = get_module_logger()

_TAG_SETTINGS = {
    "default": "default_tag",
    "plural": "plural_tag",
    "plural_one": "plural_one_tag",
    "plural_other": "plural_other_tag",
    "gender": "gender_tag",
    "gender_female": "gender_female_tag",
    "gender_male": "gender_male_tag",
    "gender_neutral": "gender_neutral_tag",
}


def create_context(
    config: Optional[I18nSettings] = None,
    name: str = "default",
    loader: Optional[DocumentLoader] = None,
    messages: Optional[ErrorMessages] = None,
    **overrides: Any,
) -> I18nContext:
    """Create and configure an I18nContext.

    Args:
        config: Settings to start from (default: the environment settings).
        name: Context name used in logs and error events.
        loader: Optional DocumentLoader (default: chosen from the extension).
        messages: Optional ErrorMessages (default: the packaged messages).
        **overrides: Any I18nSettings field, e.g. ``directory="locales"``,
            ``plural_tag="p"`` or ``default_locale="es"``.

    Returns:
        I18nContext: Configured context with its locales discovered.

    Raises:
        ValueError: If an override is not an I18nSettings field.
        InvalidDirectoryError, UnknownLocaleError: From context creation.

    Usage:
        # Environment defaults (I18N_DIRECTORY, I18N_DEFAULT_LOCALE, ...)
        context = create_context()

        # Custom directory and plural vocabulary
        context = create_context(directory=Path("/app/lang"), plural_tag="p")
    """
    config = config or settings.i18n
    unknown = set(overrides) - set(I18nSettings.model_fields)
    if unknown:
        raise ValueError(f"Unknown i18n settings: {', '.join(sorted(unknown))}")
    if overrides:
        # rebuilt by alias so overrides are validated and win over the environment
        fields = I18nSettings.model_fields
        values = config.model_dump(by_alias=True)
        for field_name, value in overrides.items():
            values[fields[field_name].alias or field_name] = (
                str(value) if isinstance(value, Path) else value
            )
        config = I18nSettings(**values)

    tags = ComplexFormTags(
        **{field: getattr(config, setting) for field, setting in _TAG_SETTINGS.items()}
    )
    context = I18nContext(
        directory=config.directory,
        file_extension=config.file_extension,
        default_locale=config.default_locale,
        current_locale=config.current_locale,
        tags=tags,
        max_substitution_depth=config.max_substitution_depth,
        name=name,
        loader=loader,
        messages=messages,
    )
    logger.info("context_created", context=name, locale_count=len(context.locales))
    return context


def create_translation_service(
    config: Optional[I18nSettings] = None,
    name: str = "default",
    **kwargs: Any,
) -> TranslationService:
    """Create a TranslationService over a new context.

    Accepts the same arguments as create_context.
    """
    context = create_context(config, name=name, **kwargs)
    return TranslationService(translator=Translator(context))
