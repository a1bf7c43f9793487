"""Translation engine.

Resolves a key against a context's locale documents, selects the right
branch of complex (plural/gender) entries, falls back to the default
locale, and substitutes placeholders.
"""

from collections.abc import Mapping
from typing import Any, Optional

from simple_i18n.infrastructure.i18n.context import I18nContext
from simple_i18n.infrastructure.i18n.errors import (
    I18nError,
    KeyNotFoundError,
    UnknownLocaleError,
)
from simple_i18n.infrastructure.i18n.interpolation import (
    apply_replacements,
    substitute_placeholders,
)
from simple_i18n.infrastructure.i18n.models import (
    LocaleDocument,
    TranslationRequest,
    normalize_gender,
    normalize_key,
    normalize_plural,
    normalize_replacements,
)
from simple_i18n.infrastructure.i18n.resolvers import ComplexFormSelector, KeyResolver
from simple_i18n.infrastructure.logging import get_module_logger
from simple_i18n.infrastructure.operations import OperationResult

logger = get_module_logger()


class Translator:
    """Service for translating keys within one I18nContext.

    Attributes:
        context: The translation namespace (configuration and documents).
    """

    def __init__(self, context: I18nContext):
        self.context = context
        logger.info("initialized_translator", context=context.name)

    def translate(
        self,
        key: Optional[str],
        plural: Any = None,
        gender: Any = None,
        replacements: Any = None,
        locale: Optional[str] = None,
    ) -> str:
        """Retrieve a translated and interpolated message.

        Args:
            key: Dot separated key, e.g. "Hi.withName".
            plural: None, a bool, or a number (1 selects the "one" form).
            gender: None, or a value whose text is one of the gender tags.
            replacements: Mapping of placeholder names to values.
            locale: Locale override; defaults to the context's current locale.

        Returns:
            The translated text. When an error handler is attached to the
            context and an error occurs, the key as given ("" if none).

        Raises:
            I18nError: If resolution fails and no error handler is attached.
        """
        try:
            return self._translate(key, plural, gender, replacements, locale)
        except I18nError as error:
            self.context.report(error)
            return "" if key is None else str(key)

    def try_translate(
        self,
        key: Optional[str],
        plural: Any = None,
        gender: Any = None,
        replacements: Any = None,
        locale: Optional[str] = None,
    ) -> OperationResult:
        """Translate without raising.

        Attached error handlers are still notified of failures.

        Returns:
            OperationResult whose ``data`` is the text on success, or the
            error details on failure (``error_code`` is the error class name).
        """
        try:
            text = self._translate(key, plural, gender, replacements, locale)
        except I18nError as error:
            self.context.notify(error)
            return OperationResult.error(
                error.status,
                error.message,
                error_code=error.code,
                data=dict(error.details),
            )
        return OperationResult.success(data=text, message="translated")

    def has_message(
        self,
        key: str,
        locale: Optional[str] = None,
        plural: Any = None,
        gender: Any = None,
    ) -> bool:
        """Check if ``key`` resolves in ``locale`` itself, without fallback.

        Raises:
            I18nError: For invalid options, or an unreadable locale document.
        """
        request = self.build_request(key, plural, gender, None, locale)
        document = self.context.get_document(request.locale)
        return self.resolve(document, request.key, request.plural, request.gender) is not None

    def build_request(
        self,
        key: Any,
        plural: Any = None,
        gender: Any = None,
        replacements: Any = None,
        locale: Optional[str] = None,
    ) -> TranslationRequest:
        """Validate and normalize raw translate options.

        Raises:
            MissingKeyError, InvalidPluralError, InvalidGenderError,
            InvalidReplacementsError, UnknownLocaleError
        """
        key = normalize_key(key)
        normalized_plural = normalize_plural(plural)
        normalized_gender = normalize_gender(gender, self.context.tags)
        normalized_replacements = normalize_replacements(replacements)

        if locale is not None:
            if not self.context.has_locale(locale):
                raise UnknownLocaleError(locale=locale)
        else:
            locale = self.context.current_locale
            if locale is None:
                raise UnknownLocaleError(
                    "errors.noLocales",
                    dir=str(self.context.directory),
                    extension=self.context.file_extension,
                )

        return TranslationRequest(
            key=key,
            locale=locale,
            plural=normalized_plural,
            gender=normalized_gender,
            replacements=normalized_replacements,
        )

    def lookup(
        self,
        key: str,
        locale: str,
        plural: Optional[bool] = None,
        gender: Optional[str] = None,
    ) -> Optional[str]:
        """Resolve ``key`` in ``locale``, then once more in the default locale.

        Returns:
            The raw (not interpolated) text, or None if neither locale has it.

        Raises:
            LocaleFileMissingError, DocumentParseError: When a needed
                document cannot be loaded.
        """
        text = self.resolve(self.context.get_document(locale), key, plural, gender)

        default_locale = self.context.default_locale
        if text is None and default_locale is not None and locale != default_locale:
            text = self.resolve(self.context.get_document(default_locale), key, plural, gender)
            if text is not None:
                logger.info(
                    "used_fallback_translation",
                    key=key,
                    requested_locale=locale,
                    fallback_locale=default_locale,
                )

        return text

    def resolve(
        self,
        document: LocaleDocument,
        key: str,
        plural: Optional[bool] = None,
        gender: Optional[str] = None,
    ) -> Optional[str]:
        """Resolve ``key`` in one document, descending through complex entries.

        Each time the key lands on a sub-document the selector appends the
        branch for the plural/gender hints and the extended key is resolved
        again from the document root. A sub-document reached twice resolves
        to None.
        """
        selector = ComplexFormSelector(self.context.tags)
        value = KeyResolver.resolve(document, key)
        visited = set()
        while isinstance(value, Mapping):
            # YAML anchors can make a sub-document contain itself
            if id(value) in visited:
                logger.warning("complex_entry_cycle", key=key)
                return None
            visited.add(id(value))
            key = f"{key}.{selector.select(value, plural, gender)}"
            value = KeyResolver.resolve(document, key)
        return value

    def render(self, text: str, request: TranslationRequest) -> str:
        """Substitute placeholders in resolved text.

        Explicit replacements are applied first. Remaining ``{{key}}``
        placeholders are then looked up as keys with the request's
        locale, plural and gender, for up to ``max_substitution_depth``
        rounds. Placeholders that resolve to nothing are left in place.
        """
        text = apply_replacements(text, request.replacements)

        def lookup(token: str) -> Optional[str]:
            found = self.lookup(token, request.locale, request.plural, request.gender)
            if found is None:
                logger.debug("unresolved_placeholder", token=token, locale=request.locale)
            return found

        for _ in range(self.context.max_substitution_depth):
            expanded = substitute_placeholders(text, lookup)
            if expanded == text:
                break
            text = expanded
        return text

    def _translate(
        self,
        key: Any,
        plural: Any,
        gender: Any,
        replacements: Any,
        locale: Optional[str],
    ) -> str:
        request = self.build_request(key, plural, gender, replacements, locale)
        text = self.lookup(request.key, request.locale, request.plural, request.gender)
        if text is None:
            raise KeyNotFoundError(
                key=request.key,
                locale=request.locale,
                default=self.context.default_locale,
            )
        return self.render(text, request)
