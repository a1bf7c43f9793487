"""Translation context: configuration, locale documents and error reporting.

A context is one translation namespace. It owns a locale directory, the
locale set discovered in it, the default and current locales, the
structural tag names for complex entries and a cache of loaded documents.
Independent contexts share no mutable state.
"""

from dataclasses import replace
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional, Union

from simple_i18n.infrastructure.events import Event, EventDispatcher
from simple_i18n.infrastructure.i18n.errors import (
    I18nError,
    InvalidDirectoryError,
    InvalidTagError,
    UnknownLocaleError,
)
from simple_i18n.infrastructure.i18n.loader import DocumentLoader, loader_for_extension
from simple_i18n.infrastructure.i18n.messages import ErrorMessages, default_error_messages
from simple_i18n.infrastructure.i18n.models import ComplexFormTags, LocaleDocument
from simple_i18n.infrastructure.logging import get_module_logger

logger = get_module_logger()

ERROR_EVENT = "i18n.error"
PREFERRED_DEFAULT_LOCALE = "en"


def _tag_property(name: str) -> property:
    """Context attribute reading and validating one ComplexFormTags field."""

    def getter(self: "I18nContext") -> str:
        return getattr(self._tags, name)

    def setter(self: "I18nContext", value: str) -> None:
        self.set_tag(name, value)

    return property(getter, setter, doc=f"The {name.replace('_', ' ')} tag.")


class I18nContext:
    """Configuration and document store for one translation namespace.

    Attributes:
        name: Label used in logs and error events.
        loader: DocumentLoader used for discovery and parsing.
        messages: ErrorMessages used to localize reported errors.
        events: EventDispatcher carrying ``ERROR_EVENT`` to host handlers.
        max_substitution_depth: Rounds of ``{{key}}`` self-reference expansion.
    """

    def __init__(
        self,
        directory: Union[str, Path] = "./locales",
        file_extension: str = ".json",
        default_locale: Optional[str] = None,
        current_locale: Optional[str] = None,
        tags: Optional[ComplexFormTags] = None,
        max_substitution_depth: int = 1,
        name: str = "default",
        loader: Optional[DocumentLoader] = None,
        messages: Optional[ErrorMessages] = None,
    ):
        """Initialize the context and discover its locales.

        Construction errors are always raised, since no handler can be
        attached yet.

        Raises:
            InvalidDirectoryError: If ``directory`` does not exist.
            UnknownLocaleError: If a given default/current locale is not
                among the discovered locales.
        """
        self.name = name
        self.messages = messages or default_error_messages()
        self.events = EventDispatcher(name=name)
        self.max_substitution_depth = max_substitution_depth
        self._custom_loader = loader
        self._tags = tags or ComplexFormTags()
        self._documents: Dict[str, LocaleDocument] = {}
        self._lock = RLock()
        self._locales: List[str] = []
        self._default_locale: Optional[str] = None
        self._current_locale: Optional[str] = None

        self._file_extension = self._normalize_extension(file_extension)
        self.loader = loader or loader_for_extension(self._file_extension)

        try:
            self._directory = self._checked_directory(directory)
            self._discover()
            if default_locale is not None:
                self._set_default_locale(default_locale)
            if current_locale is not None:
                self._set_current_locale(current_locale)
        except I18nError as error:
            raise self._localize(error)

        logger.info(
            "initialized_context",
            context=name,
            directory=str(self._directory),
            file_extension=self._file_extension,
            locales=self._locales,
            default_locale=self._default_locale,
            current_locale=self._current_locale,
        )

    # Directory and locale set

    @property
    def directory(self) -> Path:
        return self._directory

    @directory.setter
    def directory(self, value: Union[str, Path]) -> None:
        try:
            directory = self._checked_directory(value)
        except I18nError as error:
            self.report(error)
            return
        with self._lock:
            self._directory = directory
            self._rediscover()

    @property
    def file_extension(self) -> str:
        return self._file_extension

    @file_extension.setter
    def file_extension(self, value: str) -> None:
        if not isinstance(value, str) or not value.strip():
            self.report(InvalidTagError())
            return
        with self._lock:
            self._file_extension = self._normalize_extension(value)
            if self._custom_loader is None:
                self.loader = loader_for_extension(self._file_extension)
            self._rediscover()

    @property
    def locales(self) -> List[str]:
        """Locale identifiers discovered in the directory (read-only)."""
        return list(self._locales)

    @property
    def default_locale(self) -> Optional[str]:
        return self._default_locale

    @default_locale.setter
    def default_locale(self, value: str) -> None:
        try:
            self._set_default_locale(value)
        except I18nError as error:
            self.report(error)

    @property
    def current_locale(self) -> Optional[str]:
        return self._current_locale

    @current_locale.setter
    def current_locale(self, value: str) -> None:
        try:
            self._set_current_locale(value)
        except I18nError as error:
            self.report(error)

    def has_locale(self, locale: Optional[str]) -> bool:
        return locale in self._locales

    # Complex entry tags

    @property
    def tags(self) -> ComplexFormTags:
        return self._tags

    @tags.setter
    def tags(self, value: ComplexFormTags) -> None:
        self._tags = value

    def set_tag(self, name: str, value: str) -> None:
        """Change one structural tag name, e.g. ``set_tag("plural", "p")``.

        Args:
            name: ComplexFormTags field name.
            value: New tag; must be a non-empty string.
        """
        if name not in ComplexFormTags.names():
            raise AttributeError(f"Unknown complex form tag: {name}")
        if not isinstance(value, str) or not value:
            self.report(InvalidTagError(tag=name))
            return
        self._tags = replace(self._tags, **{name: value})

    default_tag = _tag_property("default")
    plural_tag = _tag_property("plural")
    plural_one_tag = _tag_property("plural_one")
    plural_other_tag = _tag_property("plural_other")
    gender_tag = _tag_property("gender")
    gender_female_tag = _tag_property("gender_female")
    gender_male_tag = _tag_property("gender_male")
    gender_neutral_tag = _tag_property("gender_neutral")

    # Documents

    def document_path(self, locale: str) -> Path:
        return self._directory / f"{locale}{self._file_extension}"

    def get_document(self, locale: str) -> LocaleDocument:
        """Return the document for ``locale``, loading it on first access.

        Raises:
            LocaleFileMissingError: If the backing file does not exist.
            DocumentParseError: If the file does not parse into a mapping.
        """
        with self._lock:
            document = self._documents.get(locale)
            if document is None:
                document = self.loader.load(self.document_path(locale))
                self._documents[locale] = document
            return document

    def reload(self) -> None:
        """Drop cached documents and discover the locale set again."""
        with self._lock:
            self._rediscover()

    # Error boundary

    def notify(self, error: I18nError) -> bool:
        """Localize ``error``, log it and hand it to the attached handlers.

        Returns:
            True if at least one error handler received the error.
        """
        self._localize(error)
        logger.warning(
            "i18n_error",
            context=self.name,
            code=error.code,
            error=error.message,
            **{f"detail_{k}": v for k, v in error.details.items()},
        )
        if not self.events.has_handlers(ERROR_EVENT):
            return False

        self.events.dispatch_event(
            Event(
                event_type=ERROR_EVENT,
                payload=error,
                metadata={"code": error.code, "context": self.name, **error.details},
            )
        )
        return True

    def report(self, error: I18nError) -> None:
        """Report ``error`` to the handlers, or raise it when there are none.

        Raises:
            I18nError: The localized error, if no error handler is attached.
        """
        if not self.notify(error):
            raise error

    # Internals

    def _localize(self, error: I18nError) -> I18nError:
        return error.localize(
            self.messages.render(error.message_key, error.details, self._default_locale)
        )

    @staticmethod
    def _normalize_extension(value: str) -> str:
        value = value.strip()
        if not value.startswith("."):
            value = "." + value
        return value

    def _checked_directory(self, value: Union[str, Path]) -> Path:
        directory = Path(value).resolve()
        if not directory.is_dir():
            raise InvalidDirectoryError(dir=str(directory))
        return directory

    def _discover(self) -> None:
        self._locales = self.loader.discover(self._directory, self._file_extension)
        if self._default_locale not in self._locales:
            self._default_locale = self._pick_default_locale()
        if self._current_locale not in self._locales:
            self._current_locale = self._default_locale

    def _rediscover(self) -> None:
        self._documents.clear()
        self._discover()
        logger.info(
            "rediscovered_locales",
            context=self.name,
            directory=str(self._directory),
            locales=self._locales,
        )

    def _pick_default_locale(self) -> Optional[str]:
        if PREFERRED_DEFAULT_LOCALE in self._locales:
            return PREFERRED_DEFAULT_LOCALE
        return self._locales[0] if self._locales else None

    def _set_default_locale(self, value: Any) -> None:
        if value not in self._locales:
            raise UnknownLocaleError("errors.badDefaultLocale", locale=value)
        self._default_locale = value

    def _set_current_locale(self, value: Any) -> None:
        if value not in self._locales:
            raise UnknownLocaleError("errors.badCurrentLocale", locale=value)
        self._current_locale = value

    def __repr__(self) -> str:
        return (
            f"I18nContext(name={self.name!r}, directory={str(self._directory)!r}, "
            f"locales={self._locales!r}, default_locale={self._default_locale!r}, "
            f"current_locale={self._current_locale!r})"
        )
