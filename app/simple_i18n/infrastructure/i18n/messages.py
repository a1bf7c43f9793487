"""Localized error messages.

The library translates its own error messages with the same resolution
rules it applies to application text. Message documents live in the
package's ``locales`` directory.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from simple_i18n.infrastructure.i18n.interpolation import apply_replacements
from simple_i18n.infrastructure.i18n.loader import DocumentLoader, JSONDocumentLoader
from simple_i18n.infrastructure.i18n.models import LocaleDocument
from simple_i18n.infrastructure.i18n.resolvers import KeyResolver
from simple_i18n.infrastructure.logging import get_module_logger

logger = get_module_logger()

MESSAGES_DIR = Path(__file__).resolve().parents[2] / "locales"


class ErrorMessages:
    """Renders error message keys into localized text.

    Attributes:
        directory: Directory holding one message document per locale.
        default_locale: Locale used when the requested one has no messages.
        locales: Locales with a message document.
    """

    def __init__(
        self,
        directory: Path = MESSAGES_DIR,
        default_locale: str = "en",
        loader: Optional[DocumentLoader] = None,
        extension: str = ".json",
    ):
        self.directory = Path(directory)
        self.default_locale = default_locale
        self.extension = extension
        self.loader = loader or JSONDocumentLoader()
        self.locales: List[str] = self.loader.discover(self.directory, extension)
        self._documents: Dict[str, LocaleDocument] = {}

    def render(
        self,
        message_key: str,
        details: Optional[Dict[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Render ``message_key`` in ``locale``, falling back to the default locale.

        Args:
            message_key: Dot separated key, e.g. "errors.badSuppliedLocale".
            details: Values substituted into the message placeholders.
            locale: Preferred locale for the message.

        Returns:
            The rendered message, or the key itself if no document has it.
        """
        replacements = {name: str(value) for name, value in (details or {}).items()}
        for candidate in (locale, self.default_locale):
            if candidate not in self.locales:
                continue
            text = KeyResolver.resolve(self._document(candidate), message_key)
            if isinstance(text, str):
                return apply_replacements(text, replacements)

        logger.warning("error_message_not_found", message_key=message_key, locale=locale)
        return message_key

    def _document(self, locale: str) -> LocaleDocument:
        if locale not in self._documents:
            self._documents[locale] = self.loader.load(
                self.directory / f"{locale}{self.extension}"
            )
        return self._documents[locale]


_default_messages: Optional[ErrorMessages] = None


def default_error_messages() -> ErrorMessages:
    """Shared ``ErrorMessages`` over the packaged message documents.

    Message documents are read-only package data, so one instance serves
    every context.
    """
    global _default_messages
    if _default_messages is None:
        _default_messages = ErrorMessages()
    return _default_messages
