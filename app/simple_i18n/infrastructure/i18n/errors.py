"""Exceptions raised by the translation system.

Every error carries a ``message_key`` that is looked up in the library's own
locale documents (see ``messages.py``) and a ``details`` dict whose values
are substituted into that message. The text is localized at the reporting
boundary (``I18nContext.report``); until then ``str(error)`` is the key.
"""

from typing import Any, Dict, Optional

from simple_i18n.infrastructure.operations import OperationStatus


class I18nError(Exception):
    """Base exception for all translation errors.

    Example:
        try:
            service.translate("greeting", locale="de")
        except I18nError as e:
            logger.error("translation_failed", code=e.code, error=str(e))
    """

    message_key: str = "errors.unknown"
    status: OperationStatus = OperationStatus.PERMANENT_ERROR

    def __init__(self, message_key: Optional[str] = None, **details: Any):
        if message_key is not None:
            self.message_key = message_key
        self.details: Dict[str, Any] = details
        self.message: str = self.message_key
        super().__init__(self.message)

    @property
    def code(self) -> str:
        """Machine readable error code (the exception class name)."""
        return type(self).__name__

    def localize(self, message: str) -> "I18nError":
        """Replace the error text with a rendered, localized message."""
        self.message = message
        self.args = (message,)
        return self


class MissingKeyError(I18nError):
    """Raised when translate is called without a key."""

    message_key = "errors.badParameter.missingKey"


class InvalidPluralError(I18nError):
    """Raised when the plural option is not a boolean or a number."""

    message_key = "errors.badParameter.badPlural"


class InvalidGenderError(I18nError):
    """Raised when the gender option is not one of the configured gender tags."""

    message_key = "errors.badParameter.badGender"


class InvalidReplacementsError(I18nError):
    """Raised when replacements are not a flat mapping of names to values."""

    message_key = "errors.badParameter.badReplacements"


class InvalidTagError(I18nError):
    """Raised when a structural tag name is set to anything but a non-empty string."""

    message_key = "errors.badParameter.expectsString"


class InvalidDirectoryError(I18nError):
    """Raised when the locale directory does not exist."""

    message_key = "errors.badLocalesDir"


class UnknownLocaleError(I18nError):
    """Raised when a locale is not in the context's discovered locale set.

    The same error type covers the locale override passed to translate and
    invalid current/default locale assignments; only the message key differs.
    """

    message_key = "errors.badSuppliedLocale"


class LocaleFileMissingError(I18nError):
    """Raised when a locale's backing document does not exist at load time."""

    message_key = "errors.badLocaleFile"
    status = OperationStatus.NOT_FOUND


class DocumentParseError(I18nError):
    """Raised when a locale document exists but does not parse into a mapping."""

    message_key = "errors.badDocument"


class KeyNotFoundError(I18nError):
    """Raised when a key resolves to nothing in the requested and default locales."""

    message_key = "errors.keyNotFound"
    status = OperationStatus.NOT_FOUND
