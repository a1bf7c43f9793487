"""Translation service - one object per translation namespace.

Provides a class-based interface to the i18n system for hosts, and for
easier dependency injection and testing with mocks.
"""

from typing import Any, Callable, List, Optional

from simple_i18n.infrastructure.events import Event
from simple_i18n.infrastructure.i18n.context import ERROR_EVENT, I18nContext
from simple_i18n.infrastructure.i18n.translator import Translator
from simple_i18n.infrastructure.operations import OperationResult


class TranslationService:
    """Class-based translation service.

    Thin facade over an I18nContext and its Translator. Hosts that need
    several independent namespaces simply create several services.

    Usage:
        service = create_translation_service(directory="locales")

        service.translate("Hi.withName", replacements={"name": "Mickey"})
        service.t("dogs", plural=2)

        # Report errors to a handler instead of raising them
        service.on("error", lambda event: log(event.payload))
    """

    def __init__(
        self,
        context: Optional[I18nContext] = None,
        translator: Optional[Translator] = None,
    ):
        """Initialize translation service.

        Args:
            context: Translation namespace. Defaults to a context built from
                the environment settings (see factory.create_context).
            translator: Optional pre-configured Translator; when given, its
                context is used.
        """
        if translator is None:
            if context is None:
                # imported here: factory builds services on top of this module
                from simple_i18n.infrastructure.i18n.factory import create_context

                context = create_context()
            translator = Translator(context)
        self._translator = translator

    def translate(
        self,
        key: Optional[str],
        plural: Any = None,
        gender: Any = None,
        replacements: Any = None,
        locale: Optional[str] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        See Translator.translate.
        """
        return self._translator.translate(key, plural, gender, replacements, locale)

    t = translate

    def try_translate(
        self,
        key: Optional[str],
        plural: Any = None,
        gender: Any = None,
        replacements: Any = None,
        locale: Optional[str] = None,
    ) -> OperationResult:
        """Translate, returning an OperationResult instead of raising."""
        return self._translator.try_translate(key, plural, gender, replacements, locale)

    def has_message(self, key: str, locale: Optional[str] = None, **hints: Any) -> bool:
        return self._translator.has_message(key, locale, **hints)

    def get_available_locales(self) -> List[str]:
        return self.context.locales

    def reload(self) -> None:
        """Forget loaded documents and rescan the locale directory."""
        self.context.reload()

    # Error handlers

    def on(
        self,
        event: str,
        handler: Optional[Callable[[Event], Any]] = None,
    ):
        """Register a handler for ``event`` ("error" is the only event emitted).

        Can also be used as a decorator. While at least one error handler is
        attached, translation errors are passed to the handlers instead of
        being raised.
        """
        return self.context.events.register_event_handler(_event_type(event), handler)

    add_listener = on

    def once(self, event: str, handler: Optional[Callable[[Event], Any]] = None):
        """Like ``on`` but the handler is removed after its first call."""
        return self.context.events.register_event_handler(
            _event_type(event), handler, once=True
        )

    def remove_listener(self, event: str, handler: Callable[[Event], Any]) -> bool:
        return self.context.events.remove_handler(_event_type(event), handler)

    def remove_all_listeners(self, event: Optional[str] = None) -> None:
        self.context.events.clear_handlers(None if event is None else _event_type(event))

    def listeners(self, event: str) -> List[Callable[[Event], Any]]:
        return self.context.events.get_handlers_for_event(_event_type(event))

    @property
    def context(self) -> I18nContext:
        """The translation namespace: directory, locales, tags and documents."""
        return self._translator.context

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Provided for advanced use cases that need direct access
        to the Translator API.
        """
        return self._translator


def _event_type(event: str) -> str:
    return ERROR_EVENT if event == "error" else event
