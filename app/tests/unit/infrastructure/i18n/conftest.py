"""Feature-level fixtures for i18n system tests.

Provides locale directories, contexts, translators and services built on
the documents from tests.factories.i18n.
"""

import pytest

from simple_i18n.infrastructure.i18n import (
    I18nContext,
    JSONDocumentLoader,
    TranslationService,
    Translator,
)
from tests.factories.i18n import make_locale_documents


@pytest.fixture
def locales_dir(tmp_path, write_locales):
    """Directory with en.json and es.json sample documents."""
    return write_locales(tmp_path / "locales", make_locale_documents())


@pytest.fixture
def counting_loader():
    """JSONDocumentLoader that records every document it loads."""

    class CountingLoader(JSONDocumentLoader):
        def __init__(self):
            self.loaded = []

        def load(self, path):
            self.loaded.append(path.name)
            return super().load(path)

    return CountingLoader()


@pytest.fixture
def context(locales_dir, counting_loader):
    """I18nContext over the sample documents, default locale "en"."""
    return I18nContext(directory=locales_dir, loader=counting_loader)


@pytest.fixture
def translator(context):
    return Translator(context)


@pytest.fixture
def service(translator):
    return TranslationService(translator=translator)
