"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- Locale documents (English and Spanish)
- ComplexFormTags
- TranslationRequest
"""

import copy
from typing import Dict, Optional

from simple_i18n.infrastructure.i18n import ComplexFormTags, TranslationRequest

EN_DOCUMENT = {
    "Hello": "Hello",
    "name": "Mickey Mouse",
    "Hi": {
        "noName": "Hi",
        "withName": "Hi, {{name}}!",
        "withSpouse": "Hi, {{ name }}! How is {{spouse}}?",
        "withRefSpouse": "Hi, {{Hi.firstName}}! How is {{ Hi.spouseName }}?",
        "firstName": "Mickey",
        "spouseName": "Minnie",
    },
    "dogs": {
        "default": "doggies",
        "plural": {"one": "dog", "other": "dogs"},
    },
    "3rdPersonPossessiveSingular": {
        "default": "her/his/its",
        "gender": {"female": "her", "male": "his", "neutral": "its"},
    },
    "Howdy": {
        "default": "Howdy!",
        "plural": {
            "one": {
                "gender": {
                    "female": "Howdy, ma'am!",
                    "male": "Howdy, sir!",
                    "neutral": "Howdy there!",
                }
            },
            "other": {
                "gender": {
                    "female": "Howdy, ladies!",
                    "male": "Howdy, gents!",
                    "neutral": "Howdy, y'all!",
                }
            },
        },
    },
    "Goodbye": {
        "default": "Goodbye!",
        "gender": {
            "female": {"plural": {"one": "Goodbye, ma'am!", "other": "Goodbye, ladies!"}},
            "male": {"plural": {"one": "Goodbye, sir!", "other": "Goodbye, gents!"}},
            "neutral": {"plural": {"one": "Goodbye there!", "other": "Goodbye, y'all!"}},
        },
    },
    "relativeReferenceSimple": {
        "one": "one",
        "two": "two",
        "three": "@two",
        "four": "@one",
        "chained": "@three",
        "broken": "@missing",
    },
    "relativeReferenceComplex": {
        "plural": {
            "one": {
                "gender": {
                    "female": "relative female {{ref}}",
                    "male": "relative male {{ref}}",
                    "neutral": "@male",
                }
            }
        }
    },
    "HelloReferencesOnly": {
        "plural": {
            "one": {"gender": {"male": "{{Hello}}, {{name}}! {{Goodbye}}"}},
        }
    },
    "unresolved": "Hello {{nobody.home}} and {{ name }}",
    "nested": {"outer": "<{{nested.inner}}>", "inner": "[{{Hello}}]"},
    "count": 42,
}

ES_DOCUMENT = {
    "Hi": {
        "withSpouse": "¡Hola, {{name}}! ¿Cómo es {{spouse}}?",
        "firstName": "Miguel",
    },
    "dogs": {
        "default": "perritos",
        "plural": {"one": "perro", "other": "perros"},
    },
    "onlySpanish": "Solo en español",
}


def make_locale_documents(
    en: Optional[dict] = None, es: Optional[dict] = None
) -> Dict[str, dict]:
    """Build the locale documents used across i18n tests.

    Args:
        en: English document (default: EN_DOCUMENT).
        es: Spanish document (default: ES_DOCUMENT).

    Returns:
        Mapping of locale identifier to a fresh copy of its document.
    """
    return {
        "en": copy.deepcopy(EN_DOCUMENT if en is None else en),
        "es": copy.deepcopy(ES_DOCUMENT if es is None else es),
    }


def make_complex_form_tags(**overrides: str) -> ComplexFormTags:
    """Create ComplexFormTags with optional tag overrides."""
    return ComplexFormTags(**overrides)


def make_translation_request(
    key: str = "Hello",
    locale: str = "en",
    plural: Optional[bool] = None,
    gender: Optional[str] = None,
    replacements: Optional[Dict[str, str]] = None,
) -> TranslationRequest:
    """Create a TranslationRequest instance."""
    return TranslationRequest(
        key=key,
        locale=locale,
        plural=plural,
        gender=gender,
        replacements=replacements or {},
    )
