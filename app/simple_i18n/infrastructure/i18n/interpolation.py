"""Placeholder handling for translated text.

Placeholders look like ``{{ name }}``; whitespace around the name is
allowed. Explicit replacements may use any name, self-referential lookups
only match word characters and dots.
"""

import re
from typing import Callable, Mapping, Optional

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([\w.]*)\s*\}\}")


def placeholder_pattern(name: str) -> "re.Pattern[str]":
    """Compile the pattern matching one named placeholder."""
    return re.compile(r"\{\{\s*" + re.escape(name) + r"\s*\}\}")


def apply_replacements(text: str, replacements: Optional[Mapping[str, str]]) -> str:
    """Replace every ``{{ name }}`` with its explicit value.

    Names without a placeholder are ignored and placeholders without a
    value are left as they are.
    """
    for name, value in (replacements or {}).items():
        text = placeholder_pattern(name).sub(lambda _match, value=value: value, text)
    return text


def find_placeholders(text: str) -> list:
    """Return the distinct placeholder tokens in ``text``, in order."""
    tokens = []
    for match in PLACEHOLDER_PATTERN.finditer(text):
        token = match.group(1)
        if token not in tokens:
            tokens.append(token)
    return tokens


def substitute_placeholders(text: str, lookup: Callable[[str], Optional[str]]) -> str:
    """Replace each remaining placeholder with ``lookup(token)``.

    Each token is looked up once; placeholders whose lookup returns None
    (or whose token is empty) are left untouched. Text produced by a lookup
    is not scanned again.
    """
    found = {}
    for token in find_placeholders(text):
        if token:
            found[token] = lookup(token)

    def _replace(match: "re.Match[str]") -> str:
        value = found.get(match.group(1))
        return match.group(0) if value is None else value

    return PLACEHOLDER_PATTERN.sub(_replace, text)
