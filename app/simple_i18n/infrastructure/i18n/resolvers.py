"""Key resolution inside a locale document.

``KeyResolver`` walks a dot separated key through a document, and
``ComplexFormSelector`` decides which branch of a complex entry
(plural/gender qualified sub-document) to descend into next.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from simple_i18n.infrastructure.i18n.models import ComplexFormTags

ALIAS_PREFIX = "@"

Resolved = Optional[Union[str, Mapping]]


class KeyResolver:
    """Resolves dot separated keys against a locale document."""

    @staticmethod
    def resolve(document: Optional[Mapping], key: str) -> Resolved:
        """Resolve ``key`` in ``document``.

        Every segment but the last must name a sub-document. At the last
        segment a string value starting with ``@`` is a shortcut alias: the
        rest of the string names a sibling key in the same sub-document,
        which is returned instead. Only one indirection is followed.

        Args:
            document: Parsed locale document (or sub-document).
            key: Dot separated path, e.g. "Hi.withName".

        Returns:
            The leaf string, a sub-document for complex entries, or None when
            nothing is found.
        """
        node: Any = document
        *parents, leaf = key.split(".")
        for segment in parents:
            if not isinstance(node, Mapping):
                return None
            node = node.get(segment)
        if not isinstance(node, Mapping):
            return None

        value = node.get(leaf)
        if isinstance(value, str) and value.startswith(ALIAS_PREFIX):
            value = node.get(value[len(ALIAS_PREFIX):])
        return KeyResolver._leaf(value)

    @staticmethod
    def _leaf(value: Any) -> Resolved:
        if isinstance(value, (str, Mapping)):
            return value
        # numeric leaves are rendered as text; lists, booleans and nulls are not entries
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None


class ComplexFormSelector:
    """Chooses the key suffix that selects a branch of a complex entry.

    | plural | gender | suffix                                         |
    |--------|--------|------------------------------------------------|
    | no     | no     | default                                        |
    | yes    | no     | plural.<one|other>                             |
    | no     | yes    | gender.<value>                                 |
    | yes    | yes    | plural.<one|other>.gender.<value> when the     |
    |        |        | entry has a plural child, else                 |
    |        |        | gender.<value>.plural.<one|other>              |
    """

    def __init__(self, tags: ComplexFormTags):
        self.tags = tags

    def select(
        self,
        node: Mapping,
        plural: Optional[bool] = None,
        gender: Optional[str] = None,
    ) -> str:
        tags = self.tags
        if plural is None and gender is None:
            return tags.default

        plural_path = None
        if plural is not None:
            plural_path = f"{tags.plural}.{tags.plural_form(plural)}"
        if gender is None:
            return plural_path

        gender_path = f"{tags.gender}.{gender}"
        if plural_path is None:
            return gender_path
        if tags.plural in node:
            return f"{plural_path}.{gender_path}"
        return f"{gender_path}.{plural_path}"
