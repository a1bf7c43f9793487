"""Locale document loading interface and implementations.

Defines the contract for discovering and parsing locale documents and
provides JSON and YAML based loaders.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Union

import yaml

from simple_i18n.infrastructure.i18n.errors import (
    DocumentParseError,
    LocaleFileMissingError,
)
from simple_i18n.infrastructure.i18n.models import LocaleDocument
from simple_i18n.infrastructure.logging import get_module_logger

logger = get_module_logger()


class DocumentLoader(ABC):
    """Abstract base for locale document loaders.

    A locale document is a file named ``<locale><extension>`` whose content
    parses into a (possibly nested) mapping. Implementations only define
    how raw text is parsed.
    """

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse raw document text.

        Raises:
            ValueError: If the text is not valid for this format.
        """

    def discover(self, directory: Union[str, Path], extension: str) -> List[str]:
        """List the locale identifiers available in a directory.

        Args:
            directory: Directory to scan.
            extension: File extension including the leading dot (e.g. ".json").

        Returns:
            Sorted locale identifiers (file names without the extension).
        """
        directory = Path(directory)
        locales = sorted(
            path.name[: -len(extension)]
            for path in directory.iterdir()
            if path.is_file() and path.name.endswith(extension) and path.name != extension
        )
        logger.info(
            "discovered_locales",
            directory=str(directory),
            extension=extension,
            locales=locales,
        )
        return locales

    def load(self, path: Union[str, Path]) -> LocaleDocument:
        """Load and parse one locale document.

        Args:
            path: Full path to the document.

        Returns:
            The parsed document.

        Raises:
            LocaleFileMissingError: If the file does not exist.
            DocumentParseError: If the file cannot be read or does not parse
                into a mapping.
        """
        path = Path(path)
        if not path.is_file():
            logger.error("locale_file_missing", file=str(path))
            raise LocaleFileMissingError(file=str(path))

        try:
            data = self.parse(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
            logger.error("locale_file_parse_error", file=str(path), error=str(e))
            raise DocumentParseError(file=str(path), msg=str(e)) from e

        if not isinstance(data, dict):
            logger.error(
                "invalid_document_format",
                file=str(path),
                expected="mapping",
                found=type(data).__name__,
            )
            raise DocumentParseError(file=str(path), msg="document root must be a mapping")

        logger.info("loaded_locale_document", file=str(path), entry_count=len(data))
        return data


class JSONDocumentLoader(DocumentLoader):
    """Loader for JSON locale documents."""

    def parse(self, text: str) -> Any:
        return json.loads(text)


class YAMLDocumentLoader(DocumentLoader):
    """Loader for YAML locale documents (parsed with ``yaml.safe_load``)."""

    def parse(self, text: str) -> Any:
        return yaml.safe_load(text)


YAML_EXTENSIONS = (".yml", ".yaml")


def loader_for_extension(extension: str) -> DocumentLoader:
    """Pick a loader from a file extension; anything not YAML is read as JSON."""
    if extension.lower() in YAML_EXTENSIONS:
        return YAMLDocumentLoader()
    return JSONDocumentLoader()
