"""Shared fixtures for the simple-i18n test suite."""

import json
from pathlib import Path
from typing import Dict

import pytest
import yaml


@pytest.fixture
def write_locales():
    """Write locale documents into a directory.

    Usage:
        write_locales(tmp_path, {"en": {...}, "es": {...}})
        write_locales(tmp_path, {"en": {...}}, extension=".yml")
    """

    def _write(directory: Path, documents: Dict[str, dict], extension: str = ".json") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        for locale, document in documents.items():
            path = directory / f"{locale}{extension}"
            with open(path, "w", encoding="utf-8") as f:
                if extension in (".yml", ".yaml"):
                    yaml.safe_dump(document, f, allow_unicode=True)
                else:
                    json.dump(document, f, ensure_ascii=False)
        return directory

    return _write
