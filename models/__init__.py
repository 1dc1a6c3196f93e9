"""Data models for the dictionary translator.

This package contains dataclass definitions for configuration and for master dictionary entries.
"""

from __future__ import annotations

from models.config_models import Config, DictionarySettings, General, TranslationSettings
from models.dictionary_models import (
    UNKNOWN_PLACEHOLDER,
    DictionaryDocument,
    DictionaryFormat,
    DictionaryStatistics,
    TranslationRecord,
)

__all__: list[str] = [
    "UNKNOWN_PLACEHOLDER",
    "Config",
    "DictionaryDocument",
    "DictionaryFormat",
    "DictionarySettings",
    "DictionaryStatistics",
    "General",
    "TranslationRecord",
    "TranslationSettings",
]
