"""Configuration data models for the dictionary translator.

Each dataclass corresponds to a section of the INI configuration file; field names match the
option names in that section.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = ["Config", "DictionarySettings", "General", "TranslationSettings"]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""
    SCRIPT_NAME: str = ""


@dataclass
class DictionarySettings:
    PATH: str = ""
    FORMAT: str = "json"
    OMIT_MISSING_KEYS: bool = False
    HASH_ALGORITHM: str = "sha1"


@dataclass
class TranslationSettings:
    TARGET_LANGUAGE: str = ""


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    DICTIONARY: DictionarySettings = field(default_factory=DictionarySettings)
    TRANSLATION: TranslationSettings = field(default_factory=TranslationSettings)
