"""Models for the master dictionary.

Defines the translation record, the structured dictionary document written by the JSON backend,
the supported dictionary formats and dictionary statistics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = [
    "UNKNOWN_PLACEHOLDER",
    "DictionaryDocument",
    "DictionaryFormat",
    "DictionaryStatistics",
    "TranslationRecord",
]

# Returned for phrases without a recorded translation unless missing keys are omitted.
UNKNOWN_PLACEHOLDER: str = "__UNKNOWN__"


class DictionaryFormat(StrEnum):
    """File formats a master dictionary can be stored in."""

    JSON = "json"
    PROPERTIES = "properties"
    XLIFF12 = "xliff12"

    @classmethod
    def from_name(cls, name: str | DictionaryFormat) -> DictionaryFormat:
        """Look up a format by value or member name, ignoring case.

        Raises:
            ValueError: If the name does not match any format.
        """
        if isinstance(name, DictionaryFormat):
            return name
        key: str = str(name).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        msg: str = f"Unknown dictionary format: '{name}'"
        raise ValueError(msg)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class TranslationRecord(DataClassJsonMixin):
    """A single dictionary entry.

    Attributes:
        calculated_key (str): Fingerprint of the normalized source phrase, or the raw key
            when the entry was read from a flat key-value file.
        source_phrase (str): Source-language phrase as first seen.
        target_phrase (str): Recorded translation. Empty while the phrase awaits translation.
    """

    calculated_key: str
    source_phrase: str = ""
    target_phrase: str = ""

    @property
    def is_translated(self) -> bool:
        return bool(self.target_phrase)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DictionaryDocument(DataClassJsonMixin):
    """Structured dictionary document.

    Attributes:
        source_language (str): Source language code of the recorded phrases.
        target_language (str): Target language code of the translations.
        objects (list[TranslationRecord]): Dictionary entries.
    """

    source_language: str | None = None
    target_language: str | None = None
    objects: list[TranslationRecord] = field(default_factory=list)


@dataclass
class DictionaryStatistics:
    """Dictionary usage statistics.

    Attributes:
        total_entries (int): Number of entries in the dictionary.
        translated_entries (int): Entries with a non-empty target phrase.
        missing_entries (int): Entries still waiting for a translation.
    """

    total_entries: int = 0
    translated_entries: int = 0
    missing_entries: int = 0
